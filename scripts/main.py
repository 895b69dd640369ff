import logging
import sys

from statbuf.adapters.readers import FileReader
from statbuf.adapters.writers import FileWriter
from statbuf.core.config import Config
from statbuf.core.domain.errors import CapacityExceededError
from statbuf.core.domain.stat_buffer import StatBuffer


logging.basicConfig(
    level=logging.ERROR,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    cfg = Config("./configs/config.yaml")
    logging.getLogger().setLevel(cfg.log_level)

    if cfg.input_filename is None:
        logger.error("No input.filename configured")
        sys.exit(1)

    reader = FileReader(cfg.input_filename)
    try:
        observations = reader.read()
    finally:
        reader.close()

    buf = StatBuffer(cfg.capacity, std_dev_method=cfg.std_dev_method)
    for value in observations:
        try:
            buf.append(value)
        except CapacityExceededError as e:
            logger.error("Stopped ingesting: %s", e)
            break

    logger.info("Buffer: %s", buf)
    report = "\n".join(buf.summary().format_summary()) + "\n"

    if cfg.output_filename is None:
        print(report, end="")
        return

    writer = FileWriter(cfg.output_filename)
    try:
        writer.write(report)
    finally:
        writer.close()


if __name__ == "__main__":
    main()
