import logging
import os
import tempfile
import unittest

from statbuf.core.config import Config, DEFAULT_STD_DEV_METHOD
from statbuf.core.domain.stat_buffer import DEFAULT_CAPACITY, StdDevMethod


class TestConfig(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "config.yaml")

    def tearDown(self):
        self.tmpdir.cleanup()

    def write(self, text: str) -> Config:
        with open(self.path, "w") as f:
            f.write(text)
        return Config(self.path)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            Config(os.path.join(self.tmpdir.name, "nope.yaml"))

    def test_defaults(self):
        cfg = self.write("")

        self.assertEqual(cfg.capacity, DEFAULT_CAPACITY)
        self.assertEqual(cfg.std_dev_method, DEFAULT_STD_DEV_METHOD)
        self.assertIsNone(cfg.input_filename)
        self.assertIsNone(cfg.output_filename)
        self.assertEqual(cfg.log_level, logging.ERROR)

    def test_overrides(self):
        cfg = self.write(
            "log_level: debug\n"
            "buffer:\n"
            "  capacity: 12\n"
            "  std_dev_method: RUNNING\n"
            "input:\n"
            "  filename: in.txt\n"
            "output:\n"
            "  filename: out/report.txt\n"
        )

        self.assertEqual(cfg.capacity, 12)
        self.assertEqual(cfg.std_dev_method, StdDevMethod.RUNNING)
        self.assertEqual(cfg.input_filename, "in.txt")
        self.assertEqual(cfg.output_filename, "out/report.txt")
        self.assertEqual(cfg.log_level, logging.DEBUG)
        self.assertEqual(cfg.get("buffer")["capacity"], 12)

    def test_unknown_std_dev_method_falls_back(self):
        cfg = self.write("buffer:\n  std_dev_method: welford\n")
        self.assertEqual(cfg.std_dev_method, DEFAULT_STD_DEV_METHOD)

    def test_unknown_log_level_falls_back(self):
        cfg = self.write("log_level: loud\n")
        self.assertEqual(cfg.log_level, logging.ERROR)

    def test_negative_capacity(self):
        cfg = self.write("buffer:\n  capacity: -4\n")
        with self.assertRaises(ValueError):
            cfg.capacity


if __name__ == "__main__":
    unittest.main()
