import os
import re
from typing import List

from statbuf.core.ports.reader import ReaderPort

_SEPARATORS = re.compile(r"[,\s]+")


class FileReader(ReaderPort):
    def __init__(self, filename: str, mode: str = "r"):
        """
        Text file reader adapter.
            :param filename: Path to a file of integers separated by commas and/or whitespace
            :param mode: File mode, default is read-text
        """
        if not os.path.exists(filename):
            raise FileNotFoundError(f"File {filename} does not exist")
        self.filename = filename
        self.file = open(filename, mode)

    def read(self) -> List[int]:
        """
        Read every integer in the file, in order. Blank lines and '#' comments are skipped.
        """
        values: List[int] = []
        for lineno, line in enumerate(self.file, start=1):
            line = line.split("#", 1)[0].strip()
            if not line:
                continue
            for token in _SEPARATORS.split(line):
                if not token:
                    continue
                try:
                    values.append(int(token))
                except ValueError:
                    raise ValueError(
                        f"{self.filename}:{lineno}: not an integer: {token!r}"
                    )
        return values

    def close(self):
        self.file.close()
