import os

from statbuf.core.ports.writer import WriterPort

class FileWriter(WriterPort):
    def __init__(self, filename: str, mode: str = "w"):
        """
        Text file writer adapter.
            :param filename: Path to the file
            :param mode: File mode, default is write-text
        """
        dirname = os.path.dirname(filename)
        if dirname:
            os.makedirs(dirname, exist_ok=True)
        self.file = open(filename, mode)

    def write(self, text: str):
        self.file.write(text)
        self.file.flush()  # ensure it's written immediately

    def close(self):
        self.file.close()
