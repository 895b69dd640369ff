import os
import tempfile
import unittest

from statbuf.adapters.readers import FileReader
from statbuf.adapters.writers import FileWriter
from statbuf.core.domain.stat_buffer import StatBuffer


class TestFileReader(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "values.txt")

    def tearDown(self):
        self.tmpdir.cleanup()

    def read(self, text: str):
        with open(self.path, "w") as f:
            f.write(text)
        reader = FileReader(self.path)
        try:
            return reader.read()
        finally:
            reader.close()

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            FileReader(os.path.join(self.tmpdir.name, "missing.txt"))

    def test_mixed_separators_and_comments(self):
        values = self.read("# header\n1, 2 3\n\n-4,5  # trailing\n 6\n")
        self.assertEqual(values, [1, 2, 3, -4, 5, 6])

    def test_bad_token(self):
        with self.assertRaises(ValueError) as ctx:
            self.read("1, 2\n3, x\n")
        self.assertIn(":2:", str(ctx.exception))

    def test_feeds_buffer(self):
        values = self.read("4 1 4 9 1\n")
        buf = StatBuffer.from_sequence(values)
        self.assertEqual(buf.mode(), 4)


class TestFileWriter(unittest.TestCase):
    def test_creates_directories_and_writes(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "out", "report.txt")
            writer = FileWriter(path)
            lines = StatBuffer.from_sequence([1, 1, 2]).summary().format_summary()
            writer.write("\n".join(lines) + "\n")
            writer.close()

            with open(path) as f:
                content = f.read()

        self.assertTrue(content.startswith("--- statbuf summary ---\n"))
        self.assertIn("  mode:     1\n", content)


if __name__ == "__main__":
    unittest.main()
