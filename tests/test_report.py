import shutil
import tempfile
import unittest
from pathlib import Path

from unused_tree.config import ReportWriteError
from unused_tree.core.report import format_report, write_report


class TestWriteReport(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.test_path = Path(self.test_dir)

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_format_report(self):
        self.assertEqual(format_report("/p", "└─a.js\n"), "/p\n└─a.js\n")

    def test_creates_missing_directory(self):
        target = self.test_path / "nested" / "report.txt"
        self.assertEqual(write_report(target, "/p", "└─a.js\n"), target)
        self.assertEqual(target.read_text(encoding="utf-8"), "/p\n└─a.js\n")

    def test_replaces_existing_file(self):
        target = self.test_path / "report.txt"
        target.write_text("old content that is much longer than the new one")
        write_report(target, "/p", "")
        self.assertEqual(target.read_text(encoding="utf-8"), "/p\n")

    def test_error_is_wrapped(self):
        target = self.test_path / "report.txt"
        target.mkdir()
        with self.assertRaises(ReportWriteError):
            write_report(target, "/p", "")


if __name__ == '__main__':
    unittest.main()
