"""Tests for path text conversion and size helpers."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from filman.errors import PathHasNoFilenameError, ReadDirectoryError, UnicodePathError
from filman.paths import file_size, filename, full_path_str, human_size


class PathHelperTests(unittest.TestCase):
    def test_filename_returns_last_component(self) -> None:
        self.assertEqual(filename(Path("/tmp/project/notes.txt")), "notes.txt")

    def test_filename_of_root_has_no_filename(self) -> None:
        with self.assertRaises(PathHasNoFilenameError):
            filename(Path("/"))

    def test_surrogate_escaped_names_are_not_text(self) -> None:
        bad = Path("/tmp/bad\udcff")

        with self.assertRaises(UnicodePathError):
            filename(bad)
        with self.assertRaises(UnicodePathError):
            full_path_str(bad)

    def test_full_path_str_keeps_whole_path(self) -> None:
        self.assertEqual(full_path_str(Path("/tmp/a/b")), "/tmp/a/b")

    def test_file_size_reads_byte_count(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "five.txt"
            target.write_bytes(b"12345")

            self.assertEqual(file_size(target), 5)

    def test_file_size_of_missing_path_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(ReadDirectoryError):
                file_size(Path(tmp) / "missing")

    def test_human_size_uses_binary_units_and_blanks_unknown(self) -> None:
        self.assertEqual(human_size(2048), "2.0 KiB")
        self.assertEqual(human_size(None), "")


if __name__ == "__main__":
    unittest.main()
