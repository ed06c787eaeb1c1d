#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_license.py
"""Unit tests for license header reading and formatting."""

import pytest

from md2godoc.exceptions import FileError, FileNotFoundError
from md2godoc.license import format_license_header, read_license_lines


@pytest.mark.unit
class TestFormatLicenseHeader:
    """Tests for format_license_header."""

    def test_lines_become_comments(self) -> None:
        """Each line is prefixed and the block ends with a blank line."""
        assert format_license_header(["Copyright 2016", "MIT"]) == "// Copyright 2016\n// MIT\n\n"

    def test_blank_lines_are_bare_markers(self) -> None:
        """Blank lines carry no trailing space."""
        assert format_license_header(["a", "", "b"]) == "// a\n//\n// b\n\n"

    def test_indentation_kept(self) -> None:
        """Leading whitespace inside a line is preserved."""
        header = format_license_header(["    http://www.apache.org/licenses/LICENSE-2.0"])
        assert header == "//     http://www.apache.org/licenses/LICENSE-2.0\n\n"

    def test_empty_license(self) -> None:
        """No lines still yields the separating blank line."""
        assert format_license_header([]) == "\n"


@pytest.mark.unit
class TestReadLicenseLines:
    """Tests for read_license_lines."""

    def test_reads_lines(self, tmp_path) -> None:
        """Lines are returned without terminators."""
        path = tmp_path / "LICENSE.txt"
        path.write_bytes(b"Copyright 2016\r\n\r\nMIT\n")
        assert read_license_lines(path) == ["Copyright 2016", "", "MIT"]

    def test_accepts_str_path(self, tmp_path) -> None:
        """A str path works as well as a Path."""
        path = tmp_path / "LICENSE.txt"
        path.write_text("MIT\n", encoding="utf-8")
        assert read_license_lines(str(path)) == ["MIT"]

    def test_missing_file(self, tmp_path) -> None:
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError) as exc_info:
            read_license_lines(tmp_path / "LICENSE.txt")
        assert exc_info.value.file_path.endswith("LICENSE.txt")

    def test_directory_is_file_error(self, tmp_path) -> None:
        """An unreadable path raises FileError."""
        with pytest.raises(FileError):
            read_license_lines(tmp_path)
