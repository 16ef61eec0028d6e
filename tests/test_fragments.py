"""Tests for fragment paths and the filesystem fragment reader.

Python 3.13+.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from ilibpack.data import PathFragmentReader, fragment_path
from ilibpack.partitions import ROOT_PARTITION, Partition
from tests.helpers.ilib_tree import raw


class TestFragmentPath:
    """Test relative fragment path computation."""

    def test_root(self) -> None:
        """Root fragments live directly in the data root."""
        assert fragment_path(ROOT_PARTITION, "dateformat") == "dateformat.json"

    def test_language_region(self) -> None:
        """Components become directories."""
        assert fragment_path(Partition(("en", "US")), "dateformat") == "en/US/dateformat.json"

    def test_region_only(self) -> None:
        """und-region maps to und/<region>."""
        assert fragment_path(Partition(("und", "DE")), "localeinfo") == "und/DE/localeinfo.json"


class TestPathFragmentReader:
    """Test reading from a data directory."""

    def test_exists_and_read(self, data_root: Path) -> None:
        """Existing fragments are read verbatim."""
        reader = PathFragmentReader(data_root)

        assert reader.exists("en/dateformat.json")
        assert reader.read("en/dateformat.json") == raw("en/dateformat.json")

    def test_missing(self, data_root: Path) -> None:
        """Missing fragments do not exist and raise on read."""
        reader = PathFragmentReader(data_root)

        assert not reader.exists("fr/dateformat.json")
        with pytest.raises(FileNotFoundError):
            reader.read("fr/dateformat.json")

    def test_directory_is_not_a_fragment(self, data_root: Path) -> None:
        """Directories never count as fragments."""
        assert not PathFragmentReader(data_root).exists("en")

    def test_list_dir_sorted(self, data_root: Path) -> None:
        """Directory listings are sorted."""
        names = PathFragmentReader(data_root).list_dir("zoneinfo/Etc")

        assert names == ("GMT+1.json", "GMT-10.json", "UTC.json")

    def test_accepts_str_root(self, data_root: Path) -> None:
        """A string data root is converted to a Path."""
        reader = PathFragmentReader(str(data_root))  # type: ignore[arg-type]

        assert isinstance(reader.data_root, Path)
        assert reader.exists("dateformat.json")

    def test_describe_path(self, data_root: Path) -> None:
        """Diagnostics show the absolute location."""
        described = PathFragmentReader(data_root).describe_path("en/dateformat.json")

        assert described == str(data_root.resolve() / "en" / "dateformat.json")

    @pytest.mark.parametrize("relative_path", ["../package.json", "en/../../package.json"])
    def test_traversal_rejected(self, data_root: Path, relative_path: str) -> None:
        """Paths escaping the data root are rejected."""
        reader = PathFragmentReader(data_root)

        assert not reader.exists(relative_path)
        with pytest.raises(ValueError, match="Path traversal"):
            reader.read(relative_path)

    def test_absolute_rejected(self, data_root: Path) -> None:
        """Absolute paths are rejected."""
        with pytest.raises(ValueError, match="Absolute paths not allowed"):
            PathFragmentReader(data_root).read("/etc/passwd")
