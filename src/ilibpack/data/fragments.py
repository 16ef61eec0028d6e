"""Fragment reading for the locale data tree.

Fragments are addressed by '/'-separated paths relative to the data root
(e.g. "en/US/dateformat.json", "zoneinfo/zonetab.json"). The same relative
paths appear in the local manifest, so the reader never exposes absolute
paths to the aggregation layer.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, Protocol

from ilibpack.constants import FRAGMENT_SUFFIX

if TYPE_CHECKING:
    from ilibpack.partitions import Partition

__all__ = [
    "FragmentReader",
    "PathFragmentReader",
    "fragment_path",
]


def fragment_path(partition: Partition, feature: str) -> str:
    """Relative path of a generic feature fragment within a partition.

    Example:
        >>> from ilibpack.partitions import ROOT_PARTITION, Partition
        >>> fragment_path(Partition(("en", "US")), "dateformat")
        'en/US/dateformat.json'
        >>> fragment_path(ROOT_PARTITION, "dateformat")
        'dateformat.json'
    """
    filename = feature + FRAGMENT_SUFFIX
    if partition.is_root:
        return filename
    return f"{partition.path}/{filename}"


class FragmentReader(Protocol):
    """Protocol for reading fragments from a locale data tree.

    Implementations may be backed by a filesystem, an archive, or an
    in-memory mapping. All paths are '/'-separated and relative to the
    data root.
    """

    def exists(self, relative_path: str) -> bool:
        """Check whether a fragment exists."""

    def read(self, relative_path: str) -> str:
        """Read a fragment's raw text.

        Raises:
            OSError: If the fragment cannot be read
            ValueError: If the fragment is not valid UTF-8 or the path is unsafe
        """

    def list_dir(self, relative_path: str) -> tuple[str, ...]:
        """List entry names of a directory, sorted.

        Raises:
            OSError: If the directory cannot be listed
        """

    def describe_path(self, relative_path: str) -> str:
        """Return human-readable path for diagnostics."""
        return relative_path


@dataclass(frozen=True, slots=True)
class PathFragmentReader:
    """File system fragment reader rooted at a data directory.

    Security:
        Relative paths that are absolute or contain ".." are rejected, and
        every resolved path is validated against the data root.

    Attributes:
        data_root: Directory holding the locale data tree
    """

    data_root: Path
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache the resolved data root."""
        object.__setattr__(self, "data_root", Path(self.data_root))
        object.__setattr__(self, "_resolved_root", Path(self.data_root).resolve())

    def _resolve(self, relative_path: str) -> Path:
        """Map a relative fragment path to an absolute path under the root.

        Raises:
            ValueError: If the path is absolute or escapes the data root
        """
        posix = PurePosixPath(relative_path)
        if posix.is_absolute() or relative_path.startswith("\\"):
            msg = f"Absolute paths not allowed for fragments: '{relative_path}'"
            raise ValueError(msg)
        if ".." in posix.parts:
            msg = f"Path traversal sequences not allowed for fragments: '{relative_path}'"
            raise ValueError(msg)
        full_path = (self._resolved_root / posix).resolve()
        try:
            full_path.relative_to(self._resolved_root)
        except ValueError:
            msg = f"Path traversal detected: '{relative_path}' escapes data root"
            raise ValueError(msg) from None
        return full_path

    def exists(self, relative_path: str) -> bool:
        """Check whether a fragment file exists under the data root."""
        try:
            return self._resolve(relative_path).is_file()
        except ValueError:
            return False

    def read(self, relative_path: str) -> str:
        """Read a fragment file as UTF-8 text."""
        return self._resolve(relative_path).read_text(encoding="utf-8")

    def list_dir(self, relative_path: str) -> tuple[str, ...]:
        """List entry names of a directory under the data root, sorted."""
        return tuple(sorted(entry.name for entry in self._resolve(relative_path).iterdir()))

    def describe_path(self, relative_path: str) -> str:
        """Return the absolute path of a fragment for diagnostics."""
        return str(self._resolved_root / PurePosixPath(relative_path))
