"""Exception hierarchy for ilibpack.

Hierarchy:
    IlibPackError (base)
    ├─ DataRootError (locale data installation cannot be located; fatal)
    ├─ FragmentError (one fragment unreadable or corrupt; isolated per fragment)
    └─ InvalidLocaleError (malformed locale identifier; also a ValueError)

Only DataRootError and InvalidLocaleError escape an aggregation pass.
FragmentError is caught by the pass, logged, and recorded in the load summary.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

__all__ = [
    "DataRootError",
    "FragmentError",
    "IlibPackError",
    "InvalidLocaleError",
]


class IlibPackError(Exception):
    """Base exception for all ilibpack errors."""


class DataRootError(IlibPackError):
    """The locale data installation could not be located.

    Raised once per pass as a precondition failure. The host build is
    expected to fail.

    Attributes:
        searched: Locations that were examined, in search order
    """

    def __init__(self, message: str, *, searched: tuple[str, ...] = ()) -> None:
        """Initialize DataRootError.

        Args:
            message: Error message
            searched: Locations that were examined
        """
        super().__init__(message)
        self.searched = searched


class FragmentError(IlibPackError):
    """A single data fragment could not be read or decoded.

    Attributes:
        relative_path: Fragment path relative to the data root
    """

    def __init__(self, message: str, *, relative_path: str) -> None:
        """Initialize FragmentError.

        Args:
            message: Error message
            relative_path: Fragment path relative to the data root
        """
        super().__init__(message)
        self.relative_path = relative_path


class InvalidLocaleError(IlibPackError, ValueError):
    """A locale identifier could not be parsed.

    Attributes:
        locale_code: The identifier that failed to parse
    """

    def __init__(self, message: str, *, locale_code: str) -> None:
        """Initialize InvalidLocaleError.

        Args:
            message: Error message
            locale_code: The identifier that failed to parse
        """
        super().__init__(message)
        self.locale_code = locale_code
