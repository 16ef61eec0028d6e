"""Locale data access: data-root discovery, fragment reading, load tracking.

Submodules:
    fragments - FragmentReader protocol, PathFragmentReader, fragment_path
    root      - Data-root resolution from options or the environment
    results   - FragmentLoadResult and LoadSummary records

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from ilibpack.data.fragments import FragmentReader, PathFragmentReader, fragment_path
from ilibpack.data.results import FragmentLoadResult, LoadSummary
from ilibpack.data.root import find_ilib_root, resolve_data_root
from ilibpack.enums import LoadStatus

__all__ = [
    # Reader protocol and implementation
    "FragmentReader",
    "PathFragmentReader",
    "fragment_path",
    # Data root
    "find_ilib_root",
    "resolve_data_root",
    # Load tracking
    "LoadStatus",
    "FragmentLoadResult",
    "LoadSummary",
]
