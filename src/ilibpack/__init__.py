"""ilibpack - build-time locale data packaging for ilib bundles.

Turns a target locale list and the set of data features requested by an
application's sources into a minimal, ordered set of per-partition locale
bundles plus the manifests a runtime loader needs.

Public API:
    BuildSession - Feature registry, emission cache, two-phase emission
    EmitOptions - Options for one emission pass
    create_placeholder_files - Precreate empty partition resources
    emit_locale_data - Aggregate and emit for a session
    update_modules - Refresh in-memory host modules from emitted sources

Exceptions:
    IlibPackError - Base exception class
    DataRootError - Locale data installation not found (fatal)
    FragmentError - One fragment unreadable (isolated, recorded)
    InvalidLocaleError - Malformed locale identifier

Submodules:
    ilibpack.partitions - Locale chain resolution
    ilibpack.features - Feature classification
    ilibpack.data - Data-root resolution and fragment reading
    ilibpack.aggregation - Partition aggregation and category resolvers
    ilibpack.emission - Bundle emission and sessions
"""

from .config import EmitOptions
from .emission import BuildSession, create_placeholder_files, emit_locale_data, update_modules
from .errors import DataRootError, FragmentError, IlibPackError, InvalidLocaleError

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("ilibpack")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BuildSession",
    "DataRootError",
    "EmitOptions",
    "FragmentError",
    "IlibPackError",
    "InvalidLocaleError",
    "__version__",
    "create_placeholder_files",
    "emit_locale_data",
    "update_modules",
]
