"""Shared constants for ilibpack.

Centralizes the file names, directory names and token sets used by the
resolvers and the emitter so that every module agrees on the on-disk and
in-bundle layout.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Partitions
    "ROOT_PARTITION_NAME",
    "UNDETERMINED_LANGUAGE",
    # Options
    "DEFAULT_TEMP_DIR",
    "OUTPUT_SUBDIR",
    "UNCOMPILED",
    "ILIB_ROOT_ENV_VAR",
    # Data layout
    "FRAGMENT_SUFFIX",
    "LANG2CHARSET_FILE",
    "CHARSET_ALIASES_FILE",
    "CHARSET_DIR",
    "CHARMAPS_DIR",
    "ZONEINFO_DIR",
    "ZONETAB_FILE",
    "GENERIC_ZONE_SUBDIRS",
    "NORMALIZATION_FORMS",
    "ALL_SCRIPTS",
    # Output layout
    "LOCAL_MANIFEST_FILE",
    "REMOTE_MANIFEST_FILE",
    "BUNDLE_SUFFIX",
    "RUNTIME_NAME",
    "STRICT_PREFIX",
]

# ============================================================================
# PARTITIONS
# ============================================================================

ROOT_PARTITION_NAME: str = "root"
"""Name of the least specific partition, shared by every locale."""

UNDETERMINED_LANGUAGE: str = "und"
"""Language subtag used for region-only partitions (und-US)."""

# ============================================================================
# OPTIONS
# ============================================================================

DEFAULT_TEMP_DIR: str = "assets"
"""Default directory for placeholder and emitted files."""

OUTPUT_SUBDIR: str = "locales"
"""Sub-directory of the output directory that receives all emitted files."""

UNCOMPILED: str = "uncompiled"
"""Compilation mode selecting the raw data/locale tree of an ilib checkout."""

ILIB_ROOT_ENV_VAR: str = "ILIB_ROOT"
"""Environment variable consulted when no ilib root is configured."""

# ============================================================================
# DATA LAYOUT
# ============================================================================

FRAGMENT_SUFFIX: str = ".json"

LANG2CHARSET_FILE: str = "lang2charset.json"
CHARSET_ALIASES_FILE: str = "charsetaliases.json"
CHARSET_DIR: str = "charset"
CHARMAPS_DIR: str = "charmaps"

ZONEINFO_DIR: str = "zoneinfo"
ZONETAB_FILE: str = "zoneinfo/zonetab.json"
GENERIC_ZONE_SUBDIRS: tuple[str, ...] = ("Etc",)
"""Regional subtrees of zoneinfo/ whose zones are included as generic zones."""

NORMALIZATION_FORMS: tuple[str, ...] = ("nfc", "nfd", "nfkc", "nfkd")

ALL_SCRIPTS: str = "all"
"""Pseudo-script naming the aggregate table of a normalization form."""

# ============================================================================
# OUTPUT LAYOUT
# ============================================================================

LOCAL_MANIFEST_FILE: str = "localmanifest.js"
REMOTE_MANIFEST_FILE: str = "remotemanifest.js"
BUNDLE_SUFFIX: str = ".js"

RUNTIME_NAME: str = "ilib"
"""Parameter name of the installLocale entry point in emitted bundles."""

STRICT_PREFIX: str = '"use strict";'
"""Prefix applied to in-memory host modules refreshed from emitted sources."""
