"""Placeholder precreation.

Before any feature is known, the host needs stable files to point its
dependency graph at. One empty resource is created per partition of every
target locale, plus the synchronous-load manifest. Existing files are never
overwritten, so repeated calls are safe.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ilibpack.constants import BUNDLE_SUFFIX, LOCAL_MANIFEST_FILE, OUTPUT_SUBDIR
from ilibpack.emission.emitter import render_manifest
from ilibpack.partitions import partitions_for_locale

__all__ = ["create_placeholder_files", "placeholder_names"]

logger = logging.getLogger(__name__)


def placeholder_names(locales: Iterable[str]) -> list[str]:
    """File names precreated for a locale list, without duplicates.

    Example:
        >>> placeholder_names(["en-US", "en-GB"])
        ['root.js', 'en.js', 'en-US.js', 'und-US.js', 'en-GB.js', 'und-GB.js', 'localmanifest.js']
    """
    names: dict[str, None] = {}
    for locale in locales:
        for partition in partitions_for_locale(locale):
            names[partition.name + BUNDLE_SUFFIX] = None
    names[LOCAL_MANIFEST_FILE] = None
    return list(names)


def create_placeholder_files(locales: Iterable[str], temp_dir: str | Path) -> list[str]:
    """Create empty partition resources and the local manifest.

    Args:
        locales: Target locale identifiers
        temp_dir: Directory whose locales/ sub-directory receives the files

    Returns:
        Names of all placeholder files, whether created now or already present

    Raises:
        InvalidLocaleError: If a locale identifier cannot be parsed
        OSError: If a file cannot be created
    """
    names = placeholder_names(locales)
    locales_dir = Path(temp_dir) / OUTPUT_SUBDIR
    locales_dir.mkdir(parents=True, exist_ok=True)

    for name in names:
        target = locales_dir / name
        if target.exists():
            continue
        text = render_manifest([]) if name == LOCAL_MANIFEST_FILE else ""
        target.write_text(text, encoding="utf-8")
        logger.debug("Created placeholder %s", target)
    return names
