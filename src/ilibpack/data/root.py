"""Data-root resolution.

The data root is the "locale" directory of an ilib installation. It comes
either from an explicit ilib root in the options or from discovery:

    1. ILIB_ROOT environment variable
    2. node_modules/ilib/package.json in the working directory or a parent

An unresolvable data root is fatal for the pass.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from ilibpack.constants import ILIB_ROOT_ENV_VAR
from ilibpack.errors import DataRootError

if TYPE_CHECKING:
    from ilibpack.config import EmitOptions

__all__ = [
    "find_ilib_root",
    "resolve_data_root",
]

logger = logging.getLogger(__name__)


def find_ilib_root(
    *,
    environ: Mapping[str, str] | None = None,
    start: Path | None = None,
) -> tuple[Path | None, tuple[str, ...]]:
    """Discover an ilib installation.

    Args:
        environ: Environment mapping (default: os.environ)
        start: Directory to start the node_modules search from (default: cwd)

    Returns:
        Tuple of (ilib root or None, locations searched in order)
    """
    env = os.environ if environ is None else environ
    searched: list[str] = []

    explicit = env.get(ILIB_ROOT_ENV_VAR)
    if explicit:
        searched.append(f"${ILIB_ROOT_ENV_VAR}={explicit}")
        candidate = Path(explicit)
        if candidate.is_dir():
            return candidate, tuple(searched)

    directory = (start if start is not None else Path.cwd()).resolve()
    for parent in (directory, *directory.parents):
        candidate = parent / "node_modules" / "ilib"
        searched.append(str(candidate))
        if (candidate / "package.json").is_file():
            return candidate, tuple(searched)
    return None, tuple(searched)


def resolve_data_root(
    options: EmitOptions,
    *,
    environ: Mapping[str, str] | None = None,
    start: Path | None = None,
) -> Path:
    """Compute the locale data directory for a pass.

    With an explicit ilib root, "uncompiled" compilation selects
    <ilib_root>/data/locale and anything else <ilib_root>/locale.
    A discovered installation always uses its locale directory.

    Raises:
        DataRootError: If no installation is found or the data directory
            does not exist
    """
    if options.ilib_root:
        subdir = Path("data", "locale") if options.is_uncompiled else Path("locale")
        data_root = Path(options.ilib_root) / subdir
        searched: tuple[str, ...] = (str(data_root),)
    else:
        ilib_root, searched = find_ilib_root(environ=environ, start=start)
        if ilib_root is None:
            msg = (
                "Could not locate the ilib locale data. "
                f"Set the ilib root in the options or the {ILIB_ROOT_ENV_VAR} "
                "environment variable."
            )
            raise DataRootError(msg, searched=searched)
        data_root = ilib_root / "locale"

    if not data_root.is_dir():
        msg = f"Locale data directory does not exist: {data_root}"
        raise DataRootError(msg, searched=searched)

    logger.debug("Using locale data root %s", data_root)
    return data_root
