"""Emission options.

Provides a single frozen dataclass that encapsulates the options a host
build passes to one emission pass, and a helper that accepts the option
dictionaries hosts typically carry (snake_case or camelCase keys).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ilibpack.constants import DEFAULT_TEMP_DIR, OUTPUT_SUBDIR, UNCOMPILED

__all__ = ["EmitOptions"]

_KEY_ALIASES: dict[str, str] = {
    "ilibRoot": "ilib_root",
    "tempDir": "temp_dir",
    "outputDir": "output_dir",
}


@dataclass(frozen=True, slots=True)
class EmitOptions:
    """Immutable options for one emission pass.

    Attributes:
        locales: Target locale identifiers (required, non-empty)
        ilib_root: Path to the ilib installation. None means discover it
            from the environment.
        temp_dir: Directory for placeholder files (default: "assets")
        output_dir: Directory for emitted files. Defaults to temp_dir so
            that emitted bundles overwrite the placeholders the host graph
            already points at.
        compilation: "uncompiled" selects <ilib_root>/data/locale instead
            of <ilib_root>/locale
        debug: Trace the pass at INFO level instead of DEBUG

    Example:
        >>> options = EmitOptions(locales=("en-US", "de-DE"), ilib_root="node_modules/ilib")
        >>> options.locales_dir
        PosixPath('assets/locales')
    """

    locales: tuple[str, ...]
    ilib_root: str | None = None
    temp_dir: str = DEFAULT_TEMP_DIR
    output_dir: str | None = None
    compilation: str | None = None
    debug: bool = False
    _locales_dir: Path = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Normalize and validate option values.

        Raises:
            ValueError: If locales is empty or contains an empty entry,
                or if temp_dir is empty
        """
        locales = (self.locales,) if isinstance(self.locales, str) else tuple(self.locales)
        if not locales:
            msg = "At least one locale is required"
            raise ValueError(msg)
        if any(not locale for locale in locales):
            msg = f"Locale codes cannot be empty: {locales!r}"
            raise ValueError(msg)
        if not self.temp_dir:
            msg = "temp_dir cannot be empty"
            raise ValueError(msg)
        object.__setattr__(self, "locales", locales)
        base = self.output_dir if self.output_dir else self.temp_dir
        object.__setattr__(self, "_locales_dir", Path(base) / OUTPUT_SUBDIR)

    @property
    def is_uncompiled(self) -> bool:
        """Check if the raw (uncompiled) data tree is requested."""
        return self.compilation == UNCOMPILED

    @property
    def locales_dir(self) -> Path:
        """Directory receiving the manifests and partition bundles."""
        return self._locales_dir

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> EmitOptions:
        """Build options from a host option dictionary.

        Unknown keys are ignored so that hosts can pass their full plugin
        configuration.

        Example:
            >>> EmitOptions.from_mapping({"locales": ["en-US"], "tempDir": "build"}).temp_dir
            'build'
        """
        known = {"locales", "ilib_root", "temp_dir", "output_dir", "compilation", "debug"}
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = _KEY_ALIASES.get(key, key)
            if name in known and value is not None:
                kwargs[name] = value
        if "locales" not in kwargs:
            msg = "options must provide 'locales'"
            raise ValueError(msg)
        kwargs["locales"] = (
            (kwargs["locales"],) if isinstance(kwargs["locales"], str) else tuple(kwargs["locales"])
        )
        kwargs["debug"] = bool(kwargs.get("debug", False))
        return cls(**kwargs)
