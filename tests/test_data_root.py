"""Tests for data-root resolution and ilib discovery.

Python 3.13+.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from ilibpack.config import EmitOptions
from ilibpack.data import find_ilib_root, resolve_data_root
from ilibpack.errors import DataRootError


class TestExplicitRoot:
    """Test data roots derived from an explicit ilib root."""

    def test_compiled_uses_locale(self, ilib_root: Path) -> None:
        """Default compilation uses <root>/locale."""
        options = EmitOptions(locales=("en-US",), ilib_root=str(ilib_root))

        assert resolve_data_root(options) == ilib_root / "locale"

    def test_uncompiled_uses_data_locale(self, tmp_path: Path) -> None:
        """Uncompiled checkouts keep data under data/locale."""
        (tmp_path / "data" / "locale").mkdir(parents=True)
        options = EmitOptions(locales=("en",), ilib_root=str(tmp_path), compilation="uncompiled")

        assert resolve_data_root(options) == tmp_path / "data" / "locale"

    def test_missing_directory_is_fatal(self, tmp_path: Path) -> None:
        """A configured root without data raises DataRootError."""
        options = EmitOptions(locales=("en",), ilib_root=str(tmp_path / "nowhere"))

        with pytest.raises(DataRootError, match="does not exist") as exc_info:
            resolve_data_root(options)

        assert exc_info.value.searched == (str(tmp_path / "nowhere" / "locale"),)


class TestDiscovery:
    """Test environment discovery of an ilib installation."""

    def test_environment_variable(self, ilib_root: Path, tmp_path: Path) -> None:
        """ILIB_ROOT is consulted first."""
        found, searched = find_ilib_root(environ={"ILIB_ROOT": str(ilib_root)}, start=tmp_path)

        assert found == ilib_root
        assert searched[0].startswith("$ILIB_ROOT=")

    def test_node_modules_in_parent(self, ilib_root: Path, tmp_path: Path) -> None:
        """node_modules/ilib is found from a nested working directory."""
        nested = tmp_path / "app" / "src"
        nested.mkdir(parents=True)

        found, _ = find_ilib_root(environ={}, start=nested)

        assert found == ilib_root.resolve()

    def test_resolve_discovered_root(self, ilib_root: Path, tmp_path: Path) -> None:
        """A discovered installation uses its locale directory."""
        options = EmitOptions(locales=("en",))

        assert resolve_data_root(options, environ={}, start=tmp_path) == (
            ilib_root.resolve() / "locale"
        )

    def test_nothing_found_is_fatal(self, tmp_path: Path) -> None:
        """No installation anywhere raises DataRootError listing the search."""
        options = EmitOptions(locales=("en",))

        with pytest.raises(DataRootError, match="Could not locate") as exc_info:
            resolve_data_root(options, environ={}, start=tmp_path)

        assert str(tmp_path.resolve() / "node_modules" / "ilib") in exc_info.value.searched
