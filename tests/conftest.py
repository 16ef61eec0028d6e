"""Pytest configuration for the ilibpack test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 200 examples
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile

Fixtures:
- ilib_root: a miniature ilib installation under tmp_path with generic
  locale files, zoneinfo, charsets, charmaps and normalization tables
- data_root: its locale/ directory
"""

from __future__ import annotations


import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from tests.helpers.ilib_tree import build_ilib_tree

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


@pytest.fixture
def ilib_root(tmp_path: Path) -> Path:
    """Miniature ilib installation."""
    root = tmp_path / "node_modules" / "ilib"
    build_ilib_tree(root)
    return root


@pytest.fixture
def data_root(ilib_root: Path) -> Path:
    """locale/ directory of the miniature ilib installation."""
    return ilib_root / "locale"


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    """Output directory for emitted files."""
    return tmp_path / "assets"
