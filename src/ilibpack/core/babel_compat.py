"""Babel access layer for locale-tag parsing and CLDR likely subtags.

Provides centralized, lazy import infrastructure for Babel so that importing
ilibpack does not load CLDR data until a pass actually needs it, and so that
a missing Babel installation produces one consistent error message.

Usage Pattern:
    from ilibpack.core.babel_compat import get_locale_parser

    def my_function(locale_code: str) -> None:
        parse_locale = get_locale_parser()  # Raises BabelImportError if missing
        language, territory, script, variant = parse_locale(locale_code)[:4]

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import Protocol

__all__ = [
    "BabelImportError",
    "LocaleParserProtocol",
    "get_likely_subtags",
    "get_locale_parser",
    "is_babel_available",
    "require_babel",
]


class LocaleParserProtocol(Protocol):
    """Protocol for babel.core.parse_locale.

    Returns (language, territory, script, variant) and, when the identifier
    carries a modifier, a fifth element.
    """

    def __call__(self, identifier: str, sep: str = "_") -> tuple[str | None, ...]:
        """Parse a locale identifier into its components."""
        ...  # pylint: disable=unnecessary-ellipsis


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed."""

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for locale parsing and CLDR data. "
            "Install with: pip install Babel"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Returns:
        True if Babel is installed and importable, False otherwise.
    """
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_parser() -> LocaleParserProtocol:
    """Get babel.core.parse_locale.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_locale_parser")
    from babel.core import parse_locale  # noqa: PLC0415

    return parse_locale


@lru_cache(maxsize=1)
def get_likely_subtags() -> Mapping[str, str]:
    """Get the CLDR likely-subtags table bundled with Babel.

    Keys and values are underscore-separated identifiers, for example
    ``"en" -> "en_Latn_US"`` and ``"und_RU" -> "ru_Cyrl_RU"``.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_likely_subtags")
    from babel.core import get_global  # noqa: PLC0415

    return get_global("likely_subtags")
