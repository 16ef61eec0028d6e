"""Core infrastructure shared by the resolver and emission layers."""

from .babel_compat import (
    BabelImportError,
    get_likely_subtags,
    get_locale_parser,
    is_babel_available,
    require_babel,
)

__all__ = [
    "BabelImportError",
    "get_likely_subtags",
    "get_locale_parser",
    "is_babel_available",
    "require_babel",
]
