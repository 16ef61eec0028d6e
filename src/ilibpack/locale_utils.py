"""Locale utilities: identifier normalization, tag parsing, script inference.

Centralizes locale handling so that every resolver derives partitions from
the same parsed representation. Parsing and likely-subtag data come from
Babel; this module only adapts them to the LocaleTag value type.

Python 3.13+.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass

from ilibpack.core.babel_compat import get_likely_subtags, get_locale_parser
from ilibpack.errors import InvalidLocaleError

__all__ = [
    "LocaleTag",
    "get_likely_script",
    "normalize_locale",
    "parse_locale_tag",
]


@dataclass(frozen=True, slots=True)
class LocaleTag:
    """Parsed locale identifier.

    Attributes:
        language: Lowercase language subtag (e.g., "en", "und")
        script: Title-case script subtag (e.g., "Latn"), if present
        region: Uppercase region subtag (e.g., "US", "419"), if present
    """

    language: str
    script: str | None = None
    region: str | None = None

    def __str__(self) -> str:
        """Return the hyphen-joined BCP-47 form (e.g., "zh-Hans-CN")."""
        return "-".join(part for part in (self.language, self.script, self.region) if part)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=256)
def parse_locale_tag(locale_code: str) -> LocaleTag:
    """Parse a locale identifier into a LocaleTag.

    Accepts BCP-47 (en-US) or POSIX (en_US) separators. Variants and
    modifiers are dropped because partitions never use them.

    Args:
        locale_code: Locale identifier

    Returns:
        Parsed, case-normalized LocaleTag

    Raises:
        InvalidLocaleError: If the identifier is empty or malformed

    Example:
        >>> parse_locale_tag("zh-hans-cn")
        LocaleTag(language='zh', script='Hans', region='CN')
    """
    if not locale_code or not locale_code.strip():
        msg = "Locale code cannot be empty"
        raise InvalidLocaleError(msg, locale_code=locale_code)

    parse_locale = get_locale_parser()
    try:
        language, territory, script, _variant = parse_locale(normalize_locale(locale_code))[:4]
    except ValueError as e:
        msg = f"Invalid locale identifier '{locale_code}': {e}"
        raise InvalidLocaleError(msg, locale_code=locale_code) from e

    if not language:
        msg = f"Invalid locale identifier '{locale_code}': missing language"
        raise InvalidLocaleError(msg, locale_code=locale_code)
    return LocaleTag(language=language, script=script or None, region=territory or None)


def get_likely_script(tag: LocaleTag) -> str | None:
    """Return the script a locale is written in.

    An explicit script wins. Otherwise the CLDR likely-subtags table is
    consulted from the most to the least specific key.

    Example:
        >>> get_likely_script(parse_locale_tag("sr-RS"))
        'Cyrl'
        >>> get_likely_script(parse_locale_tag("en-US"))
        'Latn'
    """
    if tag.script:
        return tag.script

    likely = get_likely_subtags()
    candidates = []
    if tag.region:
        candidates.append(f"{tag.language}_{tag.region}")
    candidates.append(tag.language)
    if tag.region:
        candidates.append(f"und_{tag.region}")

    parse_locale = get_locale_parser()
    for key in candidates:
        full = likely.get(key)
        if full is None:
            continue
        script = parse_locale(full)[2]
        if script:
            return script
    return None
