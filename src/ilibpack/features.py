"""Feature classification: requested feature name to resolution category.

Classification rules, in priority order:
    1. "charset" / "charmaps"               -> CHARSET / CHARMAPS
    2. nfc|nfd|nfkc|nfkd, optional /script  -> NORMALIZATION
    3. "zoneinfo"                           -> ZONEINFO
    4. anything else                        -> GENERIC (data-file basename)

Classification is deterministic and side-effect free.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ilibpack.enums import FeatureCategory

__all__ = [
    "FeatureRequest",
    "classify_feature",
]

_NORMALIZATION_PATTERN = re.compile(r"(nfc|nfd|nfkc|nfkd)(?:/(\w*))?")


@dataclass(frozen=True, slots=True)
class FeatureRequest:
    """A classified feature name.

    Attributes:
        name: Feature name as registered
        category: Resolution category
        form: Normalization form (NORMALIZATION only)
        script: Script token after the slash (NORMALIZATION only). None when
            no slash was given, "" for an explicit but empty token.
    """

    name: str
    category: FeatureCategory
    form: str | None = None
    script: str | None = None


def classify_feature(name: str) -> FeatureRequest:
    """Classify a feature name.

    Example:
        >>> classify_feature("nfkd/Latn")
        FeatureRequest(name='nfkd/Latn', category=<FeatureCategory.NORMALIZATION: \
'normalization'>, form='nfkd', script='Latn')
        >>> classify_feature("dateformat").category
        <FeatureCategory.GENERIC: 'generic'>
    """
    if name == "charset":
        return FeatureRequest(name, FeatureCategory.CHARSET)
    if name == "charmaps":
        return FeatureRequest(name, FeatureCategory.CHARMAPS)

    match = _NORMALIZATION_PATTERN.fullmatch(name)
    if match is not None:
        return FeatureRequest(
            name, FeatureCategory.NORMALIZATION, form=match.group(1), script=match.group(2)
        )

    if name == "zoneinfo":
        return FeatureRequest(name, FeatureCategory.ZONEINFO)
    return FeatureRequest(name, FeatureCategory.GENERIC)
