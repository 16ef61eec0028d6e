"""Enumerations for ilibpack type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class FeatureCategory(StrEnum):
    """Category of a requested data feature.

    StrEnum provides automatic string conversion: str(FeatureCategory.ZONEINFO) == "zoneinfo"
    """

    GENERIC = "generic"
    """Per-partition locale file looked up by basename: dateformat -> en/dateformat.json"""

    CHARSET = "charset"
    """Character-set tables for the requested locales"""

    CHARMAPS = "charmaps"
    """Character maps for the requested locales (implies their charsets)"""

    ZONEINFO = "zoneinfo"
    """Global time-zone tables"""

    NORMALIZATION = "normalization"
    """Unicode normalization form, optionally restricted to one script: nfc/Latn"""


class LoadStatus(StrEnum):
    """Outcome of one fragment lookup.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Fragment found and inlined"""

    NOT_FOUND = "not_found"
    """Fragment absent; remembered in the local manifest"""

    ERROR = "error"
    """Fragment present but unreadable or corrupt; skipped"""


class EmissionState(StrEnum):
    """Emission cache state of a build session.

    StrEnum provides automatic string conversion: str(EmissionState.EMITTED) == "emitted"
    """

    NOT_EMITTED = "not_emitted"
    """No valid emission; the next finalize runs a full pass"""

    EMITTING = "emitting"
    """Aggregation pass in progress"""

    EMITTED = "emitted"
    """Sources cached; finalize returns them until a new feature is registered"""


__all__ = [
    "EmissionState",
    "FeatureCategory",
    "LoadStatus",
]
