"""Rendering of the assignment statements inlined into partition bundles.

Every found fragment becomes one statement whose right-hand side is the
fragment's raw payload, copied verbatim:

    ilib.data.dateformat_en_US = {...};
    ilib.data.zoneinfo["America/Argentina/Buenos_Aires"] = {...};
    ilib.extend(ilib.data.norm.nfc, {...});

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import re

from ilibpack.constants import ROOT_PARTITION_NAME, RUNTIME_NAME

__all__ = [
    "data_assignment",
    "merge_statement",
    "to_data_name",
    "to_zone_key",
    "zone_assignment",
]

_UNSAFE_NAME_CHARS = re.compile(r"[.:()/\\+\-]")


def to_data_name(name: str | None) -> str:
    """Convert a feature or partition name into a property-safe identifier.

    Root and wildcard names map to the empty string.

    Example:
        >>> to_data_name("en-US")
        'en_US'
        >>> to_data_name("root")
        ''
    """
    if not name or name in (ROOT_PARTITION_NAME, "*"):
        return ""
    return _UNSAFE_NAME_CHARS.sub("_", name)


def to_zone_key(zone: str) -> str:
    """Rewrite a time-zone identifier into its bundle key.

    Example:
        >>> to_zone_key("Etc/GMT-10")
        'Etc/GMTm10'
    """
    return zone.replace("-", "m").replace("+", "p")


def data_assignment(name: str, payload: str, partition: str = ROOT_PARTITION_NAME) -> str:
    """Flat assignment of a payload under the runtime's data root.

    Non-root partitions suffix the partition name so that the runtime can
    keep every level of the fallback chain side by side.

    Example:
        >>> data_assignment("dateformat", "{}", "en-US")
        'ilib.data.dateformat_en_US = {};\\n'
    """
    target = f"{RUNTIME_NAME}.data.{to_data_name(name)}"
    if partition != ROOT_PARTITION_NAME:
        target += "_" + to_data_name(partition)
    return f"{target} = {payload};\n"


def zone_assignment(zone: str, payload: str) -> str:
    """Assignment of one time-zone definition into the zoneinfo table."""
    return f"{RUNTIME_NAME}.data.zoneinfo[{json.dumps(to_zone_key(zone))}] = {payload};\n"


def merge_statement(form: str, script: str, payload: str) -> str:
    """Additive merge of a normalization table into the form's shared table."""
    return (
        f"// form {form} script {script}\n"
        f"{RUNTIME_NAME}.extend({RUNTIME_NAME}.data.norm.{form}, {payload});\n"
    )
