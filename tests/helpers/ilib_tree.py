"""Miniature ilib data tree for tests.

DATA_FILES maps paths relative to the locale/ data root to JSON payloads.
raw() returns the exact text written to disk, which is what emitted bundles
must inline verbatim.
"""

from __future__ import annotations

import json
from pathlib import Path


# Relative path under locale/ -> JSON payload
DATA_FILES: dict[str, object] = {
    # Generic locale files
    "dateformat.json": {"gregorian": {"order": "{date} {time}"}},
    "en/dateformat.json": {"gregorian": {"s": "M/d/yy"}},
    "en/US/dateformat.json": {"gregorian": {"m": "MMM d, yyyy"}},
    "de/dateformat.json": {"gregorian": {"s": "dd.MM.yy"}},
    "zh/Hant/TW/dateformat.json": {"gregorian": {"s": "yyyy/M/d"}},
    "und/US/localeinfo.json": {"currency": "USD"},
    "localeinfo.json": {"clock": "24"},
    # Time zones
    "zoneinfo/zonetab.json": {
        "US": ["America/New_York", "America/Los_Angeles"],
        "DE": ["Europe/Berlin", "Europe/Busingen"],
        "JP": ["Asia/Tokyo"],
    },
    "zoneinfo/America/New_York.json": {"o": "-5:0", "f": "E{c}T"},
    "zoneinfo/America/Los_Angeles.json": {"o": "-8:0", "f": "P{c}T"},
    "zoneinfo/Europe/Berlin.json": {"o": "1:0", "f": "CE{c}T"},
    "zoneinfo/Asia/Tokyo.json": {"o": "9:0", "f": "JST"},
    "zoneinfo/EST5EDT.json": {"o": "-5:0", "f": "E{c}T"},
    "zoneinfo/Etc/UTC.json": {"o": "0:0", "f": "UTC"},
    "zoneinfo/Etc/GMT+1.json": {"o": "-1:0", "f": "GMT+1"},
    "zoneinfo/Etc/GMT-10.json": {"o": "10:0", "f": "GMT-10"},
    # Charsets
    "lang2charset.json": {
        "en": ["US-ASCII", "ISO-8859-1"],
        "de": ["ISO-8859-15"],
        "ja": ["Shift_JIS", "EUC-JP"],
        "sr-Latn": ["ISO-8859-2"],
    },
    "charsetaliases.json": {"ASCII": "US-ASCII", "SJIS": "Shift_JIS"},
    "charset/US-ASCII.json": {"name": "US-ASCII", "min": 1, "max": 1},
    "charset/ISO-8859-1.json": {"name": "ISO-8859-1", "min": 1, "max": 1},
    "charset/ISO-8859-15.json": {"name": "ISO-8859-15", "min": 1, "max": 1},
    "charset/ISO-8859-2.json": {"name": "ISO-8859-2", "min": 1, "max": 1},
    "charset/Shift_JIS.json": {"name": "Shift_JIS", "optional": True},
    "charset/EUC-JP.json": {"name": "EUC-JP", "optional": False},
    "charmaps/US-ASCII.json": {"to": {"A": 65}},
    "charmaps/ISO-8859-1.json": {"to": {"é": 233}},
    "charmaps/ISO-8859-15.json": {"to": {"€": 164}},
    "charmaps/Shift_JIS.json": {"to": {"あ": 33440}},
    "charmaps/EUC-JP.json": {"to": {"あ": 42146}},
    # Normalization forms
    "nfc/all.json": {"all": True},
    "nfc/Latn.json": {"Latn": True},
    "nfc/Cyrl.json": {"Cyrl": True},
    "nfc/Grek.json": {"Grek": True},
    "nfd/all.json": {"all": True},
    "nfd/Latn.json": {"Latn": True},
    "nfkd/Latn.json": {"Latn": True},
}


def raw(relative_path: str) -> str:
    """Exact text written for a data file (what bundles must inline verbatim)."""
    return json.dumps(DATA_FILES[relative_path], ensure_ascii=False)


def build_ilib_tree(ilib_root: Path) -> Path:
    """Write DATA_FILES under <ilib_root>/locale and return the data root."""
    data_root = ilib_root / "locale"
    for relative_path in DATA_FILES:
        target = data_root / relative_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(raw(relative_path), encoding="utf-8")
    (ilib_root / "package.json").write_text('{"name": "ilib"}', encoding="utf-8")
    return data_root


