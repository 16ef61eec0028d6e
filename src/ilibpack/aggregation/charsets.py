"""Character-set and character-map resolution.

Charsets are non-locale data: the lang2charset table maps a language (with
optional script) to the charsets used to write it, and every resulting table
is emitted into the root partition. Requesting charmaps also emits the
charsets, since a charmap cannot be used without its charset.

A charset whose payload sets ``"optional": true`` never gets its charmap
emitted automatically; such maps are loaded explicitly by name.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ilibpack.aggregation.aggregator import category_key
from ilibpack.aggregation.statements import data_assignment
from ilibpack.constants import (
    CHARMAPS_DIR,
    CHARSET_ALIASES_FILE,
    CHARSET_DIR,
    FRAGMENT_SUFFIX,
    LANG2CHARSET_FILE,
    ROOT_PARTITION_NAME,
)
from ilibpack.enums import FeatureCategory, LoadStatus

if TYPE_CHECKING:
    from ilibpack.aggregation.context import AggregationPass
    from ilibpack.locale_utils import LocaleTag

__all__ = ["CharsetResolver"]

logger = logging.getLogger(__name__)


class CharsetResolver:
    """Collects charsets and charmaps per locale, then emits them once.

    The lang2charset table is read at most once per pass.
    """

    __slots__ = ("_charmaps", "_charsets", "_lang2charset")

    def __init__(self) -> None:
        """Initialize empty collections."""
        self._lang2charset: dict[str, list[str]] | None = None
        self._charsets: dict[str, None] = {}
        self._charmaps: dict[str, dict[str, None]] = {}

    def _table(self, ctx: AggregationPass) -> dict[str, list[str]]:
        if self._lang2charset is None:
            status, _text, value = ctx.load_json(LANG2CHARSET_FILE)
            if status is LoadStatus.SUCCESS and isinstance(value, dict):
                self._lang2charset = value
            else:
                if status is LoadStatus.SUCCESS:
                    logger.error("Ignoring %s: expected a JSON object", LANG2CHARSET_FILE)
                self._lang2charset = {}
        return self._lang2charset

    def collect(self, ctx: AggregationPass, tag: LocaleTag, *, charmaps: bool) -> None:
        """Record the charsets (and optionally charmaps) of one locale."""
        lang_key = tag.language + (f"-{tag.script}" if tag.script else "")
        names: Any = self._table(ctx).get(lang_key)
        if not names:
            ctx.trace("No charsets for %s", lang_key)
            return

        for name in names:
            self._charsets[name] = None
        if charmaps:
            maps = self._charmaps.setdefault(lang_key, {})
            for name in names:
                maps[name] = None

    @property
    def charsets(self) -> tuple[str, ...]:
        """Charsets collected so far, in first-seen order."""
        return tuple(self._charsets)

    def flush(self, ctx: AggregationPass) -> None:
        """Emit aliases, charsets and non-optional charmaps into root."""
        if not self._charsets:
            return

        agg = ctx.aggregator
        agg.ensure(ROOT_PARTITION_NAME)

        aliases_key = category_key(FeatureCategory.CHARSET, CHARSET_ALIASES_FILE)
        if not agg.has(ROOT_PARTITION_NAME, aliases_key):
            status, text = ctx.load(CHARSET_ALIASES_FILE)
            if status is LoadStatus.SUCCESS and text is not None:
                agg.propose(
                    ROOT_PARTITION_NAME,
                    aliases_key,
                    data_assignment("charsetaliases", text),
                    path=CHARSET_ALIASES_FILE,
                )

        optional: set[str] = set()
        for charset in self._charsets:
            relative_path = f"{CHARSET_DIR}/{charset}{FRAGMENT_SUFFIX}"
            key = category_key(FeatureCategory.CHARSET, relative_path)
            if agg.has(ROOT_PARTITION_NAME, key):
                continue
            status, text, value = ctx.load_json(relative_path)
            if status is not LoadStatus.SUCCESS or text is None:
                continue
            agg.propose(
                ROOT_PARTITION_NAME,
                key,
                data_assignment(f"charset_{charset}", text),
                path=relative_path,
            )
            if isinstance(value, dict) and value.get("optional") is True:
                optional.add(charset)

        for lang_key, maps in self._charmaps.items():
            for charset in maps:
                if charset in optional:
                    ctx.trace("Skipping optional charmap %s for %s", charset, lang_key)
                    continue
                relative_path = f"{CHARMAPS_DIR}/{charset}{FRAGMENT_SUFFIX}"
                key = category_key(FeatureCategory.CHARMAPS, relative_path)
                if agg.has(ROOT_PARTITION_NAME, key):
                    continue
                status, text = ctx.load(relative_path)
                if status is LoadStatus.SUCCESS and text is not None:
                    agg.propose(
                        ROOT_PARTITION_NAME,
                        key,
                        data_assignment(f"charmaps_{charset}", text),
                        path=relative_path,
                    )
