"""Aggregation engine: (locales x features) -> partition buckets.

Fans out over every (locale, feature) pair in locale order, dispatching each
classified feature to its category handler. Generic files and time-zone data
are proposed while iterating; charsets, charmaps and normalization forms are
collected first and emitted into root after the loop.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ilibpack.aggregation.aggregator import PartitionAggregator
from ilibpack.aggregation.charsets import CharsetResolver
from ilibpack.aggregation.context import AggregationPass
from ilibpack.aggregation.generic import resolve_generic
from ilibpack.aggregation.normalization import NormalizationResolver
from ilibpack.aggregation.zoneinfo import resolve_zoneinfo
from ilibpack.enums import FeatureCategory
from ilibpack.features import FeatureRequest, classify_feature
from ilibpack.locale_utils import LocaleTag, parse_locale_tag
from ilibpack.partitions import resolve_partitions

if TYPE_CHECKING:
    from ilibpack.data.fragments import FragmentReader
    from ilibpack.data.results import LoadSummary

__all__ = ["AggregationResult", "aggregate"]


@dataclass(frozen=True, slots=True)
class AggregationResult:
    """Outcome of one aggregation pass.

    Attributes:
        aggregator: Partition buckets and manifests
        summary: Load results of every fragment looked up
    """

    aggregator: PartitionAggregator
    summary: LoadSummary


class _Dispatcher:
    """One handler per feature category for a single pass."""

    __slots__ = ("_charsets", "_ctx", "_handlers", "_norms", "_regions", "_zoneinfo_done")

    def __init__(self, ctx: AggregationPass, tags: Sequence[LocaleTag]) -> None:
        self._ctx = ctx
        self._charsets = CharsetResolver()
        self._norms = NormalizationResolver()
        self._regions = list(dict.fromkeys(tag.region for tag in tags if tag.region))
        self._zoneinfo_done = False
        self._handlers: dict[FeatureCategory, Callable[[LocaleTag, FeatureRequest], None]] = {
            FeatureCategory.GENERIC: self._generic,
            FeatureCategory.CHARSET: self._charset,
            FeatureCategory.CHARMAPS: self._charmaps,
            FeatureCategory.ZONEINFO: self._zoneinfo,
            FeatureCategory.NORMALIZATION: self._normalization,
        }

    def dispatch(self, tag: LocaleTag, feature: FeatureRequest) -> None:
        self._handlers[feature.category](tag, feature)

    def _generic(self, tag: LocaleTag, feature: FeatureRequest) -> None:
        resolve_generic(self._ctx, resolve_partitions(tag), feature.name)

    def _charset(self, tag: LocaleTag, feature: FeatureRequest) -> None:
        self._charsets.collect(self._ctx, tag, charmaps=False)

    def _charmaps(self, tag: LocaleTag, feature: FeatureRequest) -> None:
        self._charsets.collect(self._ctx, tag, charmaps=True)

    def _zoneinfo(self, tag: LocaleTag, feature: FeatureRequest) -> None:
        # Zone data covers the regions of all locales at once.
        if not self._zoneinfo_done:
            self._zoneinfo_done = True
            resolve_zoneinfo(self._ctx, self._regions)

    def _normalization(self, tag: LocaleTag, feature: FeatureRequest) -> None:
        if feature.form is not None:
            self._norms.collect(feature.form, feature.script)

    def flush(self, required_scripts: Iterable[str]) -> None:
        self._charsets.flush(self._ctx)
        self._norms.flush(self._ctx, required_scripts)


def aggregate(
    locales: Sequence[str],
    features: Iterable[str],
    reader: FragmentReader,
    *,
    required_scripts: Iterable[str] = (),
    trace_level: int = logging.DEBUG,
) -> AggregationResult:
    """Run one aggregation pass.

    Args:
        locales: Target locale identifiers
        features: Requested feature names, in registration order
        reader: Fragment reader bound to the data root
        required_scripts: Scripts used for normalization forms
        trace_level: Logging level for progress messages

    Returns:
        Buckets, manifests and load summary of the pass

    Raises:
        InvalidLocaleError: If a locale identifier cannot be parsed
    """
    ctx = AggregationPass(reader, trace_level=trace_level)
    tags = [parse_locale_tag(locale) for locale in locales]
    requests = [classify_feature(name) for name in features]
    dispatcher = _Dispatcher(ctx, tags)

    for tag in tags:
        ctx.trace("Resolving %d features for locale %s", len(requests), tag)
        for request in requests:
            dispatcher.dispatch(tag, request)
    dispatcher.flush(required_scripts)

    return AggregationResult(ctx.aggregator, ctx.summary())
