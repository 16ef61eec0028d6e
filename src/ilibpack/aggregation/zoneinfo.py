"""Time-zone resolution.

Time-zone data is global rather than locale-partitioned, so everything lands
in the root partition:

    1. zoneinfo/zonetab.json, the region -> zones table
    2. every zone the table lists for a region of the requested locales
    3. every generic zone: *.json directly under zoneinfo/ and under each
       generic subtree (zoneinfo/Etc/), whether or not a region asked for it

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ilibpack.aggregation.aggregator import category_key
from ilibpack.aggregation.statements import zone_assignment
from ilibpack.constants import (
    FRAGMENT_SUFFIX,
    GENERIC_ZONE_SUBDIRS,
    ROOT_PARTITION_NAME,
    RUNTIME_NAME,
    ZONEINFO_DIR,
    ZONETAB_FILE,
)
from ilibpack.enums import FeatureCategory, LoadStatus

if TYPE_CHECKING:
    from ilibpack.aggregation.context import AggregationPass

__all__ = ["generic_zone_ids", "resolve_zoneinfo"]

logger = logging.getLogger(__name__)

_ZONETAB_NAME = ZONETAB_FILE.rsplit("/", 1)[-1]


def _zones_for_regions(zonetab: object, regions: Iterable[str]) -> list[str]:
    """Zone identifiers for the given regions, deduplicated, in table order."""
    if not isinstance(zonetab, dict):
        logger.error("Ignoring %s: expected a JSON object", ZONETAB_FILE)
        return []
    zones: dict[str, None] = {}
    for region in regions:
        entries = zonetab.get(region)
        if isinstance(entries, list):
            zones.update((zone, None) for zone in entries if isinstance(zone, str))
    return list(zones)


def generic_zone_ids(ctx: AggregationPass) -> list[str]:
    """Identifiers of all generic zones in the data tree.

    Example:
        ["EST5EDT", "Etc/GMT+1", "Etc/UTC"]
    """
    zones = [
        name.removesuffix(FRAGMENT_SUFFIX)
        for name in ctx.list_dir(ZONEINFO_DIR)
        if name.endswith(FRAGMENT_SUFFIX) and name != _ZONETAB_NAME
    ]
    for subdir in GENERIC_ZONE_SUBDIRS:
        zones.extend(
            f"{subdir}/{name.removesuffix(FRAGMENT_SUFFIX)}"
            for name in ctx.list_dir(f"{ZONEINFO_DIR}/{subdir}")
            if name.endswith(FRAGMENT_SUFFIX)
        )
    return zones


def _propose_zone(ctx: AggregationPass, zone: str) -> None:
    relative_path = f"{ZONEINFO_DIR}/{zone}{FRAGMENT_SUFFIX}"
    key = category_key(FeatureCategory.ZONEINFO, relative_path)
    if ctx.aggregator.has(ROOT_PARTITION_NAME, key):
        return
    status, text = ctx.load(relative_path)
    if status is LoadStatus.SUCCESS and text is not None:
        ctx.aggregator.propose(
            ROOT_PARTITION_NAME, key, zone_assignment(zone, text), path=relative_path
        )


def resolve_zoneinfo(ctx: AggregationPass, regions: Iterable[str]) -> None:
    """Emit the zone table, region zones and all generic zones into root.

    An unreadable zone table skips the region zones only; generic zones are
    still emitted.
    """
    agg = ctx.aggregator
    agg.ensure(ROOT_PARTITION_NAME)

    status, text, zonetab = ctx.load_json(ZONETAB_FILE)
    if status is LoadStatus.SUCCESS and text is not None:
        agg.propose(
            ROOT_PARTITION_NAME,
            category_key(FeatureCategory.ZONEINFO, ZONETAB_FILE),
            f"{RUNTIME_NAME}.data.zoneinfo.zonetab = {text};\n",
            path=ZONETAB_FILE,
        )
        region_zones = _zones_for_regions(zonetab, regions)
        ctx.trace("Including %d zones for regions", len(region_zones))
        for zone in region_zones:
            _propose_zone(ctx, zone)
    elif status is LoadStatus.NOT_FOUND:
        logger.warning("Zone table %s not found; skipping region zones", ZONETAB_FILE)

    generic = generic_zone_ids(ctx)
    ctx.trace("Including %d generic zones", len(generic))
    for zone in generic:
        _propose_zone(ctx, zone)
