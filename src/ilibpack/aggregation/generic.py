"""Generic locale files: one fragment per partition of the fallback chain.

Entries are keyed by fragment path, the same path the local manifest lists.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ilibpack.aggregation.statements import data_assignment
from ilibpack.data.fragments import fragment_path
from ilibpack.enums import LoadStatus

if TYPE_CHECKING:
    from ilibpack.aggregation.context import AggregationPass
    from ilibpack.partitions import Partition

__all__ = ["resolve_generic"]


def resolve_generic(ctx: AggregationPass, partitions: tuple[Partition, ...], feature: str) -> None:
    """Propose a feature's fragment for every partition of one locale.

    Every partition in the chain gets a bucket. Found fragments are inlined;
    missing ones are remembered as empty entries. A (partition, feature)
    pair already handled for another locale is not looked up again.
    """
    agg = ctx.aggregator
    for partition in partitions:
        name = partition.name
        agg.ensure(name)
        relative_path = fragment_path(partition, feature)
        if agg.has(name, relative_path):
            continue

        status, text = ctx.load(relative_path, name)
        if status is LoadStatus.SUCCESS and text is not None:
            agg.propose(name, relative_path, data_assignment(feature, text, name))
        elif status is LoadStatus.NOT_FOUND:
            agg.mark_missing(name, relative_path)
