"""Partition aggregation: resolvers, aggregator and the pass engine.

Submodules:
    aggregator    - PartitionAggregator (buckets and manifests)
    context       - AggregationPass (reader, aggregator, load tracking)
    statements    - Bundle statement rendering
    generic       - Per-partition locale files
    charsets      - Charset and charmap resolution
    zoneinfo      - Time-zone resolution
    normalization - Normalization-form resolution
    engine        - aggregate() over (locales x features)

Python 3.13+.
"""

from ilibpack.aggregation.aggregator import PartitionAggregator, category_key
from ilibpack.aggregation.context import AggregationPass
from ilibpack.aggregation.engine import AggregationResult, aggregate

__all__ = [
    "AggregationPass",
    "AggregationResult",
    "PartitionAggregator",
    "aggregate",
    "category_key",
]
