"""Partition aggregator: the single mutation point for partition buckets.

Resolvers propose entries; the aggregator keeps the first entry proposed for
each (partition, key) pair and records the fragment path in the local
manifest. Buckets and manifests preserve insertion order, which makes the
emitted output deterministic for a given feature set and locale list.

Generic lookups key their entries by fragment path. The special categories
key theirs with ``category_key``, so a generic feature whose name happens to
look like a charset or zone path never occupies a charset or zone entry.
The local manifest is deduplicated by fragment path across all categories.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping

from ilibpack.constants import BUNDLE_SUFFIX
from ilibpack.enums import FeatureCategory

__all__ = ["PartitionAggregator", "category_key"]

# Internal type alias: entry key -> statement text ("" for a remembered absence)
_Bucket = dict[str, str]


def category_key(category: FeatureCategory, relative_path: str) -> str:
    """Entry key of a special-category fragment.

    Example:
        >>> category_key(FeatureCategory.CHARSET, "charset/Shift_JIS.json")
        'charset:charset/Shift_JIS.json'
    """
    return f"{category}:{relative_path}"


class PartitionAggregator:
    """Accumulates statements into per-partition buckets.

    Example:
        >>> agg = PartitionAggregator()
        >>> agg.propose("root", "dateformat.json", "ilib.data.dateformat = {};\\n")
        True
        >>> agg.propose("root", "dateformat.json", "other")
        False
        >>> agg.remote_manifest()
        ['root.js']
    """

    __slots__ = ("_buckets", "_manifest")

    def __init__(self) -> None:
        """Initialize empty buckets and manifest."""
        self._buckets: dict[str, _Bucket] = {}
        self._manifest: dict[str, None] = {}

    def ensure(self, partition: str) -> None:
        """Create the bucket for a partition if it does not exist yet."""
        self._buckets.setdefault(partition, {})

    def has(self, partition: str, key: str) -> bool:
        """Check whether an entry (found or missing) is already recorded."""
        bucket = self._buckets.get(partition)
        return bucket is not None and key in bucket

    def propose(
        self, partition: str, key: str, statement: str, *, path: str | None = None
    ) -> bool:
        """Record a statement unless the (partition, key) pair already exists.

        Args:
            partition: Partition name
            key: Entry key within the partition
            statement: Statement text ("" for a remembered absence)
            path: Fragment path for the local manifest; defaults to the key

        Returns:
            True if the statement was recorded, False if an earlier entry won
        """
        bucket = self._buckets.setdefault(partition, {})
        if key in bucket:
            return False
        bucket[key] = statement
        self._manifest[path if path is not None else key] = None
        return True

    def mark_missing(self, partition: str, key: str, *, path: str | None = None) -> bool:
        """Remember that a fragment does not exist.

        The absence is listed in the local manifest so that a loader never
        attempts to fetch it.

        Returns:
            True if the absence was recorded, False if the key already existed
        """
        return self.propose(partition, key, "", path=path)

    def buckets(self) -> Mapping[str, Mapping[str, str]]:
        """Partition name -> entry key -> statement, in insertion order."""
        return self._buckets

    def statements(self, partition: str) -> tuple[str, ...]:
        """Non-empty statements of one partition, in insertion order."""
        return tuple(text for text in self._buckets.get(partition, {}).values() if text)

    def local_manifest(self) -> list[str]:
        """Every fragment path considered this pass, found or not."""
        return list(self._manifest)

    def remote_manifest(self) -> list[str]:
        """File name of every partition bundle produced this pass."""
        return [partition + BUNDLE_SUFFIX for partition in self._buckets]

    def __len__(self) -> int:
        """Number of partitions."""
        return len(self._buckets)
