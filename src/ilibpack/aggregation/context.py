"""Per-pass state shared by the resolvers.

An AggregationPass bundles the fragment reader, the partition aggregator and
the load results of one pass. Per-fragment failures are isolated here: an
unreadable or corrupt fragment is logged, recorded as an error result, and
reported to the resolver as absent data so that aggregation continues.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from ilibpack.aggregation.aggregator import PartitionAggregator
from ilibpack.constants import ROOT_PARTITION_NAME
from ilibpack.data.results import FragmentLoadResult, LoadSummary
from ilibpack.enums import LoadStatus
from ilibpack.errors import FragmentError

if TYPE_CHECKING:
    from ilibpack.data.fragments import FragmentReader

__all__ = ["AggregationPass"]

logger = logging.getLogger(__name__)


class AggregationPass:
    """Reader, aggregator and load tracking for one aggregation pass.

    Attributes:
        reader: Fragment reader bound to the data root
        aggregator: Buckets and manifests being built
        trace_level: Logging level for progress messages
    """

    __slots__ = ("_results", "aggregator", "reader", "trace_level")

    def __init__(self, reader: FragmentReader, *, trace_level: int = logging.DEBUG) -> None:
        """Initialize a pass.

        Args:
            reader: Fragment reader bound to the data root
            trace_level: Logging level for progress messages (INFO in debug mode)
        """
        self.reader = reader
        self.aggregator = PartitionAggregator()
        self.trace_level = trace_level
        self._results: list[FragmentLoadResult] = []

    def trace(self, msg: str, *args: object) -> None:
        """Log a progress message at the pass's trace level."""
        logger.log(self.trace_level, msg, *args)

    def _record(
        self,
        relative_path: str,
        partition: str,
        status: LoadStatus,
        error: Exception | None = None,
    ) -> None:
        self._results.append(FragmentLoadResult(relative_path, partition, status, error))

    def _fail(self, relative_path: str, partition: str, cause: Exception) -> None:
        description = self.reader.describe_path(relative_path)
        logger.error("Failed to load fragment %s: %s", description, cause)
        error = FragmentError(f"{description}: {cause}", relative_path=relative_path)
        error.__cause__ = cause
        self._record(relative_path, partition, LoadStatus.ERROR, error)

    def load(
        self, relative_path: str, partition: str = ROOT_PARTITION_NAME
    ) -> tuple[LoadStatus, str | None]:
        """Look up and read one fragment.

        Returns:
            (SUCCESS, text), (NOT_FOUND, None), or (ERROR, None)
        """
        if not self.reader.exists(relative_path):
            self._record(relative_path, partition, LoadStatus.NOT_FOUND)
            return LoadStatus.NOT_FOUND, None
        try:
            text = self.reader.read(relative_path)
        except (OSError, ValueError) as e:
            self._fail(relative_path, partition, e)
            return LoadStatus.ERROR, None
        self._record(relative_path, partition, LoadStatus.SUCCESS)
        return LoadStatus.SUCCESS, text

    def load_json(
        self, relative_path: str, partition: str = ROOT_PARTITION_NAME
    ) -> tuple[LoadStatus, str | None, Any]:
        """Look up, read and decode one fragment.

        The raw text is returned alongside the decoded value so that it can
        be inlined verbatim.

        Returns:
            (SUCCESS, text, value), (NOT_FOUND, None, None), or (ERROR, None, None)
        """
        if not self.reader.exists(relative_path):
            self._record(relative_path, partition, LoadStatus.NOT_FOUND)
            return LoadStatus.NOT_FOUND, None, None
        try:
            text = self.reader.read(relative_path)
            value = json.loads(text)
        except (OSError, ValueError) as e:
            self._fail(relative_path, partition, e)
            return LoadStatus.ERROR, None, None
        self._record(relative_path, partition, LoadStatus.SUCCESS)
        return LoadStatus.SUCCESS, text, value

    def list_dir(self, relative_path: str) -> tuple[str, ...]:
        """List a data directory; an unreadable directory is logged and empty."""
        try:
            return self.reader.list_dir(relative_path)
        except (OSError, ValueError) as e:
            logger.error(
                "Failed to list directory %s: %s", self.reader.describe_path(relative_path), e
            )
            return ()

    def summary(self) -> LoadSummary:
        """Snapshot of all load results so far."""
        return LoadSummary(tuple(self._results))
