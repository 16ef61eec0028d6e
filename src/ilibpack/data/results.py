"""Load tracking records for one aggregation pass.

Components:
    FragmentLoadResult - Immutable result of a single fragment lookup
    LoadSummary - Immutable aggregate of all lookups in a pass

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from ilibpack.enums import LoadStatus

__all__ = [
    "FragmentLoadResult",
    "LoadSummary",
]


@dataclass(frozen=True, slots=True)
class FragmentLoadResult:
    """Result of looking up one fragment.

    Attributes:
        relative_path: Fragment path relative to the data root
        partition: Partition the fragment was proposed for
        status: Load status (success, not_found, error)
        error: Exception if status is ERROR, None otherwise
    """

    relative_path: str
    partition: str
    status: LoadStatus
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        """Check if the fragment was found and inlined."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if the fragment does not exist."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if the fragment could not be read or decoded."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of fragment lookups from one pass.

    Example:
        >>> summary = session.last_summary
        >>> if summary.has_errors:
        ...     for result in summary.get_errors():
        ...         print(f"Skipped {result.relative_path}: {result.error}")
    """

    results: tuple[FragmentLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of lookups."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of fragments inlined."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of fragments that do not exist."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of fragments skipped because of errors."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def has_errors(self) -> bool:
        """Check if any fragment failed to load."""
        return self.errors > 0

    def get_errors(self) -> tuple[FragmentLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_successful(self) -> tuple[FragmentLoadResult, ...]:
        """Get all successful results."""
        return tuple(r for r in self.results if r.is_success)

    def get_by_partition(self, partition: str) -> tuple[FragmentLoadResult, ...]:
        """Get all results for one partition."""
        return tuple(r for r in self.results if r.partition == partition)
