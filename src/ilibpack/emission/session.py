"""Build sessions: feature registration, emission cache and two-phase emission.

A BuildSession holds the state of one build: the append-only set of
requested features and the emission cache. A host drives it in two phases:

    session = BuildSession()
    session.prepare(["en-US", "de-DE"], "assets")   # placeholders
    session.register_feature("dateformat")          # while scanning sources
    sources = session.finalize(options)             # once all modules are known

Emission cache states:

    NOT_EMITTED -> EMITTING -> EMITTED
    EMITTED -> NOT_EMITTED      on registration of a new feature
    EMITTING -> NOT_EMITTED     when the pass raises

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any, Protocol

from ilibpack.aggregation.engine import aggregate
from ilibpack.config import EmitOptions
from ilibpack.constants import STRICT_PREFIX
from ilibpack.data.fragments import FragmentReader, PathFragmentReader
from ilibpack.data.results import LoadSummary
from ilibpack.data.root import resolve_data_root
from ilibpack.emission.emitter import BundleEmitter, OutputSources
from ilibpack.emission.placeholders import create_placeholder_files
from ilibpack.enums import EmissionState
from ilibpack.partitions import collect_required_scripts

__all__ = [
    "BuildSession",
    "HostModule",
    "emit_locale_data",
    "update_modules",
]

logger = logging.getLogger(__name__)


class HostModule(Protocol):
    """In-memory module of a host build graph."""

    resource: str
    source: str


class BuildSession:
    """Feature registry and emission cache of one build.

    Attributes:
        reader_factory: Builds the fragment reader for a data root. Defaults
            to PathFragmentReader; hosts with non-filesystem storage can
            supply their own.

    Example:
        >>> session = BuildSession()
        >>> session.register_feature("dateformat")
        True
        >>> session.register_feature("dateformat")
        False
        >>> session.state
        <EmissionState.NOT_EMITTED: 'not_emitted'>
    """

    __slots__ = (
        "_cached",
        "_features",
        "_required_scripts",
        "_state",
        "_summary",
        "reader_factory",
    )

    def __init__(
        self,
        features: Iterable[str] = (),
        *,
        reader_factory: Callable[[Path], FragmentReader] | None = None,
    ) -> None:
        """Initialize session.

        Args:
            features: Features known up front
            reader_factory: Fragment reader constructor taking the data root
        """
        self._features: dict[str, None] = dict.fromkeys(features)
        self._state = EmissionState.NOT_EMITTED
        self._cached: OutputSources = {}
        self._required_scripts: frozenset[str] = frozenset()
        self._summary: LoadSummary | None = None
        self.reader_factory: Callable[[Path], FragmentReader] = (
            reader_factory or PathFragmentReader
        )

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"BuildSession(features={len(self._features)}, state={self._state})"

    @property
    def features(self) -> tuple[str, ...]:
        """Registered features in registration order."""
        return tuple(self._features)

    @property
    def state(self) -> EmissionState:
        """Current emission cache state."""
        return self._state

    @property
    def required_scripts(self) -> frozenset[str]:
        """Scripts inferred during the last pass."""
        return self._required_scripts

    @property
    def last_summary(self) -> LoadSummary | None:
        """Fragment load results of the last pass, if any."""
        return self._summary

    def register_feature(self, name: str) -> bool:
        """Mark a feature as required.

        Idempotent. Only the first registration of a name invalidates the
        emission cache.

        Returns:
            True if the name was new
        """
        if name in self._features:
            return False
        self._features[name] = None
        if self._state is EmissionState.EMITTED:
            logger.debug("Feature %s registered; emission cache invalidated", name)
        self._state = EmissionState.NOT_EMITTED
        return True

    def prepare(self, locales: Iterable[str], temp_dir: str | Path) -> list[str]:
        """Phase one: precreate placeholder files for the host graph."""
        return create_placeholder_files(locales, temp_dir)

    def finalize(self, options: EmitOptions | Mapping[str, Any]) -> OutputSources:
        """Phase two: aggregate and emit locale data for all registered features.

        Returns the cached sources when no feature was registered since the
        last emission. With no features registered this is a no-op returning {}.

        Args:
            options: Emission options, or a host option mapping

        Returns:
            Absolute output path -> emitted text

        Raises:
            DataRootError: If the locale data installation cannot be located
            InvalidLocaleError: If a locale identifier cannot be parsed
            OSError: If output files cannot be written
        """
        if not isinstance(options, EmitOptions):
            options = EmitOptions.from_mapping(options)

        if not self._features:
            if options.debug:
                logger.info("No data to include")
            return {}

        if self._state is EmissionState.EMITTED:
            logger.debug("Locale data already emitted; returning cached sources")
            return dict(self._cached)

        self._state = EmissionState.EMITTING
        try:
            sources = self._run(options)
        except BaseException:
            self._state = EmissionState.NOT_EMITTED
            raise
        self._cached = sources
        self._state = EmissionState.EMITTED
        return dict(sources)

    def _run(self, options: EmitOptions) -> OutputSources:
        trace_level = logging.INFO if options.debug else logging.DEBUG
        logger.log(trace_level, "Emitting locale data for locales %s", ",".join(options.locales))

        data_root = resolve_data_root(options)
        reader = self.reader_factory(data_root)
        self._required_scripts = collect_required_scripts(options.locales)

        result = aggregate(
            options.locales,
            self.features,
            reader,
            required_scripts=self._required_scripts,
            trace_level=trace_level,
        )
        self._summary = result.summary
        if result.summary.has_errors:
            logger.warning(
                "%d fragment(s) could not be loaded and were omitted", result.summary.errors
            )
        return BundleEmitter(options.locales_dir, trace_level=trace_level).emit(result.aggregator)


def emit_locale_data(
    session: BuildSession, options: EmitOptions | Mapping[str, Any]
) -> OutputSources:
    """Aggregate and emit locale data for a session.

    Module-level form of BuildSession.finalize for hosts that keep the
    session in their own state.
    """
    return session.finalize(options)


def update_modules(modules: Iterable[HostModule], sources: Mapping[str, str]) -> int:
    """Refresh in-memory host modules from emitted sources.

    Returns:
        Number of modules updated
    """
    updated = 0
    for module in modules:
        text = sources.get(module.resource)
        if text is not None:
            module.source = STRICT_PREFIX + text
            updated += 1
    return updated
