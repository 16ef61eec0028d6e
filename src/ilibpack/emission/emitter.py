"""Bundle emission: partition buckets -> installer and manifest resources.

Output layout under <output_dir>/locales/:

    localmanifest.js   module.exports={"files":[<fragment paths>]};
    remotemanifest.js  module.exports={"files":[<partition>.js, ...]};
    <partition>.js     module.exports.installLocale = function(ilib) { ... };

The emitter returns the written text keyed by absolute path so that a host
can refresh in-memory copies without re-reading storage.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from ilibpack.constants import BUNDLE_SUFFIX, LOCAL_MANIFEST_FILE, REMOTE_MANIFEST_FILE, RUNTIME_NAME

if TYPE_CHECKING:
    from ilibpack.aggregation.aggregator import PartitionAggregator

__all__ = [
    "BundleEmitter",
    "OutputSources",
    "render_bundle",
    "render_manifest",
]

logger = logging.getLogger(__name__)

OutputSources = dict[str, str]
"""Absolute output path -> emitted text."""


def render_manifest(files: Iterable[str]) -> str:
    """Render a manifest resource.

    Example:
        >>> render_manifest(["root.js", "en.js"])
        'module.exports={"files":["root.js","en.js"]};\\n'
    """
    payload = json.dumps({"files": list(files)}, separators=(",", ":"), ensure_ascii=False)
    return f"module.exports={payload};\n"


def render_bundle(statements: Iterable[str]) -> str:
    """Render a partition installer applying statements in order."""
    body = "".join(statements)
    return f"module.exports.installLocale = function({RUNTIME_NAME}) {{\n{body}}};\n"


class BundleEmitter:
    """Writes manifests and partition bundles for one pass.

    Attributes:
        locales_dir: Directory receiving all emitted files
    """

    __slots__ = ("locales_dir", "trace_level")

    def __init__(self, locales_dir: Path, *, trace_level: int = logging.DEBUG) -> None:
        """Initialize emitter.

        Args:
            locales_dir: Directory receiving all emitted files
            trace_level: Logging level for progress messages
        """
        self.locales_dir = Path(locales_dir)
        self.trace_level = trace_level

    def _write(self, sources: OutputSources, filename: str, text: str) -> None:
        output_file = (self.locales_dir / filename).resolve()
        logger.log(self.trace_level, "Emitting %s size %d", output_file, len(text))
        output_file.write_text(text, encoding="utf-8")
        sources[str(output_file)] = text

    def emit(self, aggregator: PartitionAggregator) -> OutputSources:
        """Write every resource of a pass.

        Raises:
            OSError: If the output directory or a file cannot be written
        """
        self.locales_dir.mkdir(parents=True, exist_ok=True)
        sources: OutputSources = {}

        self._write(sources, LOCAL_MANIFEST_FILE, render_manifest(aggregator.local_manifest()))
        self._write(sources, REMOTE_MANIFEST_FILE, render_manifest(aggregator.remote_manifest()))
        for partition in aggregator.buckets():
            self._write(
                sources, partition + BUNDLE_SUFFIX, render_bundle(aggregator.statements(partition))
            )
        return sources
