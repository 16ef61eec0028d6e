"""Unicode normalization-form resolution.

Each requested form (nfc, nfd, nfkc, nfkd) is emitted per script as an
additive merge into the form's shared runtime table, because several forms
and scripts accumulate into the same in-memory structure.

Script selection per form:
    - "all" requested: only <form>/all.json, which is a superset of the
      per-script tables
    - otherwise: every required script of the pass, plus any script named
      explicitly for that form ("nfc/Grek")

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ilibpack.aggregation.aggregator import category_key
from ilibpack.aggregation.statements import merge_statement
from ilibpack.constants import ALL_SCRIPTS, FRAGMENT_SUFFIX, ROOT_PARTITION_NAME
from ilibpack.enums import FeatureCategory, LoadStatus

if TYPE_CHECKING:
    from ilibpack.aggregation.context import AggregationPass

__all__ = ["NormalizationResolver"]


class NormalizationResolver:
    """Collects requested forms and script tokens, then emits them once."""

    __slots__ = ("_forms",)

    def __init__(self) -> None:
        """Initialize with no requested forms."""
        self._forms: dict[str, dict[str, None]] = {}

    def collect(self, form: str, script: str | None) -> None:
        """Record one request. A missing or empty token is stored as ""."""
        self._forms.setdefault(form, {})[script or ""] = None

    def scripts_for(self, form: str, required_scripts: Iterable[str]) -> tuple[str, ...]:
        """Scripts that will be emitted for a form."""
        tokens = self._forms.get(form, {})
        if ALL_SCRIPTS in tokens:
            return (ALL_SCRIPTS,)
        scripts = dict.fromkeys(sorted(required_scripts))
        scripts.update((token, None) for token in tokens if token)
        return tuple(scripts)

    def flush(self, ctx: AggregationPass, required_scripts: Iterable[str]) -> None:
        """Emit every requested form into root."""
        if not self._forms:
            return
        required = tuple(required_scripts)
        agg = ctx.aggregator
        agg.ensure(ROOT_PARTITION_NAME)

        for form in self._forms:
            for script in self.scripts_for(form, required):
                relative_path = f"{form}/{script}{FRAGMENT_SUFFIX}"
                key = category_key(FeatureCategory.NORMALIZATION, relative_path)
                if agg.has(ROOT_PARTITION_NAME, key):
                    continue
                status, text = ctx.load(relative_path)
                if status is LoadStatus.SUCCESS and text is not None:
                    ctx.trace("Including %s for script %s", form, script)
                    agg.propose(
                        ROOT_PARTITION_NAME,
                        key,
                        merge_statement(form, script, text),
                        path=relative_path,
                    )
