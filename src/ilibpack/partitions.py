"""Locale chain resolution: locale tag to ordered partitions.

A partition is one level of language/script/region specificity. The runtime
applies partitions from least to most specific so that more specific data
overrides less specific data:

    root -> en -> en-Latn -> en-Latn-US -> en-US -> und-US

Region-based partitions always follow script-based ones. The order is fixed
and never depends on which components a tag carries.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from ilibpack.constants import ROOT_PARTITION_NAME, UNDETERMINED_LANGUAGE
from ilibpack.locale_utils import LocaleTag, get_likely_script, parse_locale_tag

__all__ = [
    "ROOT_PARTITION",
    "Partition",
    "collect_required_scripts",
    "partitions_for_locale",
    "resolve_partitions",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Partition:
    """A named bucket of emitted data.

    Attributes:
        components: Subtags of the partition; empty for root

    Example:
        >>> p = Partition(("en", "Latn", "US"))
        >>> p.name
        'en-Latn-US'
        >>> p.path
        'en/Latn/US'
    """

    components: tuple[str, ...] = ()

    @property
    def is_root(self) -> bool:
        """Check if this is the root partition."""
        return not self.components

    @property
    def name(self) -> str:
        """Flattened name used for buckets and bundle file names."""
        return "-".join(self.components) if self.components else ROOT_PARTITION_NAME

    @property
    def path(self) -> str:
        """Directory of this partition relative to the data root ("." for root)."""
        return "/".join(self.components) if self.components else "."


ROOT_PARTITION = Partition()


def resolve_partitions(tag: LocaleTag) -> tuple[Partition, ...]:
    """Expand a locale tag into its fallback partitions, least specific first.

    Args:
        tag: Parsed locale tag

    Returns:
        Partitions in the order root, language, language-script,
        language-script-region, language-region, und-region, with entries
        for absent components omitted.

    Example:
        >>> [p.name for p in resolve_partitions(LocaleTag("de", None, "DE"))]
        ['root', 'de', 'de-DE', 'und-DE']
    """
    chain = [ROOT_PARTITION, Partition((tag.language,))]
    if tag.script:
        chain.append(Partition((tag.language, tag.script)))
        if tag.region:
            chain.append(Partition((tag.language, tag.script, tag.region)))
    if tag.region:
        chain.append(Partition((tag.language, tag.region)))
        chain.append(Partition((UNDETERMINED_LANGUAGE, tag.region)))
    return tuple(chain)


def partitions_for_locale(locale_code: str) -> tuple[Partition, ...]:
    """Parse a locale identifier and expand it into its partitions."""
    return resolve_partitions(parse_locale_tag(locale_code))


def collect_required_scripts(locales: Iterable[str]) -> frozenset[str]:
    """Infer the set of scripts needed to write the given locales.

    Locales without an explicit script contribute their CLDR likely script.
    Locales whose script cannot be inferred contribute nothing.
    """
    scripts: set[str] = set()
    for locale_code in locales:
        script = get_likely_script(parse_locale_tag(locale_code))
        if script:
            scripts.add(script)
        else:
            logger.debug("No likely script for locale %s", locale_code)
    return frozenset(scripts)
