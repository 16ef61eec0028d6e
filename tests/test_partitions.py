"""Tests for locale chain resolution.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import example, given

from ilibpack.locale_utils import LocaleTag
from ilibpack.partitions import (
    ROOT_PARTITION,
    Partition,
    collect_required_scripts,
    partitions_for_locale,
    resolve_partitions,
)
from tests.strategies.locales import locale_tags


def _names(tag: LocaleTag) -> list[str]:
    return [p.name for p in resolve_partitions(tag)]


class TestPartition:
    """Test Partition naming."""

    def test_root_partition(self) -> None:
        """Root has no components, name 'root' and path '.'."""
        assert ROOT_PARTITION.is_root
        assert ROOT_PARTITION.name == "root"
        assert ROOT_PARTITION.path == "."

    def test_name_and_path(self) -> None:
        """Components join with '-' for names and '/' for paths."""
        partition = Partition(("zh", "Hant", "TW"))

        assert partition.name == "zh-Hant-TW"
        assert partition.path == "zh/Hant/TW"
        assert not partition.is_root


class TestResolvePartitions:
    """Test the fixed fallback order."""

    def test_language_only(self) -> None:
        """Bare language yields root and language."""
        assert _names(LocaleTag("en")) == ["root", "en"]

    def test_language_region(self) -> None:
        """Region adds language-region and und-region."""
        assert _names(LocaleTag("en", None, "US")) == ["root", "en", "en-US", "und-US"]

    def test_language_script(self) -> None:
        """Script without region adds language-script only."""
        assert _names(LocaleTag("sr", "Latn")) == ["root", "sr", "sr-Latn"]

    def test_full_tag(self) -> None:
        """Script-based partitions precede region-based partitions."""
        assert _names(LocaleTag("zh", "Hant", "TW")) == [
            "root",
            "zh",
            "zh-Hant",
            "zh-Hant-TW",
            "zh-TW",
            "und-TW",
        ]

    def test_partitions_for_locale_parses(self) -> None:
        """Identifiers are parsed before expansion."""
        assert [p.name for p in partitions_for_locale("de_DE")] == [
            "root",
            "de",
            "de-DE",
            "und-DE",
        ]

    @given(tag=locale_tags())
    @example(tag=LocaleTag("en", "Latn", "US"))
    @example(tag=LocaleTag("und", None, "419"))
    def test_order_property(self, tag: LocaleTag) -> None:
        """Order is root, lang, [lang-script], [lang-script-region], [lang-region], [und-region]."""
        expected = ["root", tag.language]
        if tag.script:
            expected.append(f"{tag.language}-{tag.script}")
            if tag.region:
                expected.append(f"{tag.language}-{tag.script}-{tag.region}")
        if tag.region:
            expected.append(f"{tag.language}-{tag.region}")
            expected.append(f"und-{tag.region}")

        assert _names(tag) == expected

    @given(tag=locale_tags())
    def test_deterministic_property(self, tag: LocaleTag) -> None:
        """The same tag always maps to the same partitions."""
        assert resolve_partitions(tag) == resolve_partitions(
            LocaleTag(tag.language, tag.script, tag.region)
        )


class TestRequiredScripts:
    """Test script inference over locale lists."""

    def test_infers_likely_scripts(self) -> None:
        """Locales without a script contribute their likely script."""
        assert collect_required_scripts(["en-US", "ru-RU", "de"]) == {"Latn", "Cyrl"}

    def test_explicit_script_wins(self) -> None:
        """An explicit script is used as given."""
        assert collect_required_scripts(["sr-Latn-RS"]) == {"Latn"}

    def test_empty_list(self) -> None:
        """No locales, no scripts."""
        assert collect_required_scripts([]) == frozenset()

    def test_invalid_locale_raises(self) -> None:
        """Malformed identifiers propagate as ValueError."""
        with pytest.raises(ValueError, match="Invalid locale identifier"):
            collect_required_scripts(["12-34"])
