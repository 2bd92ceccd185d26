"""Tests for the built-in fallback layout."""

from __future__ import annotations

from prdesc.failsafe import build_fallback_description
from prdesc.locales import JAPANESE


def test_fallback_without_ticket_omits_related_line() -> None:
    text = build_fallback_description(
        summary="Tidy imports",
        changes_summary="- Other file changes",
        file_count=2,
        total_changes=9,
    )

    assert "**Related**" not in text
    assert text.splitlines()[0] == "## 📋 Summary"
    assert text.endswith("---\nGenerated with prdesc | Files: 2 | Lines: ±9\n")


def test_fallback_uses_locale_headings() -> None:
    text = build_fallback_description(
        summary="修正",
        changes_summary="- テスト: 1ファイル",
        file_count=1,
        total_changes=3,
        ticket_reference="FON-5",
        messages=JAPANESE,
    )

    assert "## 📋 概要" in text
    assert "**関連**: closes FON-5" in text
    assert "## 🎯 変更内容\n- テスト: 1ファイル" in text
