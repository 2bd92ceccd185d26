"""Message catalogs for generated descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from .models import ChangeType, Scale


@dataclass(frozen=True)
class Messages:
    """Human-facing strings for a single locale."""

    scale_labels: Dict[Scale, str]
    change_type_labels: Dict[ChangeType, str]
    header_scale: str
    header_stats: str
    header_type: str
    urgent_prefix: str
    summary_fallback: str
    category_names: Dict[str, str]
    category_line: str
    other_changes_line: str
    verification_steps: Dict[ChangeType, Tuple[str, ...]]
    default_verification_steps: Tuple[str, ...]
    backgrounds: Dict[ChangeType, str]
    review_points: Dict[str, Tuple[str, ...]]
    default_review_points: Tuple[str, ...]
    config_caution: str
    breaking_caution: str
    urgent_caution: str
    fallback_summary_heading: str
    fallback_ticket_line: str
    fallback_changes_heading: str
    footer: str


ENGLISH = Messages(
    scale_labels={Scale.MINIMAL: "Minimal", Scale.STANDARD: "Standard"},
    change_type_labels={
        ChangeType.BUGFIX: "Bug fix",
        ChangeType.FEATURE: "New feature",
        ChangeType.BREAKING_CHANGE: "Breaking change",
        ChangeType.OTHER: "Other",
    },
    header_scale="🔍 Change scale: {label}",
    header_stats="📊 Stats: {files} files changed, +{additions} -{deletions} lines",
    header_type="🏷️ Type: {label}",
    urgent_prefix="🚨 Urgent fix: ",
    summary_fallback="Apply changes ({label})",
    category_names={
        "api": "API",
        "frontend": "Frontend",
        "database": "Database",
        "config": "Configuration",
        "test": "Tests",
        "docs": "Documentation",
    },
    category_line="- {name}: {count} files",
    other_changes_line="- Other file changes",
    verification_steps={
        ChangeType.BUGFIX: (
            "1. Reproduce the defect on the base branch",
            "2. Confirm the fixed behaviour works as expected",
            "3. Confirm related features are unaffected",
        ),
        ChangeType.FEATURE: (
            "1. Confirm the new feature behaves as specified",
            "2. Confirm existing features are unaffected",
            "3. Confirm error handling is appropriate",
        ),
        ChangeType.BREAKING_CHANGE: (
            "1. Compare behaviour before and after the change",
            "2. Check the full scope of impact",
            "3. Review the migration procedure",
        ),
    },
    default_verification_steps=(
        "1. Review the changes",
        "2. Run a manual smoke test",
        "3. Confirm no errors occur",
    ),
    backgrounds={
        ChangeType.BUGFIX: "A reported bug or defect needed to be fixed.",
        ChangeType.FEATURE: "A new feature was requested.",
        ChangeType.BREAKING_CHANGE: "A significant change to the system became necessary.",
        ChangeType.OTHER: "The change was needed for the reasons below.",
    },
    review_points={
        "api": (
            "- [ ] API endpoints are implemented correctly",
            "- [ ] Error handling is appropriate",
        ),
        "frontend": (
            "- [ ] UI/UX matches the specification",
            "- [ ] Responsive layouts are handled",
        ),
        "database": (
            "- [ ] Migrations can run safely",
            "- [ ] Indexes are configured appropriately",
        ),
        "test": (
            "- [ ] Test cases are adequate",
            "- [ ] Tests pass",
        ),
    },
    default_review_points=(
        "- [ ] Changes meet the requirements",
        "- [ ] Code quality is maintained",
    ),
    config_caution=(
        "Configuration files changed; environment variables or settings may need updating."
    ),
    breaking_caution=(
        "This is a breaking change; check the impact on dependent systems before deploying."
    ),
    urgent_caution="This is an urgent fix; verify behaviour carefully after deploying.",
    fallback_summary_heading="## 📋 Summary",
    fallback_ticket_line="**Related**: closes {ticket}",
    fallback_changes_heading="## 🎯 Changes",
    footer="Generated with prdesc | Files: {files} | Lines: ±{changes}",
)


JAPANESE = Messages(
    scale_labels={Scale.MINIMAL: "ミニマム", Scale.STANDARD: "スタンダード"},
    change_type_labels={
        ChangeType.BUGFIX: "バグ修正",
        ChangeType.FEATURE: "新機能",
        ChangeType.BREAKING_CHANGE: "破壊的変更",
        ChangeType.OTHER: "その他",
    },
    header_scale="🔍 変更規模: {label}",
    header_stats="📊 統計: {files} files changed, +{additions} -{deletions} lines",
    header_type="🏷️ 種別: {label}",
    urgent_prefix="🚨 緊急修正: ",
    summary_fallback="{label}を実施",
    category_names={
        "api": "API関連",
        "frontend": "フロントエンド",
        "database": "データベース",
        "config": "設定ファイル",
        "test": "テスト",
        "docs": "ドキュメント",
    },
    category_line="- {name}: {count}ファイル",
    other_changes_line="- その他のファイル変更",
    verification_steps={
        ChangeType.BUGFIX: (
            "1. 修正前の不具合状況を確認",
            "2. 修正後の動作が正常であることを確認",
            "3. 関連機能に影響がないことを確認",
        ),
        ChangeType.FEATURE: (
            "1. 新機能が仕様通り動作することを確認",
            "2. 既存機能に影響がないことを確認",
            "3. エラーハンドリングが適切であることを確認",
        ),
        ChangeType.BREAKING_CHANGE: (
            "1. 変更前後の動作を比較確認",
            "2. 影響範囲を徹底的に確認",
            "3. マイグレーション手順を確認",
        ),
    },
    default_verification_steps=(
        "1. 変更内容を確認",
        "2. 動作確認を実施",
        "3. エラーが発生しないことを確認",
    ),
    backgrounds={
        ChangeType.BUGFIX: "報告されたバグまたは不具合の修正が必要でした。",
        ChangeType.FEATURE: "新しい機能の追加要求がありました。",
        ChangeType.BREAKING_CHANGE: "システムの重要な変更が必要になりました。",
        ChangeType.OTHER: "以下の理由により変更が必要でした。",
    },
    review_points={
        "api": (
            "- [ ] APIエンドポイントの実装が適切か",
            "- [ ] エラーハンドリングが適切か",
        ),
        "frontend": (
            "- [ ] UI/UXが仕様通りか",
            "- [ ] レスポンシブ対応が適切か",
        ),
        "database": (
            "- [ ] マイグレーションが安全に実行できるか",
            "- [ ] インデックスの設定が適切か",
        ),
        "test": (
            "- [ ] テストケースが適切か",
            "- [ ] テストが正常に通るか",
        ),
    },
    default_review_points=(
        "- [ ] 変更内容が要件を満たしているか",
        "- [ ] コード品質が保たれているか",
    ),
    config_caution="設定ファイルの変更があるため、環境変数や設定の更新が必要な場合があります。",
    breaking_caution="破壊的変更のため、デプロイ前に関連システムの影響確認が必要です。",
    urgent_caution="緊急修正のため、デプロイ後の動作確認を重点的に実施してください。",
    fallback_summary_heading="## 📋 概要",
    fallback_ticket_line="**関連**: closes {ticket}",
    fallback_changes_heading="## 🎯 変更内容",
    footer="Generated with prdesc | Files: {files} | Lines: ±{changes}",
)


CATALOGS: Dict[str, Messages] = {"en": ENGLISH, "ja": JAPANESE}
SUPPORTED_LOCALES: Sequence[str] = tuple(CATALOGS)


def get_messages(locale: str | None) -> Messages:
    """Return the catalog for ``locale``, falling back to English."""
    if not locale:
        return ENGLISH
    return CATALOGS.get(locale.lower(), ENGLISH)


__all__ = ["CATALOGS", "ENGLISH", "JAPANESE", "Messages", "SUPPORTED_LOCALES", "get_messages"]
