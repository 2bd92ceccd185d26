"""Tests for the description composer."""

from __future__ import annotations

from pathlib import Path

import pytest

from prdesc.classifier import classify
from prdesc.composer import DescriptionComposer, compose
from prdesc.models import ChangeType, Scale
from prdesc.templating import TemplateLoader, render
from tests._fixtures.metadata_builder import (
    NEUTRAL_FILES,
    TemplateDirBuilder,
    make_large_metadata,
    make_metadata,
)


def _hotfix_metadata():
    return make_metadata(
        title="fix: null pointer",
        branch_name="hotfix/npe",
        files=["src/a.js"],
        additions=5,
        deletions=2,
    )


def test_compose_minimal_bugfix_description() -> None:
    metadata = _hotfix_metadata()
    record = classify(metadata)

    text = compose(record, metadata)

    assert text == (
        "🔍 Change scale: Minimal\n"
        "📊 Stats: 1 files changed, +5 -2 lines\n"
        "🏷️ Type: Bug fix\n"
        "\n"
        "## 📋 Summary\n"
        "fix: null pointer\n"
        "\n"
        "## 🎯 Changes\n"
        "- API: 1 files\n"
        "\n"
        "## ✅ Verification\n"
        "1. Reproduce the defect on the base branch\n"
    )


def test_compose_standard_description_with_ticket_and_cautions() -> None:
    metadata = make_large_metadata(
        title="FON-12 Add export",
        files=("src/export/controller.ts", "config/app.yml", *NEUTRAL_FILES[:4]),
        diff="BREAKING CHANGE: export format changed",
        labels=["urgent"],
    )
    record = classify(metadata)

    text = compose(record, metadata)

    assert record.scale is Scale.STANDARD
    assert text.startswith("🔍 Change scale: Standard\n")
    assert "🏷️ Type: Breaking change" in text
    assert "🚨 Urgent fix: FON-12 Add export" in text
    assert "**Related**: closes FON-12" in text
    assert "## 💡 Background\nA significant change to the system became necessary." in text
    assert "## ⚠️ Cautions" in text
    assert "Files: 6 | Lines: ±130" in text
    assert "{{" not in text


def test_cautions_hidden_when_not_applicable() -> None:
    metadata = make_large_metadata()
    record = classify(metadata)

    text = compose(record, metadata)

    assert "Cautions" not in text
    assert "**Related**" not in text


def test_variables_cover_every_template_name() -> None:
    metadata = make_large_metadata()
    record = classify(metadata)

    variables = DescriptionComposer().build_variables(record, metadata)

    assert set(variables) == {
        "summary",
        "ticketReference",
        "changesSummary",
        "verificationSteps",
        "background",
        "reviewPoints",
        "cautions",
        "fileCount",
        "totalChanges",
        "hasCautions",
    }
    assert variables["fileCount"] == 6
    assert variables["totalChanges"] == 130
    assert variables["hasCautions"] is False
    assert variables["ticketReference"] == ""


def test_cautions_follow_fixed_order() -> None:
    metadata = make_metadata(
        title="urgent: switch billing provider",
        files=["billing.config.js"],
        diff="BREAKING CHANGE",
    )
    record = classify(metadata)
    composer = DescriptionComposer()

    cautions = composer.cautions(record).split("\n")

    assert cautions == [
        composer.messages.config_caution,
        composer.messages.breaking_caution,
        composer.messages.urgent_caution,
    ]
    assert composer.build_variables(record, metadata)["hasCautions"] is True


def test_verification_steps_truncated_by_scale() -> None:
    composer = DescriptionComposer()

    minimal = composer.verification_steps(ChangeType.FEATURE, Scale.MINIMAL)
    standard = composer.verification_steps(ChangeType.FEATURE, Scale.STANDARD)
    other = composer.verification_steps(ChangeType.OTHER, Scale.STANDARD)

    assert minimal == "1. Confirm the new feature behaves as specified"
    assert standard.split("\n") == [
        "1. Confirm the new feature behaves as specified",
        "2. Confirm existing features are unaffected",
    ]
    assert other.split("\n") == ["1. Review the changes", "2. Run a manual smoke test"]


def test_summary_falls_back_to_change_type() -> None:
    metadata = make_metadata(labels=["feature"])
    record = classify(metadata)

    summary = DescriptionComposer().summary(record, metadata.title)

    assert summary == "Apply changes (New feature)"


def test_changes_summary_lists_non_empty_buckets() -> None:
    metadata = make_metadata(
        files=["src/api/user_controller.py", "tests/test_user.py", "docs/api.md"]
    )
    record = classify(metadata)

    summary = DescriptionComposer().changes_summary(record.buckets)

    assert summary.split("\n") == [
        "- API: 1 files",
        "- Tests: 1 files",
        "- Documentation: 1 files",
    ]


def test_changes_summary_fallback_line() -> None:
    record = classify(make_metadata(files=["Makefile"]))

    assert DescriptionComposer().changes_summary(record.buckets) == "- Other file changes"


def test_review_points_follow_categories_with_generic_fallback() -> None:
    composer = DescriptionComposer()
    mixed = classify(make_metadata(files=["src/app.py", "db/migration_1.sql"]))
    docs = classify(make_metadata(files=["docs/guide.md"]))

    mixed_points = composer.review_points(mixed.buckets).split("\n")
    docs_points = composer.review_points(docs.buckets).split("\n")

    assert mixed_points == [
        "- [ ] API endpoints are implemented correctly",
        "- [ ] Error handling is appropriate",
        "- [ ] Migrations can run safely",
        "- [ ] Indexes are configured appropriately",
    ]
    assert docs_points == list(composer.messages.default_review_points)


def test_missing_template_uses_builtin_layout(tmp_path: Path) -> None:
    metadata = make_metadata(
        title="fix: FON-3 retry", files=["src/retry.py"], additions=5, deletions=2
    )
    record = classify(metadata)
    composer = DescriptionComposer(TemplateLoader(packaged_dir=tmp_path))

    text = composer.compose(record, metadata)

    assert text.endswith(
        "## 📋 Summary\n"
        "fix: FON-3 retry\n"
        "\n"
        "**Related**: closes FON-3\n"
        "\n"
        "## 🎯 Changes\n"
        "- API: 1 files\n"
        "\n"
        "---\n"
        "Generated with prdesc | Files: 1 | Lines: ±7\n"
    )
    assert text.startswith("🔍 Change scale: Minimal\n")


def test_template_override_directory_is_used(template_dir: TemplateDirBuilder) -> None:
    root = template_dir.write(
        {"pr-desc-standard.md": "S: {{summary}}{{#hasCautions}} !{{/hasCautions}}\n"}
    )
    metadata = make_large_metadata(title="Rework cache")
    record = classify(metadata)

    text = compose(record, metadata, loader=TemplateLoader(root))

    assert text.endswith("\n\nS: Rework cache\n")


def test_japanese_locale() -> None:
    metadata = _hotfix_metadata()
    record = classify(metadata)

    text = compose(record, metadata, locale="ja")

    assert text.startswith("🔍 変更規模: ミニマム\n")
    assert "🏷️ 種別: バグ修正" in text
    assert "## 📋 概要" in text
    assert "- API関連: 1ファイル" in text


def test_compose_review_lists_files() -> None:
    review = DescriptionComposer().compose_review(["src/a.py", "docs/b.md"])

    assert "- src/a.py\n- docs/b.md" in review
    assert review.endswith("\n")


def test_compose_review_without_files() -> None:
    review = DescriptionComposer().compose_review([])

    assert "- src/" not in review
    assert "### Changed files\n\n### Points to check" in review


def test_compose_is_header_plus_rendered_override(template_dir: TemplateDirBuilder) -> None:
    template = "## Summary\n{{summary}}\nS: {{summary}}  \nnext\n\n\n\nend\n"
    root = template_dir.write({"pr-desc-standard.md": template})
    metadata = make_large_metadata(title="#42 Rework cache")
    record = classify(metadata)
    composer = DescriptionComposer(TemplateLoader(root))

    text = composer.compose(record, metadata)

    expected_body = render(template, composer.build_variables(record, metadata))
    assert text == composer.build_header(record, metadata) + expected_body
    assert text.endswith(
        "## Summary\n#42 Rework cache\nS: #42 Rework cache  \nnext\n\n\n\nend\n"
    )


@pytest.mark.parametrize(
    "metadata",
    [
        make_metadata(title="fix: typo", files=["src/a.js"]),
        make_metadata(title="fix: FON-8 typo", files=["app.config.js"], labels=["urgent"]),
        make_large_metadata(),
        make_large_metadata(title="FON-9 Add export", diff="BREAKING CHANGE"),
    ],
)
def test_packaged_templates_leave_no_blank_runs(metadata) -> None:  # type: ignore[no-untyped-def]
    record = classify(metadata)

    text = compose(record, metadata)

    assert "\n\n\n" not in text
    assert "{{" not in text
    assert text.endswith("\n") and not text.endswith("\n\n")


def test_compose_minimal_with_ticket_and_cautions() -> None:
    metadata = make_metadata(
        title="fix: FON-8 typo", files=["src/a.js"], labels=["urgent"], additions=1
    )
    record = classify(metadata)

    text = compose(record, metadata)

    assert record.scale is Scale.MINIMAL
    assert text.endswith(
        "## 📋 Summary\n"
        "🚨 Urgent fix: fix: FON-8 typo\n"
        "\n"
        "**Related**: closes FON-8\n"
        "\n"
        "## 🎯 Changes\n"
        "- API: 1 files\n"
        "\n"
        "## ✅ Verification\n"
        "1. Reproduce the defect on the base branch\n"
        "\n"
        "## ⚠️ Cautions\n"
        "This is an urgent fix; verify behaviour carefully after deploying.\n"
    )
