"""Turns a classification into a rendered pull request description."""

from __future__ import annotations

from typing import Dict, List, Mapping, Sequence

from .failsafe import build_fallback_description
from .locales import Messages, get_messages
from .logging import get_logger
from .models import (
    ChangeMetadata,
    ChangeType,
    ClassificationRecord,
    FileCategoryBuckets,
    Scale,
    TemplateValue,
)
from .templating import TemplateLoader, render

logger = get_logger("composer")

MINIMAL_TEMPLATE = "pr-desc-minimal.md"
STANDARD_TEMPLATE = "pr-desc-standard.md"
REVIEW_TEMPLATE = "pr-review.md"

TEMPLATES_BY_SCALE: Mapping[Scale, str] = {
    Scale.MINIMAL: MINIMAL_TEMPLATE,
    Scale.STANDARD: STANDARD_TEMPLATE,
}

VERIFICATION_LIMITS: Mapping[Scale, int] = {
    Scale.MINIMAL: 1,
    Scale.STANDARD: 2,
}


class DescriptionComposer:
    """Builds template variables from a classification and renders them."""

    def __init__(
        self,
        loader: TemplateLoader | None = None,
        *,
        locale: str | None = None,
    ) -> None:
        self.loader = loader or TemplateLoader(locale=locale)
        self.messages: Messages = get_messages(locale or self.loader.locale)

    def compose(self, record: ClassificationRecord, metadata: ChangeMetadata) -> str:
        """Return the header block followed by the rendered template."""
        header = self.build_header(record, metadata)
        variables = self.build_variables(record, metadata)
        template_name = TEMPLATES_BY_SCALE.get(record.scale, STANDARD_TEMPLATE)
        try:
            template = self.loader.load(template_name)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Template could not be loaded, using built-in layout: %s", exc)
            body = build_fallback_description(
                summary=str(variables["summary"]),
                changes_summary=str(variables["changesSummary"]),
                file_count=record.file_count,
                total_changes=record.total_changes,
                ticket_reference=record.ticket_reference,
                messages=self.messages,
            )
        else:
            body = render(template, variables)
        return header + body

    def compose_review(self, files: Sequence[str]) -> str:
        """Render the reviewer checklist for the given changed files."""
        files_list = "\n".join(f"- {path}" for path in files)
        template = self.loader.load(REVIEW_TEMPLATE)
        variables = {"filesList": files_list, "hasFiles": bool(files)}
        return render(template, variables)

    # ------------------------------------------------------------------
    # Building blocks

    def build_header(self, record: ClassificationRecord, metadata: ChangeMetadata) -> str:
        messages = self.messages
        lines = [
            messages.header_scale.format(label=self.scale_label(record.scale)),
            messages.header_stats.format(
                files=record.file_count,
                additions=metadata.additions,
                deletions=metadata.deletions,
            ),
            messages.header_type.format(label=self.change_type_label(record.change_type)),
        ]
        return "\n".join(lines) + "\n\n"

    def build_variables(
        self, record: ClassificationRecord, metadata: ChangeMetadata
    ) -> Dict[str, TemplateValue]:
        return {
            "summary": self.summary(record, metadata.title),
            "ticketReference": record.ticket_reference or "",
            "changesSummary": self.changes_summary(record.buckets),
            "verificationSteps": self.verification_steps(record.change_type, record.scale),
            "background": self.background(record.change_type),
            "reviewPoints": self.review_points(record.buckets),
            "cautions": self.cautions(record),
            "fileCount": record.file_count,
            "totalChanges": record.total_changes,
            "hasCautions": (
                record.has_config_files
                or record.change_type is ChangeType.BREAKING_CHANGE
                or record.is_urgent
            ),
        }

    def scale_label(self, scale: Scale) -> str:
        return self.messages.scale_labels.get(scale, str(scale.value))

    def change_type_label(self, change_type: ChangeType) -> str:
        return self.messages.change_type_labels[change_type]

    def summary(self, record: ClassificationRecord, title: str | None) -> str:
        prefix = self.messages.urgent_prefix if record.is_urgent else ""
        if title:
            return f"{prefix}{title}"
        label = self.change_type_label(record.change_type)
        return f"{prefix}{self.messages.summary_fallback.format(label=label)}"

    def changes_summary(self, buckets: FileCategoryBuckets) -> str:
        lines = [
            self.messages.category_line.format(
                name=self.messages.category_names[category], count=len(paths)
            )
            for category, paths in buckets.non_empty()
        ]
        if not lines:
            lines.append(self.messages.other_changes_line)
        return "\n".join(lines)

    def verification_steps(self, change_type: ChangeType, scale: Scale) -> str:
        steps = self.messages.verification_steps.get(
            change_type, self.messages.default_verification_steps
        )
        limit = VERIFICATION_LIMITS.get(scale, VERIFICATION_LIMITS[Scale.STANDARD])
        return "\n".join(steps[:limit])

    def background(self, change_type: ChangeType) -> str:
        backgrounds = self.messages.backgrounds
        return backgrounds.get(change_type, backgrounds[ChangeType.OTHER])

    def review_points(self, buckets: FileCategoryBuckets) -> str:
        points: List[str] = []
        for category, _ in buckets.non_empty():
            points.extend(self.messages.review_points.get(category, ()))
        if not points:
            points.extend(self.messages.default_review_points)
        return "\n".join(points)

    def cautions(self, record: ClassificationRecord) -> str:
        cautions: List[str] = []
        if record.has_config_files:
            cautions.append(self.messages.config_caution)
        if record.change_type is ChangeType.BREAKING_CHANGE:
            cautions.append(self.messages.breaking_caution)
        if record.is_urgent:
            cautions.append(self.messages.urgent_caution)
        return "\n".join(cautions)


def compose(
    record: ClassificationRecord,
    metadata: ChangeMetadata,
    *,
    loader: TemplateLoader | None = None,
    locale: str | None = None,
) -> str:
    """Render a description with a one-off composer."""
    return DescriptionComposer(loader, locale=locale).compose(record, metadata)


__all__ = [
    "DescriptionComposer",
    "MINIMAL_TEMPLATE",
    "REVIEW_TEMPLATE",
    "STANDARD_TEMPLATE",
    "TEMPLATES_BY_SCALE",
    "compose",
]
