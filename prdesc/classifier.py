"""Rule-based classification of pull requests into change type and scale."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from . import categorizer
from .logging import get_logger
from .models import (
    ChangeMetadata,
    ChangeType,
    ClassificationRecord,
    FileCategoryBuckets,
    Scale,
)

logger = get_logger("classifier")

BUG_KEYWORDS: Sequence[str] = ("fix", "bug", "hotfix", "patch", "修正", "バグ")
BUG_LABELS = frozenset({"bug", "hotfix"})

FEATURE_KEYWORDS: Sequence[str] = ("feat", "feature", "add", "breaking", "機能", "追加")
FEATURE_LABELS = frozenset({"enhancement", "feature", "breaking-change"})
BREAKING_MARKER = "BREAKING CHANGE"

URGENT_KEYWORDS: Sequence[str] = ("urgent", "critical", "emergency", "緊急", "重要")
URGENT_LABELS = frozenset({"critical", "urgent"})

MINIMAL_MAX_FILES = 3
MINIMAL_MAX_CHANGES = 50

DEFAULT_TICKET_PREFIX = "FON"


@dataclass(frozen=True)
class ClassificationInput:
    """Normalised view of the metadata consumed by the rules."""

    title: str
    branch: str
    text: str
    labels: frozenset
    diff: str
    files: Sequence[str]
    buckets: FileCategoryBuckets
    file_count: int
    total_changes: int
    override: Optional[Scale]
    ticket_pattern: re.Pattern[str]

    @classmethod
    def from_metadata(
        cls,
        metadata: ChangeMetadata,
        override: Optional[Scale],
        ticket_pattern: re.Pattern[str],
    ) -> "ClassificationInput":
        title = metadata.title or ""
        branch = metadata.branch_name or ""
        body = metadata.body or ""
        return cls(
            title=title.lower(),
            branch=branch.lower(),
            text=f"{title} {branch} {body}",
            labels=metadata.labels,
            diff=metadata.diff,
            files=metadata.files,
            buckets=categorizer.categorize(metadata.files),
            file_count=metadata.effective_file_count,
            total_changes=metadata.total_changes,
            override=override,
            ticket_pattern=ticket_pattern,
        )

    def mentions(self, keywords: Sequence[str]) -> bool:
        return any(keyword in self.title or keyword in self.branch for keyword in keywords)

    def has_label(self, names: frozenset) -> bool:
        return bool(self.labels & names)

    @property
    def is_docs_only(self) -> bool:
        return all(categorizer.matches("docs", path) for path in self.files)

    @property
    def is_test_only(self) -> bool:
        return all(categorizer.matches("test", path) for path in self.files)

    @property
    def has_config_files(self) -> bool:
        return bool(self.buckets.config)


@dataclass
class ClassificationDraft:
    """Working state threaded through the rules of a single ``classify`` call."""

    scale: Scale = Scale.MINIMAL
    change_type: ChangeType = ChangeType.OTHER
    is_urgent: bool = False
    bugfix_forced: bool = False
    escalation_pending: bool = False
    ticket_reference: Optional[str] = None
    fired: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ClassificationRule:
    """A named step that may update the draft; returns True when it fired."""

    name: str
    apply: Callable[[ClassificationInput, ClassificationDraft], bool]


def _base_scale(signals: ClassificationInput, draft: ClassificationDraft) -> bool:
    if signals.override is not None:
        draft.scale = signals.override
    elif (
        signals.file_count <= MINIMAL_MAX_FILES
        or signals.total_changes <= MINIMAL_MAX_CHANGES
    ):
        draft.scale = Scale.MINIMAL
    else:
        draft.scale = Scale.STANDARD
    return True


def _bugfix(signals: ClassificationInput, draft: ClassificationDraft) -> bool:
    if not (signals.mentions(BUG_KEYWORDS) or signals.has_label(BUG_LABELS)):
        return False
    draft.change_type = ChangeType.BUGFIX
    draft.scale = Scale.MINIMAL
    draft.bugfix_forced = True
    return True


def _feature(signals: ClassificationInput, draft: ClassificationDraft) -> bool:
    breaking = BREAKING_MARKER in signals.diff
    if not (
        signals.mentions(FEATURE_KEYWORDS)
        or signals.has_label(FEATURE_LABELS)
        or breaking
    ):
        return False
    draft.change_type = ChangeType.BREAKING_CHANGE if breaking else ChangeType.FEATURE
    draft.escalation_pending = True
    return True


def _urgency(signals: ClassificationInput, draft: ClassificationDraft) -> bool:
    if not (signals.mentions(URGENT_KEYWORDS) or signals.has_label(URGENT_LABELS)):
        return False
    draft.is_urgent = True
    return True


def _file_shape(signals: ClassificationInput, draft: ClassificationDraft) -> bool:
    if signals.is_docs_only or signals.is_test_only:
        draft.scale = Scale.MINIMAL
        draft.escalation_pending = False
        return True
    if signals.has_config_files and draft.scale is Scale.MINIMAL:
        draft.scale = Scale.STANDARD
        return True
    return False


def _escalation(signals: ClassificationInput, draft: ClassificationDraft) -> bool:
    if not draft.escalation_pending or signals.override is not None or draft.bugfix_forced:
        return False
    if draft.scale is Scale.STANDARD:
        return False
    draft.scale = Scale.STANDARD
    return True


def _ticket(signals: ClassificationInput, draft: ClassificationDraft) -> bool:
    match = signals.ticket_pattern.search(signals.text)
    if match is None:
        return False
    draft.ticket_reference = match.group(0).upper()
    return True


# Order matters: later rules override earlier ones.
DEFAULT_RULES: Sequence[ClassificationRule] = (
    ClassificationRule("base-scale", _base_scale),
    ClassificationRule("bugfix", _bugfix),
    ClassificationRule("feature", _feature),
    ClassificationRule("urgency", _urgency),
    ClassificationRule("file-shape", _file_shape),
    ClassificationRule("escalation", _escalation),
    ClassificationRule("ticket", _ticket),
)


def ticket_pattern(prefix: str = DEFAULT_TICKET_PREFIX) -> re.Pattern[str]:
    """Compile the ``<PREFIX>-<digits>`` ticket matcher."""
    cleaned = (prefix or DEFAULT_TICKET_PREFIX).strip().upper()
    return re.compile(rf"{re.escape(cleaned)}-\d+", re.IGNORECASE)


class ChangeClassifier:
    """Applies the ordered classification rules to pull request metadata."""

    def __init__(
        self,
        *,
        ticket_prefix: str = DEFAULT_TICKET_PREFIX,
        rules: Sequence[ClassificationRule] | None = None,
    ) -> None:
        self._ticket_pattern = ticket_pattern(ticket_prefix)
        self._rules = tuple(rules) if rules is not None else DEFAULT_RULES

    @property
    def rules(self) -> Sequence[ClassificationRule]:
        return self._rules

    def classify(
        self,
        metadata: ChangeMetadata,
        override_scale: Scale | str | None = None,
    ) -> ClassificationRecord:
        override = Scale.parse(override_scale) if override_scale is not None else None
        signals = ClassificationInput.from_metadata(metadata, override, self._ticket_pattern)
        draft = ClassificationDraft()
        for rule in self._rules:
            if rule.apply(signals, draft):
                draft.fired.append(rule.name)
                logger.debug(
                    "Rule %s fired (scale=%s, type=%s)",
                    rule.name,
                    draft.scale.value,
                    draft.change_type.value,
                )

        return ClassificationRecord(
            scale=draft.scale,
            change_type=draft.change_type,
            is_urgent=draft.is_urgent,
            ticket_reference=draft.ticket_reference,
            file_count=signals.file_count,
            total_changes=signals.total_changes,
            is_docs_only=signals.is_docs_only,
            is_test_only=signals.is_test_only,
            has_config_files=signals.has_config_files,
            buckets=signals.buckets,
            fired_rules=tuple(draft.fired),
        )


def classify(
    metadata: ChangeMetadata,
    override_scale: Scale | str | None = None,
    *,
    ticket_prefix: str = DEFAULT_TICKET_PREFIX,
) -> ClassificationRecord:
    """Classify ``metadata`` with the default rule set."""
    return ChangeClassifier(ticket_prefix=ticket_prefix).classify(metadata, override_scale)


__all__ = [
    "BREAKING_MARKER",
    "BUG_KEYWORDS",
    "ChangeClassifier",
    "ClassificationDraft",
    "ClassificationInput",
    "ClassificationRule",
    "DEFAULT_RULES",
    "FEATURE_KEYWORDS",
    "URGENT_KEYWORDS",
    "classify",
    "ticket_pattern",
]
