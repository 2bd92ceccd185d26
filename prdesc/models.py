"""Core data models shared across prdesc components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Mapping, Optional, Tuple, Union


class Scale(str, Enum):
    """Verbosity tier of a generated description."""

    MINIMAL = "minimal"
    STANDARD = "standard"

    @classmethod
    def parse(cls, value: object) -> Optional["Scale"]:
        """Return the matching scale, or ``None`` for unknown values."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower().lstrip("-")
            for member in cls:
                if member.value == lowered:
                    return member
        return None


class ChangeType(str, Enum):
    """Category of a pull request."""

    BUGFIX = "bugfix"
    FEATURE = "feature"
    BREAKING_CHANGE = "breaking-change"
    OTHER = "other"


CATEGORY_NAMES: Tuple[str, ...] = ("api", "frontend", "database", "config", "test", "docs")


@dataclass(frozen=True)
class ChangeMetadata:
    """Pull request facts supplied by an external fetcher.

    Every field is optional; missing text behaves as an empty string.
    """

    title: Optional[str] = None
    body: Optional[str] = None
    branch_name: Optional[str] = None
    labels: frozenset = field(default_factory=frozenset)
    files: Tuple[str, ...] = ()
    diff: str = ""
    additions: int = 0
    deletions: int = 0
    file_count: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "labels", frozenset(str(label).strip().lower() for label in self.labels)
        )
        object.__setattr__(self, "files", tuple(self.files))
        object.__setattr__(self, "diff", self.diff or "")
        object.__setattr__(self, "additions", max(int(self.additions or 0), 0))
        object.__setattr__(self, "deletions", max(int(self.deletions or 0), 0))

    @property
    def effective_file_count(self) -> int:
        if self.file_count:
            return self.file_count
        return len(self.files)

    @property
    def total_changes(self) -> int:
        return self.additions + self.deletions


@dataclass(frozen=True)
class FileCategoryBuckets:
    """Changed paths grouped by category, preserving input order."""

    api: Tuple[str, ...] = ()
    frontend: Tuple[str, ...] = ()
    database: Tuple[str, ...] = ()
    config: Tuple[str, ...] = ()
    test: Tuple[str, ...] = ()
    docs: Tuple[str, ...] = ()

    def get(self, category: str) -> Tuple[str, ...]:
        if category not in CATEGORY_NAMES:
            raise KeyError(category)
        return getattr(self, category)

    def non_empty(self) -> Iterable[Tuple[str, Tuple[str, ...]]]:
        """Yield ``(category, paths)`` for populated buckets in fixed order."""
        for name in CATEGORY_NAMES:
            paths = getattr(self, name)
            if paths:
                yield name, paths

    def as_dict(self) -> dict[str, list[str]]:
        return {name: list(getattr(self, name)) for name in CATEGORY_NAMES}


@dataclass(frozen=True)
class ClassificationRecord:
    """Outcome of classifying a pull request."""

    scale: Scale
    change_type: ChangeType
    is_urgent: bool
    ticket_reference: Optional[str]
    file_count: int
    total_changes: int
    is_docs_only: bool
    is_test_only: bool
    has_config_files: bool
    buckets: FileCategoryBuckets = field(default_factory=FileCategoryBuckets)
    fired_rules: Tuple[str, ...] = ()


TemplateValue = Union[str, int, bool, None]
TemplateVariables = Mapping[str, TemplateValue]


__all__ = [
    "CATEGORY_NAMES",
    "ChangeMetadata",
    "ChangeType",
    "ClassificationRecord",
    "FileCategoryBuckets",
    "Scale",
    "TemplateValue",
    "TemplateVariables",
]
