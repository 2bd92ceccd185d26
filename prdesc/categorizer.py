"""Path-based grouping of changed files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

from .models import CATEGORY_NAMES, FileCategoryBuckets


@dataclass(frozen=True)
class CategoryRule:
    """Associates literal path fragments with a file category."""

    category: str
    contains: Sequence[str] = ()
    suffixes: Sequence[str] = ()
    exact: Sequence[str] = ()

    def matches(self, path: str) -> bool:
        if path in self.exact:
            return True
        if any(path.endswith(suffix) for suffix in self.suffixes):
            return True
        return any(fragment in path for fragment in self.contains)


# Case-sensitive on purpose: the fragments are matched literally.
_CATEGORY_RULES: Sequence[CategoryRule] = (
    CategoryRule(category="api", contains=("controller", "service", "src/")),
    CategoryRule(category="frontend", contains=(".vue", ".tsx", "components/")),
    CategoryRule(category="database", contains=("migration", "entity")),
    CategoryRule(category="config", exact=("package.json",), contains=(".config", ".yml")),
    CategoryRule(category="test", contains=("test", "spec", ".test.")),
    CategoryRule(category="docs", suffixes=(".md",), contains=("docs/",)),
)

_RULES_BY_CATEGORY: Dict[str, CategoryRule] = {rule.category: rule for rule in _CATEGORY_RULES}


def matches(category: str, path: str) -> bool:
    """Return True when ``path`` belongs to ``category``."""
    try:
        rule = _RULES_BY_CATEGORY[category]
    except KeyError:
        raise KeyError(f"Unknown file category: {category}") from None
    return rule.matches(path)


def categorize(files: Iterable[str]) -> FileCategoryBuckets:
    """Partition ``files`` into category buckets.

    A path lands in every bucket whose rule matches it, so the buckets may
    overlap. Paths keep their input order inside each bucket.
    """
    grouped: Dict[str, List[str]] = {name: [] for name in CATEGORY_NAMES}
    for path in files:
        for rule in _CATEGORY_RULES:
            if rule.matches(path):
                grouped[rule.category].append(path)
    return FileCategoryBuckets(**{name: tuple(paths) for name, paths in grouped.items()})


__all__ = ["CategoryRule", "categorize", "matches"]
