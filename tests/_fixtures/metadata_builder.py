"""Helpers for constructing pull request metadata in tests."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping

from prdesc.models import ChangeMetadata

NEUTRAL_FILES = (
    "lib/alpha.py",
    "lib/beta.py",
    "lib/gamma.py",
    "lib/delta.py",
    "lib/epsilon.py",
    "lib/zeta.py",
)


def make_metadata(
    *,
    title: str | None = None,
    body: str | None = None,
    branch_name: str | None = None,
    labels: Iterable[str] = (),
    files: Iterable[str] = ("lib/alpha.py",),
    diff: str = "",
    additions: int = 0,
    deletions: int = 0,
    file_count: int | None = None,
) -> ChangeMetadata:
    """Return metadata with neutral defaults that trigger no keyword rules."""
    return ChangeMetadata(
        title=title,
        body=body,
        branch_name=branch_name,
        labels=frozenset(labels),
        files=tuple(files),
        diff=diff,
        additions=additions,
        deletions=deletions,
        file_count=file_count,
    )


def make_large_metadata(**overrides: object) -> ChangeMetadata:
    """Return metadata whose size alone selects the standard scale."""
    values: dict[str, object] = {
        "title": "Rework lookup tables",
        "branch_name": "rework/lookup",
        "files": NEUTRAL_FILES,
        "additions": 120,
        "deletions": 10,
    }
    values.update(overrides)
    return make_metadata(**values)  # type: ignore[arg-type]


class TemplateDirBuilder:
    """Writes template files into a temporary directory."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "templates"
        self.root.mkdir()

    def write(self, templates: Mapping[str, str]) -> Path:
        for name, content in templates.items():
            (self.root / name).write_text(content, encoding="utf-8")
        return self.root


__all__ = ["NEUTRAL_FILES", "TemplateDirBuilder", "make_large_metadata", "make_metadata"]
