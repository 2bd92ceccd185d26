"""Locate and read description templates."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..logging import get_logger

logger = get_logger("templating")

PACKAGED_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
DEFAULT_LOCALE = "en"


class TemplateNotFoundError(FileNotFoundError):
    """Raised when no template resource exists for the requested name."""


class TemplateLoader:
    """Reads templates from a project override directory or the packaged set."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        locale: str | None = None,
        packaged_dir: Path | None = None,
    ) -> None:
        self.templates_dir = templates_dir
        self.locale = (locale or DEFAULT_LOCALE).lower()
        self.packaged_dir = packaged_dir or PACKAGED_TEMPLATES_DIR

    def candidates(self, name: str) -> List[Path]:
        paths: List[Path] = []
        if self.templates_dir is not None:
            paths.append(self.templates_dir / name)
        paths.append(self.packaged_dir / self.locale / name)
        if self.locale != DEFAULT_LOCALE:
            paths.append(self.packaged_dir / DEFAULT_LOCALE / name)
        return paths

    def load(self, name: str) -> str:
        """Return the template text for ``name``."""
        for path in self.candidates(name):
            if path.is_file():
                logger.debug("Loading template %s", path)
                return path.read_text(encoding="utf-8")
        searched = ", ".join(str(path) for path in self.candidates(name))
        raise TemplateNotFoundError(f"Template {name} not found (searched: {searched})")


__all__ = ["PACKAGED_TEMPLATES_DIR", "TemplateLoader", "TemplateNotFoundError"]
