"""Template rendering for pull request descriptions."""

from .engine import render, resolve_conditionals, substitute
from .loader import TemplateLoader, TemplateNotFoundError

__all__ = [
    "TemplateLoader",
    "TemplateNotFoundError",
    "render",
    "resolve_conditionals",
    "substitute",
]
