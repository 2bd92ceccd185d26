"""Minimal template language: ``{{name}}`` substitution and ``{{#name}}`` blocks."""

from __future__ import annotations

import re

from ..models import TemplateValue, TemplateVariables

# Names are ASCII identifiers; anything else between braces stays literal.
_NAME = r"([A-Za-z0-9_]+)"
_PLACEHOLDER_RE = re.compile(r"\{\{" + _NAME + r"\}\}")
# The body may not contain another open tag, so the first close tag always
# pairs with the nearest preceding open tag.
_BLOCK_RE = re.compile(
    r"\{\{#" + _NAME + r"\}\}((?:(?!\{\{#)[\s\S])*?)\{\{/" + _NAME + r"\}\}"
)


def _as_text(value: TemplateValue) -> str:
    if value is None or isinstance(value, bool):
        return ""
    return str(value)


def substitute(template: str, variables: TemplateVariables) -> str:
    """Replace every ``{{name}}`` with the text form of its value.

    Booleans, ``None`` and unknown names render as an empty string.
    """

    def _replace(match: re.Match[str]) -> str:
        return _as_text(variables.get(match.group(1)))

    return _PLACEHOLDER_RE.sub(_replace, template)


def resolve_conditionals(text: str, variables: TemplateVariables) -> str:
    """Keep or drop ``{{#name}}...{{/name}}`` regions based on truthiness.

    Regions whose open and close names differ are left as literal text.
    Nested regions resolve innermost first until the text stops changing.
    """

    def _replace(match: re.Match[str]) -> str:
        start, content, end = match.group(1), match.group(2), match.group(3)
        if start != end:
            return match.group(0)
        return content if variables.get(start) else ""

    previous = None
    while previous != text:
        previous = text
        text = _BLOCK_RE.sub(_replace, text)
    return text


def render(template: str, variables: TemplateVariables) -> str:
    """Render ``template``: substitution first, then conditional blocks."""
    return resolve_conditionals(substitute(template, variables), variables)


__all__ = ["render", "resolve_conditionals", "substitute"]
