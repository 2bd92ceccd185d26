"""Built-in description layout used when a template cannot be loaded."""

from __future__ import annotations

from typing import List, Optional

from .locales import ENGLISH, Messages


def build_fallback_description(
    *,
    summary: str,
    changes_summary: str,
    file_count: int,
    total_changes: int,
    ticket_reference: Optional[str] = None,
    messages: Messages = ENGLISH,
) -> str:
    """Return a plain layout with the summary, ticket and change overview."""
    lines: List[str] = [messages.fallback_summary_heading, summary, ""]

    if ticket_reference:
        lines.append(messages.fallback_ticket_line.format(ticket=ticket_reference))
        lines.append("")

    lines.append(messages.fallback_changes_heading)
    lines.append(changes_summary)
    lines.append("")
    lines.append("---")
    lines.append(messages.footer.format(files=file_count, changes=total_changes))
    return "\n".join(lines) + "\n"


__all__ = ["build_fallback_description"]
