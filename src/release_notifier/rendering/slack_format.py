"""Slack mrkdwn formatting for the release-notes digest.

One message per run: a "no updates" line for an empty batch, otherwise a
header with a deep link followed by one block per note.
"""

from __future__ import annotations

import re
from typing import List, Sequence

from release_notifier.schemas.note import Note

# Convert Markdown **bold** -> Slack *bold*
_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")

BLOCK_SEP = "\n\n"


def markdown_to_slack_mrkdwn(text: str) -> str:
    """
    Convert Markdown bold (**like this**) to Slack mrkdwn bold (*like this*).
    Keeps triple-backtick code blocks unchanged.
    """
    parts = re.split(r"(```[\s\S]*?```)", text)  # keep code blocks
    out: List[str] = []
    for p in parts:
        if p.startswith("```") and p.endswith("```"):
            out.append(p)
        else:
            out.append(_BOLD_RE.sub(r"*\1*", p))
    return "".join(out)


def deep_link(base_url: str, label: str) -> str:
    """Anchor on the release-notes page: 2025-02-01 -> <base>#2025_02_01."""
    return f"{base_url}#{label.replace('-', '_')}"


def render_empty(label: str) -> str:
    return f"No new Google Cloud release notes since {label}."


def render_header(label: str, base_url: str) -> str:
    return (
        f"**Google Cloud release notes since {label}**\n"
        f"<{deep_link(base_url, label)}|Open the release notes page>"
    )


def render_note(note: Note) -> str:
    body = note.translated_description or note.description or "-"
    return f"**{note.product_name}** ({note.release_note_type})\n{body}"


def render_notes_to_markdown(label: str, notes: Sequence[Note], base_url: str) -> str:
    if not notes:
        return render_empty(label)
    blocks = [render_header(label, base_url)] + [render_note(n) for n in notes]
    return BLOCK_SEP.join(blocks)


def render_notes_to_slack(label: str, notes: Sequence[Note], base_url: str) -> str:
    """
    End-to-end: notes -> Slack mrkdwn text.
    """
    return markdown_to_slack_mrkdwn(render_notes_to_markdown(label, notes, base_url))
