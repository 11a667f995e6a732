"""Slack message payload builders.

Provides build_post_payload() for chat.postMessage with mrkdwn formatting.
"""

from __future__ import annotations

from typing import Any, Dict


def build_post_payload(channel: str, text: str) -> Dict[str, Any]:
    """
    Payload for chat.postMessage.
    Posts as plain text with mrkdwn enabled (no blocks) to avoid 3000-char block limit.
    """
    return {
        "channel": channel,
        "text": text,
        "mrkdwn": True,  # Enable mrkdwn formatting in text field
        "unfurl_links": False,
        "unfurl_media": False,
    }
