"""Delivers the enriched batch to Slack.

Delivery failures are logged and swallowed: notify() returns False instead
of raising so that a Slack outage never fails the run.
"""

from __future__ import annotations

from typing import Optional, Sequence

from slack_sdk.errors import SlackApiError
from tenacity import RetryError

from release_notifier.config import get_settings
from release_notifier.log import get_logger
from release_notifier.rendering.slack_format import render_notes_to_slack
from release_notifier.retry import BACKOFF_BASE, MAX_ATTEMPTS, bounded_retry
from release_notifier.schemas.note import Note
from release_notifier.slack.client import SlackClientWrapper, slack_client
from release_notifier.slack.post_blocks import build_post_payload

logger = get_logger("notify")


class Notifier:
    def __init__(
        self,
        client: Optional[SlackClientWrapper] = None,
        channel: Optional[str] = None,
        release_notes_url: Optional[str] = None,
        max_attempts: int = MAX_ATTEMPTS,
        backoff_base: float = BACKOFF_BASE,
    ):
        settings = get_settings()
        self.client = client or slack_client
        self.channel = channel or settings.SLACK_CHANNEL_ID
        self.release_notes_url = release_notes_url or settings.RELEASE_NOTES_URL
        self.max_attempts = max_attempts
        self.backoff_base = backoff_base

    def format_message(self, label: str, notes: Sequence[Note]) -> str:
        return render_notes_to_slack(label, notes, self.release_notes_url)

    async def notify(self, label: str, notes: Sequence[Note]) -> bool:
        """
        Post one message for the batch. Returns True when Slack accepted it.
        Re-running with the same label posts again; there is no dedup across runs.
        """
        payload = build_post_payload(channel=self.channel, text=self.format_message(label, notes))
        try:
            async for attempt in bounded_retry(
                max_attempts=self.max_attempts,
                backoff_base=self.backoff_base,
                name="slack",
            ):
                with attempt:
                    await self.client.post_payload(payload)
        except RetryError as e:
            last = e.last_attempt.exception()
            detail = last.response.get("error") if isinstance(last, SlackApiError) else last
            logger.error(f"Slack delivery gave up after {self.max_attempts} attempts: {detail}")
            return False
        except SlackApiError as e:
            logger.error(f"Slack API error: {e.response.get('error')}")
            return False
        except Exception as e:
            logger.error(f"Slack delivery failed: {e}")
            return False

        logger.info(f"Posted {len(notes)} release notes to {self.channel}")
        return True
