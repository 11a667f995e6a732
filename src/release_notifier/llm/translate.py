"""Localized summaries of release-note descriptions.

Translator.translate() is total: it always returns a string. Upstream
failures are reported as one of the sentinel strings below instead of
raising, so a single bad note never aborts the batch.
"""

import asyncio
from typing import Optional

from tenacity import RetryError

from .client import LLMClient, llm_client
from .prompts import load_prompt
from ..config import get_settings
from ..log import get_logger
from ..retry import BACKOFF_BASE, MAX_ATTEMPTS, bounded_retry
from ..schemas.note import Note

logger = get_logger("translate")

INVALID_INPUT = "invalid input"
NO_RESPONSE = "no response from service"
CALL_FAILED = "call failed"
MAX_RETRIES_REACHED = "max retries reached"

SENTINELS = frozenset({INVALID_INPUT, NO_RESPONSE, CALL_FAILED, MAX_RETRIES_REACHED})


def build_prompt(description: str, language: str) -> str:
    return load_prompt("translate_summary").format(language=language, description=description)


class Translator:
    def __init__(
        self,
        client: Optional[LLMClient] = None,
        model: Optional[str] = None,
        language: Optional[str] = None,
        max_attempts: int = MAX_ATTEMPTS,
        backoff_base: float = BACKOFF_BASE,
        timeout: Optional[float] = None,
    ):
        settings = get_settings()
        self.client = client or llm_client
        self.model = model or settings.MODEL_TRANSLATE
        self.language = language or settings.TRANSLATE_LANGUAGE
        self.max_attempts = max_attempts
        self.backoff_base = backoff_base
        self.timeout = timeout or settings.TRANSLATE_TIMEOUT_SECONDS

    async def translate(self, description: str) -> str:
        if not description or not description.strip():
            return INVALID_INPUT

        try:
            prompt = build_prompt(description, self.language)
            async for attempt in bounded_retry(
                max_attempts=self.max_attempts,
                backoff_base=self.backoff_base,
                name="translate",
            ):
                with attempt:
                    text = await asyncio.wait_for(
                        self.client.complete(prompt, self.model),
                        timeout=self.timeout,
                    )
        except RetryError:
            logger.error(f"Translation gave up after {self.max_attempts} attempts")
            return MAX_RETRIES_REACHED
        except TimeoutError:
            logger.error(f"Translation timed out after {self.timeout:.0f}s")
            return NO_RESPONSE
        except Exception as e:
            logger.error(f"Translation call failed: {e}")
            return CALL_FAILED

        if not text or not text.strip():
            logger.warning("Translation service returned an empty response")
            return NO_RESPONSE
        return text.strip()

    async def translate_note(self, note: Note) -> Note:
        return note.with_translation(await self.translate(note.description))
