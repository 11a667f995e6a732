import asyncio
from datetime import date, datetime, timedelta
from typing import List, Optional, Union
from zoneinfo import ZoneInfo

from ..config import Settings, get_settings
from ..llm.translate import Translator
from ..log import get_logger
from ..retrieval.dates import parse_date
from ..retrieval.extractors import Extractor, get_extractor
from ..schemas.note import Note
from .notify import Notifier

logger = get_logger("pipeline")


def resolve_watermark(
    value: Union[date, str, None] = None,
    settings: Optional[Settings] = None,
    now: Optional[datetime] = None,
) -> date:
    """
    Watermark precedence: explicit value, then DEFAULT_WATERMARK,
    then LOOKBACK_DAYS before now in TIMEZONE.
    """
    settings = settings or get_settings()
    if value is None:
        value = settings.DEFAULT_WATERMARK
    if value is not None:
        parsed = parse_date(value)
        if parsed is None:
            raise ValueError(f"Invalid watermark: {value!r}")
        return parsed

    now = now or datetime.now(ZoneInfo(settings.TIMEZONE))
    return (now - timedelta(days=settings.LOOKBACK_DAYS)).date()


class Pipeline:
    """Extract -> translate (concurrently) -> notify."""

    def __init__(
        self,
        extractor: Extractor,
        translator: Optional[Translator] = None,
        notifier: Optional[Notifier] = None,
    ):
        self.extractor = extractor
        self.translator = translator or Translator()
        self.notifier = notifier or Notifier()

    async def translate_all(self, notes: List[Note]) -> List[Note]:
        """One task per note; results come back in input order whatever the completion order."""
        async with asyncio.TaskGroup() as tg:
            tasks = [tg.create_task(self.translator.translate_note(note)) for note in notes]
        return [task.result() for task in tasks]

    async def run(self, watermark: Union[date, str, None] = None) -> List[Note]:
        """
        Run one pass and return the enriched notes.
        ExtractionError propagates (nothing is posted); translation and
        delivery failures are absorbed by Translator and Notifier.
        """
        since = resolve_watermark(watermark)
        label = since.isoformat()
        logger.info(f"Running pipeline with {self.extractor.__class__.__name__}, watermark {label}")

        notes = await self.extractor.extract(since)
        logger.info(f"Extracted {len(notes)} notes")

        enriched = await self.translate_all(notes)

        delivered = await self.notifier.notify(label, enriched)
        if not delivered:
            logger.warning("Slack delivery failed; returning the enriched batch anyway.")
        return enriched


def build_pipeline(kind: str, settings: Optional[Settings] = None) -> Pipeline:
    settings = settings or get_settings()
    return Pipeline(
        extractor=get_extractor(kind, settings),
        translator=Translator(
            max_attempts=settings.MAX_ATTEMPTS,
            backoff_base=settings.BACKOFF_BASE,
        ),
        notifier=Notifier(
            max_attempts=settings.MAX_ATTEMPTS,
            backoff_base=settings.BACKOFF_BASE,
        ),
    )
