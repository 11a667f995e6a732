import asyncio
from datetime import date
from typing import List, Optional

import httpx

from . import ExtractionError
from ..fetch import PageLoader
from ..scrape import extract_notes_from_html
from ...log import get_logger
from ...schemas.note import Note

logger = get_logger("page_scrape")

class PageScrapeExtractor:
    """Scrapes the release-notes page; used when the dataset is unavailable or lagging."""

    def __init__(self, url: str, loader: Optional[PageLoader] = None):
        self.url = url
        self.loader = loader or PageLoader()

    async def extract(self, watermark: date) -> List[Note]:
        logger.info(f"Scraping {self.url} for notes after {watermark.isoformat()}")
        try:
            html = await self.loader.load(self.url)
        except httpx.HTTPError as e:
            raise ExtractionError(f"Failed to load {self.url}: {e}") from e

        # Parsing the full page is CPU-bound; keep it off the event loop
        notes = await asyncio.to_thread(extract_notes_from_html, html, watermark)
        logger.info(f"Scraped {len(notes)} notes")
        return notes
