"""Release-note extractors.

Two interchangeable strategies find notes newer than a watermark date:
a BigQuery query against the public release-notes dataset, and a scrape
of the release-notes web page. The pipeline only depends on Extractor.
"""

from datetime import date
from typing import List, Protocol
from ...config import Settings, get_settings
from ...schemas.note import Note

class ExtractionError(Exception):
    """Source-level failure (query error, page load failure). Aborts the run."""

class Extractor(Protocol):
    async def extract(self, watermark: date) -> List[Note]:
        ...

def get_extractor(kind: str, settings: Settings = None) -> Extractor:
    settings = settings or get_settings()
    if kind == "query":
        from .bigquery import BigQueryExtractor
        return BigQueryExtractor(
            table=settings.RELEASE_NOTES_TABLE,
            mode=settings.QUERY_MODE,
            project=settings.GCP_PROJECT_ID,
        )
    if kind == "scrape":
        from .page import PageScrapeExtractor
        from ..fetch import PageLoader
        return PageScrapeExtractor(
            url=settings.RELEASE_NOTES_URL,
            loader=PageLoader(timeout=settings.SCRAPE_TIMEOUT_SECONDS),
        )
    raise ValueError(f"Unknown extractor kind: {kind!r}")
