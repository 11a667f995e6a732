import asyncio
from datetime import date
from typing import Any, List, Optional

from google.cloud import bigquery

from . import ExtractionError
from ...log import get_logger
from ...schemas.note import Note, NoteType

logger = get_logger("bigquery")

QUERY_TEMPLATE = """
SELECT product_name, description, release_note_type, published_at
FROM `{table}`
WHERE published_at {op} @last_published_at
ORDER BY published_at DESC
"""

# "after": everything newer than the watermark; "on": the daily batch for exactly that date
COMPARATORS = {"after": ">", "on": "="}

class BigQueryExtractor:
    """Structured query against the public Google Cloud release notes table."""

    def __init__(
        self,
        client: Optional[bigquery.Client] = None,
        table: str = "bigquery-public-data.google_cloud_release_notes.release_notes",
        mode: str = "after",
        project: Optional[str] = None,
    ):
        if mode not in COMPARATORS:
            raise ValueError(f"Unknown query mode: {mode!r}")
        self._client = client
        self.table = table
        self.mode = mode
        self.project = project

    @property
    def client(self) -> bigquery.Client:
        if self._client is None:
            self._client = bigquery.Client(project=self.project)
        return self._client

    def build_query(self) -> str:
        return QUERY_TEMPLATE.format(table=self.table, op=COMPARATORS[self.mode])

    def _run_query(self, watermark: date) -> List[Any]:
        job_config = bigquery.QueryJobConfig(
            query_parameters=[
                bigquery.ScalarQueryParameter("last_published_at", "DATE", watermark),
            ]
        )
        return list(self.client.query(self.build_query(), job_config=job_config).result())

    async def extract(self, watermark: date) -> List[Note]:
        logger.info(f"Querying {self.table} for notes {self.mode} {watermark.isoformat()}")
        try:
            # The BigQuery client is blocking; keep the event loop free while it runs.
            rows = await asyncio.to_thread(self._run_query, watermark)
        except Exception as e:
            raise ExtractionError(f"BigQuery query failed: {e}") from e

        notes = [
            Note(
                published_at=row["published_at"],
                product_name=row["product_name"] or "",
                description=row["description"] or "",
                release_note_type=row["release_note_type"] or "",
                type=NoteType.from_label(row["release_note_type"]),
            )
            for row in rows
        ]
        logger.info(f"BigQuery returned {len(notes)} notes")
        return notes
