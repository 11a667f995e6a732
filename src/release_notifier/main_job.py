"""Scheduled batch run of the release-notes pipeline.

Watermark comes from DEFAULT_WATERMARK, or LOOKBACK_DAYS before now in
TIMEZONE. Exits 0 on success and 1 on failure.

Usage:
    python -m release_notifier.main_job
"""

import asyncio
import sys
from typing import List

from .config import get_settings
from .log import setup_logging, get_logger
from .pipeline.run import build_pipeline
from .schemas.note import Note

setup_logging()
logger = get_logger("job")

async def run_job() -> List[Note]:
    settings = get_settings()
    pipeline = build_pipeline(settings.JOB_SOURCE, settings)
    return await pipeline.run()

def main():
    try:
        notes = asyncio.run(run_job())
    except Exception:
        logger.exception("Release notes job failed")
        sys.exit(1)
    logger.info(f"Release notes job finished: {len(notes)} notes")
    sys.exit(0)

if __name__ == "__main__":
    main()
