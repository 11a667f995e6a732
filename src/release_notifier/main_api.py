"""HTTP triggers for the release-notes pipeline.

GET /release-notes?last_published_at=YYYY-MM-DD  -> BigQuery source
GET /crawl                                       -> page scrape source (SCRAPE_WATERMARK)
"""

from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse

from .config import get_settings
from .log import setup_logging, get_logger
from .pipeline.run import Pipeline, build_pipeline
from .retrieval.dates import parse_date

settings = get_settings()
setup_logging()
logger = get_logger("api")

app = FastAPI(title="release-notifier")

def get_query_pipeline() -> Pipeline:
    return build_pipeline("query")

def get_scrape_pipeline() -> Pipeline:
    return build_pipeline("scrape")

@app.get("/release-notes")
async def release_notes(
    last_published_at: Optional[str] = None,
    pipeline: Pipeline = Depends(get_query_pipeline),
):
    if not last_published_at:
        return JSONResponse(status_code=400, content={"error": "last_published_at is required"})
    if parse_date(last_published_at) is None:
        return JSONResponse(status_code=400, content={"error": f"Invalid date: {last_published_at}"})

    try:
        notes = await pipeline.run(last_published_at)
    except Exception as e:
        logger.exception("release-notes run failed")
        return JSONResponse(status_code=500, content={"error": str(e)})

    return {"release_notes": [note.model_dump(mode="json") for note in notes]}

@app.get("/crawl")
async def crawl(pipeline: Pipeline = Depends(get_scrape_pipeline)):
    try:
        notes = await pipeline.run(settings.SCRAPE_WATERMARK)
    except Exception as e:
        logger.exception("crawl run failed")
        return JSONResponse(status_code=500, content={"status": "error", "message": str(e)})

    return {"status": "success", "notes": [note.model_dump(mode="json") for note in notes]}

def main():
    logger.info(f"Server running on port {settings.PORT}")
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)

if __name__ == "__main__":
    main()
