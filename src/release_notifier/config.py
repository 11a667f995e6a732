from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from functools import lru_cache
from typing import Literal, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .retrieval.dates import parse_date

class Settings(BaseSettings):
    SLACK_BOT_TOKEN: str = Field(..., description="Slack Bot User OAuth Token")
    SLACK_CHANNEL_ID: str = Field(..., description="Channel ID that receives release notes")
    OPENAI_API_KEY: str = Field(..., description="OpenAI API Key")
    MODEL_TRANSLATE: str = "gpt-4o-mini"
    TRANSLATE_LANGUAGE: str = "Japanese"
    TRANSLATE_TIMEOUT_SECONDS: float = Field(60.0, gt=0)
    LOG_LEVEL: str = "INFO"
    QUIET_LOGGERS: list[str] = Field(
        default=["httpx", "openai", "slack_sdk", "google"],
        description="Library loggers held at WARNING",
    )
    PORT: int = 8080

    # Retry policy shared by translation and Slack delivery
    MAX_ATTEMPTS: int = Field(3, ge=1)
    BACKOFF_BASE: float = Field(5.0, ge=0)

    # Structured query source
    GCP_PROJECT_ID: Optional[str] = Field(None, description="BigQuery billing project")
    RELEASE_NOTES_TABLE: str = "bigquery-public-data.google_cloud_release_notes.release_notes"
    QUERY_MODE: Literal["after", "on"] = Field("after", description="'after' = published_at > watermark, 'on' = published_at = watermark")

    # Page scrape source
    RELEASE_NOTES_URL: str = "https://cloud.google.com/release-notes"
    SCRAPE_WATERMARK: str = Field("February 18, 2025", description="Cutoff date for the /crawl endpoint")
    SCRAPE_TIMEOUT_SECONDS: float = Field(30.0, gt=0)

    # Watermark resolution for the batch job
    DEFAULT_WATERMARK: Optional[str] = Field(None, description="ISO date used when no watermark is passed")
    LOOKBACK_DAYS: int = Field(4, ge=0)
    TIMEZONE: str = "Asia/Tokyo"
    JOB_SOURCE: Literal["query", "scrape"] = "query"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @field_validator("DEFAULT_WATERMARK", mode="before")
    @classmethod
    def _blank_watermark_is_unset(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("SCRAPE_WATERMARK", "DEFAULT_WATERMARK")
    @classmethod
    def _watermark_is_a_date(cls, v):
        if v is not None and parse_date(v) is None:
            raise ValueError(f"not a recognised date: {v!r}")
        return v

    @field_validator("TIMEZONE")
    @classmethod
    def _known_timezone(cls, v):
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone: {v!r}") from e
        return v

@lru_cache()
def get_settings() -> Settings:
    return Settings()
