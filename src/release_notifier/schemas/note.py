"""Pydantic schema for a single release note.

Both extraction strategies produce Note instances; the translator attaches
the localized summary by building a new Note via with_translation().
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional, Tuple, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class NoteType(str, Enum):
    FEATURE = "feature"
    CHANGED = "changed"
    UNKNOWN = "unknown"

    @classmethod
    def from_label(cls, label: Optional[str]) -> "NoteType":
        """Map a source label (e.g. FEATURE, BREAKING_CHANGE, FIX) onto the closed tag set."""
        normalized = (label or "").strip().lower()
        if normalized == "feature":
            return cls.FEATURE
        if "change" in normalized:
            return cls.CHANGED
        return cls.UNKNOWN


class Note(BaseModel):
    """
    One release note. Accepts either the scrape field names
    (release_at, resource_name, content) or the BigQuery column names
    (published_at, product_name, description, release_note_type).
    """
    model_config = ConfigDict(frozen=True)

    release_at: Union[date, str] = Field(..., validation_alias=AliasChoices("release_at", "published_at"))
    resource_name: str = Field(..., validation_alias=AliasChoices("resource_name", "product_name"))
    type: NoteType = NoteType.UNKNOWN
    sub_title: str = ""
    content: str = Field("", validation_alias=AliasChoices("content", "description"))
    source_type: str = Field("", validation_alias=AliasChoices("source_type", "release_note_type"))
    translated_description: Optional[str] = None

    @property
    def published_at(self) -> Union[date, str]:
        return self.release_at

    @property
    def product_name(self) -> str:
        return self.resource_name

    @property
    def description(self) -> str:
        return self.content

    @property
    def release_note_type(self) -> str:
        return self.source_type or self.type.value

    @property
    def dedup_key(self) -> Tuple[str, str, str]:
        return (str(self.release_at), self.resource_name, self.sub_title)

    def with_translation(self, text: str) -> "Note":
        return self.model_copy(update={"translated_description": text})
