"""Heuristic walk over the release-notes page DOM.

extract_notes() is a pure function over a parsed BeautifulSoup tree so it
can be exercised against small synthetic documents. Every optional node
lookup falls back to "Unknown" or an empty string instead of raising.
"""

from datetime import date
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from ..log import get_logger
from ..schemas.note import Note, NoteType
from .dates import parse_date

logger = get_logger("scrape")

SECTION_SELECTOR = "section.releases > section"
PRODUCT_TITLE_SELECTOR = ".release-note-product-title"
VARIANT_SELECTOR = "div.release-feature, div.release-changed"

UNKNOWN_TEXT = "Unknown"
NO_CONTENT = "No Content"


def text_of(el: Optional[Tag], default: str = UNKNOWN_TEXT) -> str:
    if el is None:
        return default
    return el.get_text(" ", strip=True) or default


def release_date_label(section: Tag) -> str:
    """Heading date of a release section: h2[data-text], else the h2 text."""
    heading = section.find("h2")
    if heading is None:
        return UNKNOWN_TEXT
    return (heading.get("data-text") or "").strip() or text_of(heading)


def nearest_block(node: Tag, section: Tag) -> Tag:
    """Closest enclosing <div> inside the section, or the section itself."""
    for parent in node.parents:
        if parent is section:
            break
        if parent.name == "div":
            return parent
    return section


def classify(variant: Optional[Tag]) -> NoteType:
    if variant is None:
        return NoteType.UNKNOWN
    classes = variant.get("class") or []
    if "release-feature" in classes:
        return NoteType.FEATURE
    if "release-changed" in classes:
        return NoteType.CHANGED
    return NoteType.UNKNOWN


def extract_notes(root: Tag, watermark: date) -> List[Note]:
    """
    Collect notes from every release section dated strictly after the watermark.
    Sections are not assumed to be sorted, so all of them are visited.
    Duplicate (release_at, resource_name, sub_title) keys are dropped.
    """
    seen = set()
    notes: List[Note] = []

    for section in root.select(SECTION_SELECTOR):
        release_at = release_date_label(section)
        released = parse_date(release_at)
        if released is None or released <= watermark:
            logger.debug(f"Skipping section {release_at!r} (watermark {watermark.isoformat()})")
            continue

        for title in section.select(PRODUCT_TITLE_SELECTOR):
            block = nearest_block(title, section)
            variant = block.select_one(VARIANT_SELECTOR) or section.select_one(VARIANT_SELECTOR)
            sub_title_el = block.find("h3")

            note = Note(
                release_at=release_at,
                resource_name=text_of(title),
                type=classify(variant),
                sub_title=text_of(sub_title_el) if sub_title_el is not None else "",
                content=text_of(variant) if variant is not None else NO_CONTENT,
            )
            if note.dedup_key in seen:
                continue
            seen.add(note.dedup_key)
            notes.append(note)

    return notes


def extract_notes_from_html(html: str, watermark: date) -> List[Note]:
    return extract_notes(BeautifulSoup(html, "html.parser"), watermark)
