from datetime import date, datetime
from typing import Optional, Union

# "February 18, 2025", "Feb 18, 2025", "2025-02-18"
DATE_FORMATS = ("%B %d, %Y", "%b %d, %Y", "%Y-%m-%d")

def parse_date(value: Union[date, str, None]) -> Optional[date]:
    """Parse a release-note date; returns None when the text is not a recognised date."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = " ".join(value.split())
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None
