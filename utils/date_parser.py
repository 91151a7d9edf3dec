# utils/date_parser.py
from __future__ import annotations
from datetime import date, datetime
from typing import Optional

import dateparser

# The booking desk asks for YYYY-MM-DD; a few local spellings are tolerated.
DATE_FORMATS = ["%Y-%m-%d", "%Y/%m/%d", "%d.%m.%Y", "%d/%m/%Y"]
PREFERRED_LANGS = ["en"]


def parse_date(value: str) -> Optional[date]:
    """
    Reads a check-in or check-out date typed at the booking desk.
    Exact formats come first; anything with words in it ("tomorrow",
    "12 Jan 2024") goes through dateparser. Bare numbers such as "5"
    are rejected so the desk asks again instead of guessing a month.
    Returns None when the text is not a date.
    """
    if not value:
        return None

    v = value.strip()
    if not v:
        return None

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(v, fmt).date()
        except ValueError:
            pass

    try:
        return datetime.fromisoformat(v).date()
    except ValueError:
        pass

    if not any(ch.isalpha() for ch in v):
        return None

    # Check-in dates are usually ahead of today when the year is omitted.
    parsed = dateparser.parse(
        v,
        languages=PREFERRED_LANGS,
        settings={"PREFER_DATES_FROM": "future"},
    )
    if parsed:
        return parsed.date()

    return None
