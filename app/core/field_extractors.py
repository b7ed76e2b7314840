"""
Contact-field extraction for resume lines.

Every line of the resume goes through these extractors regardless of which
section it belongs to, since contact details usually sit in a header block
before the first section title.

Each personal-info field is written at most once per parse: an extractor only
runs while its field is still empty, and a line is attributed to at most one
field (the first extractor in PERSONAL_INFO_EXTRACTORS that yields a value).
"""

import logging
import re
from typing import Callable, Optional, Tuple

from app.core.schemas import PersonalInfo

logger = logging.getLogger(__name__)


EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
# North American style: optional country code, (555) / 555- area code, 7 digits
PHONE_RE = re.compile(r"(\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
ZIP_RE = re.compile(r"\b\d{5}(?:-\d{4})?\b")
STREET_RE = re.compile(r"\b(?:street|avenue|road|drive|lane|blvd|st|ave)\b", re.IGNORECASE)

US_STATES = (
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA", "HI", "ID", "IL", "IN",
    "IA", "KS", "KY", "LA", "ME", "MD", "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV",
    "NH", "NJ", "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC", "SD", "TN",
    "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
)
STATE_RE = re.compile(r"\b(?:" + "|".join(US_STATES) + r")\b")

NAME_MIN_EXCLUSIVE = 5
NAME_MAX_EXCLUSIVE = 50


def extract_email(line: str) -> Optional[str]:
    m = EMAIL_RE.search(line)
    return m.group(0) if m else None


def extract_phone(line: str) -> Optional[str]:
    m = PHONE_RE.search(line)
    return m.group(0) if m else None


def extract_name(line: str) -> Optional[str]:
    """
    Accept the line as a name if it is short and carries no contact markers.

    Bare heuristic: the first qualifying line wins, so a subtitle placed
    above the real name will be taken instead.
    """
    if not (NAME_MIN_EXCLUSIVE < len(line) < NAME_MAX_EXCLUSIVE):
        return None
    lower = line.lower()
    if "@" in lower or "phone" in lower or "email" in lower:
        return None
    if PHONE_RE.search(line):
        return None
    return line


def is_location_line(line: str) -> bool:
    """Street keyword, uppercase state code or ZIP code anywhere in the line."""
    return bool(STREET_RE.search(line) or STATE_RE.search(line) or ZIP_RE.search(line))


def extract_location(line: str) -> Optional[str]:
    return line if is_location_line(line) else None


# Order matters: the first extractor that yields a value claims the line.
PERSONAL_INFO_EXTRACTORS: Tuple[Tuple[str, Callable[[str], Optional[str]]], ...] = (
    ("email", extract_email),
    ("phone", extract_phone),
    ("name", extract_name),
    ("location", extract_location),
)


def extract_personal_info(line: str, personal_info: PersonalInfo) -> Optional[str]:
    """
    Run the extractor pipeline on one line, filling personal_info in place.

    Returns the name of the field the line was attributed to, or None.
    """
    for field_name, extractor in PERSONAL_INFO_EXTRACTORS:
        if getattr(personal_info, field_name):
            continue
        value = extractor(line)
        if value:
            setattr(personal_info, field_name, value)
            logger.debug(f"Found {field_name}: {value!r}")
            return field_name
    return None
