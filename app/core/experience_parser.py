"""
Work experience entry detection.

A line carrying a 4-digit year (19xx/20xx) starts a new entry. Years are
assigned in document order; what remains after removing years and dashes is
split into title and company.
"""

import re
from typing import List, Optional

from app.core.schemas import WorkExperience

YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")
DASH_RE = re.compile(r"[-–—]")
TITLE_COMPANY_SPLIT_RE = re.compile(r"[,|@]")

PRESENT = "Present"


def find_years(line: str) -> List[str]:
    """All year-like tokens in document order (never sorted)."""
    return YEAR_RE.findall(line)


def _collapse_spaces(s: str) -> str:
    return " ".join(s.split())


def parse_experience_line(line: str, next_line: Optional[str] = None) -> Optional[WorkExperience]:
    """
    Build a new experience entry from a line, or return None if the line
    has no year token.

    "Engineer, Acme Corp 2019 - 2021" -> title="Engineer", company="Acme Corp",
    start_year="2019", end_year="2021".

    When the line does not split into title and company, next_line (the line
    that follows in the document) is taken verbatim as the company.
    """
    years = find_years(line)
    if not years:
        return None

    experience = WorkExperience()
    experience.start_year = years[0]
    experience.end_year = years[1] if len(years) >= 2 else PRESENT

    clean = _collapse_spaces(DASH_RE.sub("", YEAR_RE.sub("", line)))
    parts = TITLE_COMPANY_SPLIT_RE.split(clean)

    if len(parts) >= 2:
        experience.title = parts[0].strip()
        experience.company = parts[1].strip()
    else:
        experience.title = clean
        if next_line is not None:
            experience.company = next_line.strip()

    return experience
