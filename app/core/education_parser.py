"""
Education entry detection.

Like work experience, a line with a 4-digit year starts a new entry, but the
graduation year is the LAST year on the line ("2016 - 2020" graduates in
2020) and there is no lookahead to the following line.

Degree detection is an ordered list of patterns; the first one found in the
year-stripped line becomes the degree and the rest of the line becomes the
institution.
"""

import re
from typing import Optional, Tuple

from app.core.experience_parser import YEAR_RE, find_years
from app.core.schemas import Education

DEFAULT_DEGREE = "Degree"

# Ordered: full names before abbreviations
DEGREE_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"bachelor[s]?\s+of\s+\w+", re.IGNORECASE),
    re.compile(r"master[s]?\s+of\s+\w+", re.IGNORECASE),
    re.compile(r"phd|doctorate", re.IGNORECASE),
    re.compile(r"associate[s]?\s+degree", re.IGNORECASE),
    re.compile(r"\bb\.?[as]\.?(?!\w)", re.IGNORECASE),  # BS, B.A., B.S.
    re.compile(r"\bm\.?[as]\.?(?!\w)", re.IGNORECASE),  # MS, M.A.
    re.compile(r"\bph\.?d\.?(?!\w)", re.IGNORECASE),  # Ph.D.
)

STRAY_PUNCT_RE = re.compile(r"[,\-]")
EDGE_PUNCT = " ,-–—|"


def find_degree(text: str) -> Optional[Tuple[str, re.Pattern]]:
    """First degree pattern that matches, with the matched text."""
    for pattern in DEGREE_PATTERNS:
        m = pattern.search(text)
        if m:
            return m.group(0), pattern
    return None


def parse_education_line(line: str) -> Optional[Education]:
    """
    Build a new education entry from a line, or return None if the line has
    no year token.

    Examples:
        "BS Computer Science State University 2015"
            -> degree="BS", institution="Computer Science State University"
        "State University 2016 - 2020"
            -> degree="Degree", institution="State University", graduation_year="2020"
    """
    years = find_years(line)
    if not years:
        return None

    education = Education(graduation_year=years[-1])
    clean = " ".join(YEAR_RE.sub("", line).split())

    found = find_degree(clean)
    if found:
        degree, pattern = found
        education.degree = degree
        remainder = STRAY_PUNCT_RE.sub("", pattern.sub("", clean, count=1))
        education.institution = " ".join(remainder.split())
    else:
        education.institution = clean.strip(EDGE_PUNCT)
        education.degree = DEFAULT_DEGREE

    return education
