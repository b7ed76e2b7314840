"""
Section header detection.

A line is a section header if it equals one of the known synonyms, or contains
one while being only slightly longer than it ("Work Experience:" or
"SKILLS & TOOLS"). SECTION_SYNONYMS is the single source of truth; the first
matching synonym in declaration order decides the section kind.
"""

from enum import Enum
from typing import Optional, Tuple


class SectionKind(str, Enum):
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    SUMMARY = "summary"
    NONE = "none"


# Longer lines read as prose, not headers
MAX_HEADER_LENGTH = 50
# A header may carry at most this many characters beyond the synonym (exclusive)
MAX_HEADER_SLACK = 10

SECTION_SYNONYMS: Tuple[Tuple[str, SectionKind], ...] = (
    ("experience", SectionKind.EXPERIENCE),
    ("work experience", SectionKind.EXPERIENCE),
    ("professional experience", SectionKind.EXPERIENCE),
    ("employment", SectionKind.EXPERIENCE),
    ("work history", SectionKind.EXPERIENCE),
    ("career", SectionKind.EXPERIENCE),
    ("career history", SectionKind.EXPERIENCE),
    ("employment history", SectionKind.EXPERIENCE),
    ("professional background", SectionKind.EXPERIENCE),
    ("education", SectionKind.EDUCATION),
    ("academic background", SectionKind.EDUCATION),
    ("educational background", SectionKind.EDUCATION),
    ("qualifications", SectionKind.EDUCATION),
    ("academics", SectionKind.EDUCATION),
    ("degrees", SectionKind.EDUCATION),
    ("skills", SectionKind.SKILLS),
    ("technical skills", SectionKind.SKILLS),
    ("core competencies", SectionKind.SKILLS),
    ("competencies", SectionKind.SKILLS),
    ("expertise", SectionKind.SKILLS),
    ("abilities", SectionKind.SKILLS),
    ("technologies", SectionKind.SKILLS),
    ("proficiencies", SectionKind.SKILLS),
    ("summary", SectionKind.SUMMARY),
    ("professional summary", SectionKind.SUMMARY),
    ("profile", SectionKind.SUMMARY),
    ("objective", SectionKind.SUMMARY),
    ("career objective", SectionKind.SUMMARY),
    ("about", SectionKind.SUMMARY),
    ("about me", SectionKind.SUMMARY),
    ("overview", SectionKind.SUMMARY),
)


def classify_section(lower_line: str) -> Optional[SectionKind]:
    """
    Map a lower-cased line to a section kind, or None if it is not a header.

    Examples:
        "work experience" -> SectionKind.EXPERIENCE
        "technical skills:" -> SectionKind.SKILLS
        "i have experience leading distributed teams" -> None
    """
    if len(lower_line) > MAX_HEADER_LENGTH:
        return None

    for synonym, kind in SECTION_SYNONYMS:
        if lower_line == synonym:
            return kind
        if synonym in lower_line and len(lower_line) < len(synonym) + MAX_HEADER_SLACK:
            return kind

    return None
