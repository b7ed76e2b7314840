"""
Single-pass line classifier that turns raw resume text into a ParsedResume.

For every line, in order:
  1. contact extractors run unconditionally (email, phone, name, location)
  2. the section classifier is consulted; a header flushes whatever entry is
     open, switches section, and is consumed
  3. otherwise the line goes to the body parser of the current section

After the loop the last open entry is flushed and the completion pass fills
in placeholders, so the result is always structurally complete.

All mutable state lives in a ParseState created per call; concurrent calls
share nothing.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from app.core.defaults import complete_resume
from app.core.education_parser import parse_education_line
from app.core.experience_parser import parse_experience_line
from app.core.field_extractors import extract_personal_info
from app.core.schemas import Education, ParsedResume, WorkExperience
from app.core.section_classifier import SectionKind, classify_section
from app.core.skills_parser import count_by_category, parse_skill_line
from app.core.text_normalization import normalize_lines

logger = logging.getLogger(__name__)


@dataclass
class ParseState:
    current_section: SectionKind = SectionKind.NONE
    open_experience: Optional[WorkExperience] = None
    open_education: Optional[Education] = None


def ensure_text(text: object) -> str:
    """Reject non-string input instead of coercing it."""
    if not isinstance(text, str):
        raise TypeError(f"resume text must be str, got {type(text).__name__}")
    return text


def _flush(state: ParseState, resume: ParsedResume) -> None:
    """Commit any open entry to its list and clear the slot."""
    if state.open_experience is not None:
        resume.experiences.append(state.open_experience)
        state.open_experience = None
    if state.open_education is not None:
        resume.education.append(state.open_education)
        state.open_education = None


def _append_summary(resume: ParsedResume, line: str) -> None:
    info = resume.personal_info
    info.summary = f"{info.summary} {line}" if info.summary else line


def _route_body_line(state: ParseState, resume: ParsedResume, lines: List[str], i: int) -> None:
    line = lines[i]
    section = state.current_section

    if section is SectionKind.EXPERIENCE:
        next_line = lines[i + 1] if i + 1 < len(lines) else None
        experience = parse_experience_line(line, next_line)
        if experience is not None:
            logger.debug(f"Experience entry at line {i}: {experience.title!r} / {experience.company!r}")
            _flush(state, resume)
            state.open_experience = experience
        # Year-less lines with nothing to attach to are dropped

    elif section is SectionKind.EDUCATION:
        education = parse_education_line(line)
        if education is not None:
            logger.debug(f"Education entry at line {i}: {education.institution!r}")
            _flush(state, resume)
            state.open_education = education

    elif section is SectionKind.SKILLS:
        resume.skills.extend(parse_skill_line(line))

    elif section is SectionKind.SUMMARY:
        _append_summary(resume, line)


def parse_lines(lines: List[str]) -> ParsedResume:
    """Parse already-normalized lines (trimmed, non-empty)."""
    resume = ParsedResume()
    state = ParseState()

    for i, line in enumerate(lines):
        extract_personal_info(line, resume.personal_info)

        section = classify_section(line.lower())
        if section is not None:
            logger.debug(f"Section {section.value!r} at line {i}: {line!r}")
            _flush(state, resume)
            state.current_section = section
            continue

        _route_body_line(state, resume, lines, i)

    _flush(state, resume)
    complete_resume(resume)

    logger.info(
        f"Parsed {len(lines)} lines: {len(resume.experiences)} experiences, "
        f"{len(resume.education)} education, skills by category {count_by_category(resume.skills)}"
    )
    return resume


def parse_resume_text(text: str) -> ParsedResume:
    """
    Parse the full text of a resume into a ParsedResume.

    Never fails on string input: anything not recognized falls back to
    placeholder content. Raises TypeError if text is not a str.
    """
    return parse_lines(normalize_lines(ensure_text(text)))
