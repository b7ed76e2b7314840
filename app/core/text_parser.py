from typing import List

from app.core.defaults import DEFAULT_SKILLS
from app.core.line_parser import ensure_text, parse_lines
from app.core.schemas import ParsedResume, ParseResponse
from app.core.text_normalization import normalize_lines


def collect_warnings(resume: ParsedResume, skills_defaulted: bool) -> List[str]:
    warnings: List[str] = []
    if not resume.personal_info.name:
        warnings.append("No name detected. User clarification needed.")
    if not resume.experiences:
        warnings.append("No experience entries detected in resume")
    if not resume.education:
        warnings.append("No education entries detected in resume")
    if skills_defaulted:
        warnings.append("No skills detected; default skills applied")
    return warnings


def parse_text_to_response(text: str, source: str = "user") -> ParseResponse:
    """
    Parse resume text extracted from any container (DOCX, PDF, TXT) and wrap
    the result with the metadata the API returns.
    """
    lines = normalize_lines(ensure_text(text))
    resume = parse_lines(lines)

    skills_defaulted = [(s.id, s.name, s.category) for s in resume.skills] == list(DEFAULT_SKILLS)

    return ParseResponse(
        parsed_resume=resume,
        source=source,
        line_count=len(lines),
        warnings=collect_warnings(resume, skills_defaulted),
    )
