"""
Completion pass for parsed resumes.

Extraction is best-effort, but the editor downstream needs every field filled
in. All placeholder content lives here and is applied in one pass after the
line loop.
"""

from typing import Dict, List

from app.core.schemas import Education, ParsedResume, Skill, WorkExperience, new_entry_id

DEFAULT_TITLE = "Professional"
DEFAULT_SUMMARY = "Experienced professional with a strong background in various fields."

# (id, name, category)
DEFAULT_SKILLS = (
    ("1", "Communication", "Soft Skills"),
    ("2", "Teamwork", "Soft Skills"),
    ("3", "Problem Solving", "Soft Skills"),
)

EXPERIENCE_DEFAULTS: Dict[str, str] = {
    "title": "Position",
    "company": "Company",
    "start_year": "2020",
    "end_year": "Present",
    "description": "Responsibilities and achievements in this role.",
}

EDUCATION_DEFAULTS: Dict[str, str] = {
    "institution": "Institution",
    "degree": "Degree",
    "graduation_year": "2020",
}


def default_skills() -> List[Skill]:
    return [Skill(id=sid, name=name, category=category) for sid, name, category in DEFAULT_SKILLS]


def _backfill(entry, defaults: Dict[str, str]) -> None:
    if not entry.id:
        entry.id = new_entry_id()
    for field_name, placeholder in defaults.items():
        if not getattr(entry, field_name):
            setattr(entry, field_name, placeholder)


def backfill_experience(experience: WorkExperience) -> WorkExperience:
    _backfill(experience, EXPERIENCE_DEFAULTS)
    return experience


def backfill_education(education: Education) -> Education:
    _backfill(education, EDUCATION_DEFAULTS)
    return education


def complete_resume(resume: ParsedResume) -> ParsedResume:
    """
    Fill every missing required value with placeholder content, in place.

    Order:
      1. title defaults to "Professional" only when a name was found
      2. summary gets a canned sentence
      3. an empty skill list gets three soft skills
      4. each experience / education entry is backfilled field by field
    """
    info = resume.personal_info
    if info.name and not info.title:
        info.title = DEFAULT_TITLE
    if not info.summary:
        info.summary = DEFAULT_SUMMARY
    if not resume.skills:
        resume.skills = default_skills()

    for experience in resume.experiences:
        backfill_experience(experience)
    for education in resume.education:
        backfill_education(education)

    return resume
