"""
End-to-end behavior of parse_resume_text.

The parser never fails on string input, preserves document order, and always
returns a structurally complete record.
"""

import pytest

from app.core.line_parser import ParseState, parse_resume_text
from app.core.schemas import ParsedResume
from app.core.section_classifier import SectionKind

SAMPLE = (
    "Jane Doe\njane@x.com\n(555) 123-4567\nEXPERIENCE\nEngineer, Acme Corp 2019 2021\n"
    "EDUCATION\nBS Computer Science State University 2015\nSKILLS\nPython, Leadership"
)


def _without_ids(resume: ParsedResume) -> dict:
    data = resume.model_dump()
    for key in ("experiences", "education", "skills"):
        for entry in data[key]:
            entry.pop("id")
    return data


def test_sample_resume():
    resume = parse_resume_text(SAMPLE)
    info = resume.personal_info

    assert info.name == "Jane Doe"
    assert info.email == "jane@x.com"
    assert "".join(c for c in info.phone if c.isdigit()) == "5551234567"

    assert len(resume.experiences) == 1
    exp = resume.experiences[0]
    assert "Engineer" in exp.title
    assert exp.start_year == "2019"
    assert exp.end_year == "2021"

    assert len(resume.education) == 1
    assert resume.education[0].graduation_year == "2015"

    assert [(s.name, s.category) for s in resume.skills] == [
        ("Python", "Programming Languages"),
        ("Leadership", "Soft Skills"),
    ]


def test_empty_input_fully_defaulted():
    resume = parse_resume_text("")

    assert resume.experiences == []
    assert resume.education == []
    assert len(resume.skills) == 3
    assert resume.personal_info.summary
    assert resume.personal_info.name == ""


def test_whitespace_only_input():
    resume = parse_resume_text("  \n\r\n\t\n")
    assert resume.experiences == []
    assert len(resume.skills) == 3


def test_single_line_input():
    resume = parse_resume_text("Jane Doe")
    assert resume.personal_info.name == "Jane Doe"
    assert resume.personal_info.title == "Professional"


def test_crlf_line_endings():
    resume = parse_resume_text(SAMPLE.replace("\n", "\r\n"))
    assert resume.personal_info.email == "jane@x.com"
    assert resume.experiences[0].company == "Acme Corp"


@pytest.mark.parametrize("bad", [None, b"Jane Doe", 42, ["Jane Doe"]])
def test_non_string_input_rejected(bad):
    with pytest.raises(TypeError):
        parse_resume_text(bad)


def test_same_text_twice_differs_only_in_ids():
    first = parse_resume_text(SAMPLE)
    second = parse_resume_text(SAMPLE)

    assert _without_ids(first) == _without_ids(second)
    assert first.experiences[0].id != second.experiences[0].id


def test_entry_ids_unique_and_non_empty():
    text = "\n".join(
        ["Jane Doe", "Experience"]
        + [f"Engineer, Acme {year} {year + 1}" for year in range(2000, 2010)]
        + ["Education"]
        + [f"BS Physics, State University {year}" for year in range(2000, 2005)]
    )
    resume = parse_resume_text(text)
    ids = [e.id for e in resume.experiences] + [e.id for e in resume.education]

    assert len(resume.experiences) == 10
    assert len(resume.education) == 5
    assert all(ids)
    assert len(set(ids)) == len(ids)


def test_every_entry_field_filled():
    text = "Jane Doe\nExperience\n2019\nEducation\n2015"
    resume = parse_resume_text(text)

    for exp in resume.experiences:
        assert all([exp.id, exp.title, exp.company, exp.start_year, exp.end_year, exp.description])
    for edu in resume.education:
        assert all([edu.id, edu.institution, edu.degree, edu.graduation_year])


def test_long_line_with_synonym_is_not_a_header():
    text = "\n".join([
        "Jane Doe",
        "Summary",
        "Ten years of professional experience building payment platforms at scale",
        "Skills",
        "Python",
    ])
    resume = parse_resume_text(text)

    assert resume.personal_info.summary.startswith("Ten years of professional experience")
    assert resume.experiences == []


def test_summary_lines_joined():
    text = "Jane Doe\nProfessional Summary\nSeasoned backend engineer.\nLoves distributed systems."
    resume = parse_resume_text(text)
    assert resume.personal_info.summary == "Seasoned backend engineer. Loves distributed systems."


def test_header_line_also_feeds_contact_fields():
    # The first plausible line is the name even when it is a section header
    resume = parse_resume_text("Experience\nEngineer, Acme 2019 2021")

    assert resume.personal_info.name == "Experience"
    assert len(resume.experiences) == 1


def test_thousands_of_lines():
    text = "\n".join(["Jane Doe", "Experience"] + ["Engineer, Acme 2001 2002"] * 3000)
    resume = parse_resume_text(text)
    assert len(resume.experiences) == 3000


def test_parse_state_starts_empty():
    state = ParseState()
    assert state.current_section is SectionKind.NONE
    assert state.open_experience is None
    assert state.open_education is None
