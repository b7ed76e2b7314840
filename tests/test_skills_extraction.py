"""Tests for skill line splitting and categorization."""

import pytest

from app.core.line_parser import parse_resume_text
from app.core.skills_parser import GENERAL_CATEGORY, categorize_skill, parse_skill_line


@pytest.mark.parametrize(
    "skill,category",
    [
        ("Python", "Programming Languages"),
        ("C++", "Programming Languages"),
        ("Node.js", "Web Technologies"),
        ("React", "Web Technologies"),
        ("PostgreSQL", "Databases"),
        ("Kubernetes", "Tools & Platforms"),
        ("AWS Lambda", "Tools & Platforms"),
        ("Leadership", "Soft Skills"),
        ("Project Management", "Soft Skills"),
        ("Public Speaking", GENERAL_CATEGORY),
    ],
)
def test_categorize_skill(skill, category):
    assert categorize_skill(skill) == category


def test_categories_checked_in_priority_order():
    # Matches both Web Technologies and Databases keywords
    assert categorize_skill("Redis Node client") == "Web Technologies"


def test_split_on_all_delimiters():
    skills = parse_skill_line("Python; Docker | React • Leadership · MySQL")
    assert [s.name for s in skills] == ["Python", "Docker", "React", "Leadership", "MySQL"]
    assert [s.category for s in skills] == [
        "Programming Languages",
        "Tools & Platforms",
        "Web Technologies",
        "Soft Skills",
        "Databases",
    ]


def test_token_length_bounds():
    assert [s.name for s in parse_skill_line("C, R, Go, ")] == ["Go"]
    assert len(parse_skill_line("x" * 49)) == 1
    assert parse_skill_line("x" * 50) == []


def test_skill_ids_unique():
    skills = parse_skill_line("Python, Python")
    assert len(skills) == 2
    assert skills[0].id != skills[1].id


def test_skills_section_collects_every_line_without_dedup():
    text = "\n".join([
        "Jane Doe",
        "Technical Skills",
        "Python, Docker",
        "• Python",
        "• Teamwork",
        "Experience",
    ])
    resume = parse_resume_text(text)

    assert [s.name for s in resume.skills] == ["Python", "Docker", "Python", "Teamwork"]


def test_skill_lines_outside_skills_section_ignored():
    resume = parse_resume_text("Jane Doe\nPython, Docker")
    assert [s.name for s in resume.skills] == ["Communication", "Teamwork", "Problem Solving"]
