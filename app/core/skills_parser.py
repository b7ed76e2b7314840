"""
Skill list parsing and categorization.

Skill lines are stateless: each line is split on list delimiters and every
plausible token becomes one Skill. No deduplication is done across lines.
"""

import re
from typing import Dict, List, Tuple

from app.core.schemas import Skill

SKILL_SPLIT_RE = re.compile(r"[,;|•·]")
SKILL_MIN_LENGTH = 2
SKILL_MAX_LENGTH = 49

GENERAL_CATEGORY = "General Skills"

# Checked in declaration order; first category with a keyword inside the skill wins.
SKILL_CATEGORIES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Programming Languages", ("javascript", "python", "java", "c++", "c#", "php", "ruby", "go", "rust", "swift")),
    ("Web Technologies", ("html", "css", "react", "angular", "vue", "node", "express", "webpack")),
    ("Databases", ("mysql", "postgresql", "mongodb", "redis", "oracle", "sqlite")),
    ("Tools & Platforms", ("git", "docker", "kubernetes", "aws", "azure", "gcp", "jenkins")),
    ("Soft Skills", ("leadership", "communication", "teamwork", "management", "planning", "organization")),
)


def categorize_skill(skill: str) -> str:
    """
    Bucket a skill by keyword. Keywords match as substrings of the
    lower-cased skill, so "Node.js" lands in Web Technologies.
    """
    lower = skill.lower()
    for category, keywords in SKILL_CATEGORIES:
        if any(keyword in lower for keyword in keywords):
            return category
    return GENERAL_CATEGORY


def parse_skill_line(line: str) -> List[Skill]:
    """Split one line into zero or more categorized skills, in line order."""
    skills: List[Skill] = []
    for item in SKILL_SPLIT_RE.split(line):
        item = item.strip()
        if SKILL_MIN_LENGTH <= len(item) <= SKILL_MAX_LENGTH:
            skills.append(Skill(name=item, category=categorize_skill(item)))
    return skills


def count_by_category(skills: List[Skill]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for skill in skills:
        counts[skill.category] = counts.get(skill.category, 0) + 1
    return counts
