import uuid
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


DocumentSource = Literal["docx", "pdf", "text", "user"]


def new_entry_id() -> str:
    """Opaque per-entry token. Only uniqueness matters."""
    return uuid.uuid4().hex[:9]


class ResumeModel(BaseModel):
    """Base for the parsed record: snake_case attributes, camelCase JSON."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonalInfo(ResumeModel):
    name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    summary: str = ""


class WorkExperience(ResumeModel):
    id: str = Field(default_factory=new_entry_id)
    title: str = ""
    company: str = ""
    start_year: str = ""  # YYYY
    end_year: str = ""  # YYYY or "Present"
    description: str = ""


class Education(ResumeModel):
    id: str = Field(default_factory=new_entry_id)
    institution: str = ""
    degree: str = ""
    graduation_year: str = ""  # YYYY


class Skill(ResumeModel):
    id: str = Field(default_factory=new_entry_id)
    name: str
    category: str


class ParsedResume(ResumeModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    experiences: List[WorkExperience] = Field(default_factory=list)
    education: List[Education] = Field(default_factory=list)
    skills: List[Skill] = Field(default_factory=list)


class TextParseRequest(BaseModel):
    text: str = Field(..., description="Full resume text, newline-delimited")


class ParseResponse(BaseModel):
    parsed_resume: ParsedResume
    source: DocumentSource
    line_count: int = Field(..., description="Non-empty lines seen by the parser")
    warnings: List[str] = Field(default_factory=list)
