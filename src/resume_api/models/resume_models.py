# src/resume_api/models/resume_models.py
"""
Document shape for stored resumes.

These models only shape a payload into a storable document: unknown keys are
dropped, numbers given for text fields become text, and missing or null
sequences become empty ones. Required-field rules live in the validators, so
every field here is optional.
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


SEQUENCE_FIELDS = ("experience", "education", "skills", "projects", "certifications", "languages")


class ResumeModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


class PersonalInfo(ResumeModel):
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    website: Optional[str] = None


class ExperienceEntry(ResumeModel):
    company: Optional[str] = None
    position: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    description: Optional[str] = None
    current: bool = False

    @field_validator("current", mode="before")
    @classmethod
    def null_current_is_false(cls, value):
        return False if value is None else value


class EducationEntry(ResumeModel):
    institution: Optional[str] = None
    degree: Optional[str] = None
    field: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    gpa: Optional[str] = None


class SkillGroup(ResumeModel):
    category: Optional[str] = None
    items: List[str] = []

    @field_validator("items", mode="before")
    @classmethod
    def null_items_are_empty(cls, value):
        return [] if value is None else value


class ProjectEntry(ResumeModel):
    name: Optional[str] = None
    description: Optional[str] = None
    technologies: List[str] = []
    url: Optional[str] = None
    github: Optional[str] = None

    @field_validator("technologies", mode="before")
    @classmethod
    def null_technologies_are_empty(cls, value):
        return [] if value is None else value


class CertificationEntry(ResumeModel):
    name: Optional[str] = None
    issuer: Optional[str] = None
    date: Optional[str] = None
    url: Optional[str] = None


class LanguageEntry(ResumeModel):
    name: Optional[str] = None
    proficiency: Optional[str] = None


class ResumeRecord(ResumeModel):
    """Client-writable part of a resume; id and timestamps are owned by the store."""

    personal_info: PersonalInfo = PersonalInfo()
    summary: Optional[str] = None
    experience: List[ExperienceEntry] = []
    education: List[EducationEntry] = []
    skills: List[SkillGroup] = []
    projects: List[ProjectEntry] = []
    certifications: List[CertificationEntry] = []
    languages: List[LanguageEntry] = []

    @field_validator(*SEQUENCE_FIELDS, mode="before")
    @classmethod
    def null_sequences_are_empty(cls, value):
        return [] if value is None else value


class ResumeUpdate(ResumeModel):
    personal_info: Optional[PersonalInfo] = None
    summary: Optional[str] = None
    experience: Optional[List[ExperienceEntry]] = None
    education: Optional[List[EducationEntry]] = None
    skills: Optional[List[SkillGroup]] = None
    projects: Optional[List[ProjectEntry]] = None
    certifications: Optional[List[CertificationEntry]] = None
    languages: Optional[List[LanguageEntry]] = None


def build_resume_document(payload: dict) -> dict:
    """Shapes a create payload into the document to insert (without timestamps)."""
    record = ResumeRecord.model_validate(payload)
    return record.model_dump(by_alias=True, exclude_none=True)


def build_update_fields(payload: dict) -> dict:
    """Shapes a partial payload into top-level `$set` fields.

    Only keys present in the payload are returned; a provided sub-record or
    sequence replaces the stored one wholesale.
    """
    update = ResumeUpdate.model_validate(payload)
    return update.model_dump(
        include=update.model_fields_set,
        by_alias=True,
        exclude_none=True,
    )
