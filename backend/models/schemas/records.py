"""Normalized curriculum and job records at the core's input boundary.

The persistence adapter builds these once; the analysis code never deals
with storage-specific document types.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel


class EmbeddedRecord(BaseModel):
    """Embedding field set shared by curricula and job postings."""
    embedding: list[float] | None = None
    embedding_generated: datetime | None = None
    embedding_version: str | None = None
    embedding_error: str | None = None


class JobSkill(BaseModel):
    """A skill already extracted for a posting by an upstream importer."""
    name: str
    category: str | None = None
    importance: Literal["required", "preferred"] = "required"


class JobRecord(EmbeddedRecord):
    id: str
    title: str = ""
    description: str = ""
    company: str | None = None
    category: str | None = None
    posted_date: datetime | None = None
    required_skills: list[JobSkill] = []


class CourseSkill(BaseModel):
    name: str
    category: str = "other"
    proficiency_level: Literal["beginner", "intermediate", "advanced"] = "beginner"


class Course(BaseModel):
    code: str = ""
    name: str
    credits: float = 0
    description: str = ""
    skills: list[CourseSkill] = []


class CurriculumRecord(EmbeddedRecord):
    id: str
    program_name: str
    degree: str = "bachelor"  # certificate, diploma, bachelor, master, phd
    department: str = ""
    description: str = ""
    target_industries: list[str] = []
    courses: list[Course] = []
