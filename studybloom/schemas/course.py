"""
Course content schemas for StudyBloom.

Defines Pydantic models for courses including:
- Section types (lesson, quiz, flashcard, resource)
- Sections with raw markdown content
- Courses with a designated completable subset
"""

from pydantic import BaseModel, Field, computed_field, field_validator, model_validator
from typing import Optional
from datetime import datetime
from enum import Enum


class SectionType(str, Enum):
    LESSON = "lesson"
    QUIZ = "quiz"
    FLASHCARD = "flashcard"
    RESOURCE = "resource"


class Visibility(str, Enum):
    PRIVATE = "private"
    SHARED = "shared"
    PUBLIC = "public"


class Section(BaseModel):
    id: str = Field(..., min_length=1)  # unique within a course
    title: str
    type: SectionType = SectionType.LESSON
    content: Optional[str] = None       # source markdown
    description: Optional[str] = None
    icon: str = "📖"


class Course(BaseModel):
    """
    A named collection of ordered sections.

    Section order defines navigation order. Only ids listed in
    `completable_sections` count toward progress.
    """
    id: str = Field(..., min_length=1)
    title: str
    emoji: str = "📚"
    description: str = ""
    sections: list[Section] = []
    completable_sections: list[str] = []

    # Authoring metadata (user-created courses only)
    author: Optional[str] = None
    created_at: Optional[datetime] = None
    visibility: Visibility = Visibility.PUBLIC
    tags: list[str] = []
    estimated_time: Optional[str] = None
    category: str = "General"

    @field_validator('sections')
    @classmethod
    def section_ids_unique(cls, v):
        seen = set()
        for section in v:
            if section.id in seen:
                raise ValueError(f"Duplicate section id: {section.id}")
            seen.add(section.id)
        return v

    @model_validator(mode='after')
    def completable_in_sections(self):
        known = {s.id for s in self.sections}
        unknown = [sid for sid in self.completable_sections if sid not in known]
        if unknown:
            raise ValueError(f"Completable sections not in course: {unknown}")
        return self

    @computed_field
    @property
    def is_user_course(self) -> bool:
        """User-authored courses carry an author; presets don't."""
        return self.author is not None

    @property
    def section_ids(self) -> list[str]:
        return [s.id for s in self.sections]

    def get_section(self, section_id: str) -> Optional[Section]:
        for section in self.sections:
            if section.id == section_id:
                return section
        return None

    def is_completable(self, section_id: str) -> bool:
        return section_id in self.completable_sections
