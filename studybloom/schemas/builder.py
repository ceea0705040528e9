"""
Course authoring schemas for StudyBloom.

Defines Pydantic models used by the course builder wizard:
- Draft sections and the draft course being edited
- Mock assistant suggestions
"""

from pydantic import BaseModel, Field
from typing import Any, Optional
from enum import Enum

from .course import SectionType, Visibility


class DraftSection(BaseModel):
    id: str
    title: str = ""
    description: str = ""
    content: str = ""           # markdown
    type: SectionType = SectionType.LESSON


class CourseDraft(BaseModel):
    title: str = ""
    description: str = ""
    emoji: str = "📚"
    category: str = "General"
    level: Optional[str] = None  # Beginner / Intermediate / Advanced
    visibility: Visibility = Visibility.PRIVATE
    sections: list[DraftSection] = []
    tags: list[str] = []
    estimated_time: str = ""


class SuggestionType(str, Enum):
    STRUCTURE = "structure"
    CONTENT = "content"
    IMPROVEMENT = "improvement"
    TITLE = "title"
    DESCRIPTION = "description"


class Suggestion(BaseModel):
    id: str
    type: SuggestionType
    title: str
    description: str
    action: str
    data: dict[str, Any] = {}
    confidence: int = Field(..., ge=0, le=100)
