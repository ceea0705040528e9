"""
StudyBloom Schemas - Pydantic models for the course dashboard.

This module exports all schema classes for:
- Course: sections, section types, courses
- Progress: per-course completion state
- Builder: course drafts and assistant suggestions
- Account: mock user profiles
"""

# Course schemas
from .course import (
    SectionType,
    Visibility,
    Section,
    Course,
)

# Progress schemas
from .progress import (
    CompletionState,
)

# Builder schemas
from .builder import (
    DraftSection,
    CourseDraft,
    SuggestionType,
    Suggestion,
)

# Account schemas
from .account import (
    UserRole,
    UserPreferences,
    UserStats,
    UserProfile,
    SignupData,
)

__all__ = [
    # Course
    'SectionType',
    'Visibility',
    'Section',
    'Course',
    # Progress
    'CompletionState',
    # Builder
    'DraftSection',
    'CourseDraft',
    'SuggestionType',
    'Suggestion',
    # Account
    'UserRole',
    'UserPreferences',
    'UserStats',
    'UserProfile',
    'SignupData',
]
