"""
StudyBloom Classroom - Runtime components for courses, progress and sign-in.

This module provides:
- CourseCatalog: Preset and user-authored courses
- ProgressTracker: Track completed sections per course
- CourseNavigator: Section sequencing and sidebar state
- UserSession: Local mock sign-in
"""

from .catalog import (
    CourseCatalog,
    load_preset_courses,
)

from .progress import (
    ProgressTracker,
    toggle_section,
    percent_complete,
    display_percent,
    load_completion_state,
)

from .navigator import (
    CourseNavigator,
    NavigationSection,
)

from .session import (
    UserSession,
    hash_password,
)

__all__ = [
    # Catalog
    "CourseCatalog",
    "load_preset_courses",
    # Progress
    "ProgressTracker",
    "toggle_section",
    "percent_complete",
    "display_percent",
    "load_completion_state",
    # Navigator
    "CourseNavigator",
    "NavigationSection",
    # Session
    "UserSession",
    "hash_password",
]
