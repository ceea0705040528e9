"""
StudyBloom Builder - Course authoring wizard and mock assistant.
"""

from .wizard import (
    CourseBuilder,
    WIZARD_STEPS,
    CATEGORIES,
    EMOJIS,
    LEVELS,
    SECTION_ICONS,
    READY_MESSAGE,
)

from .assistant import (
    generate_suggestions,
    load_suggestion_entries,
    CONDITIONS,
)

__all__ = [
    # Wizard
    "CourseBuilder",
    "WIZARD_STEPS",
    "CATEGORIES",
    "EMOJIS",
    "LEVELS",
    "SECTION_ICONS",
    "READY_MESSAGE",
    # Assistant
    "generate_suggestions",
    "load_suggestion_entries",
    "CONDITIONS",
]
