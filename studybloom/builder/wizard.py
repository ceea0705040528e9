"""
CourseBuilder - Three-step wizard state for authoring a course.

Steps:
1. Details: title, description, emoji, category, level, visibility, tags
2. Structure: add, edit and remove sections
3. Content: write markdown for each section

The builder holds a CourseDraft and turns it into a Course once the draft
passes validation. Only lesson sections become completable.
"""

import logging
import time
from datetime import datetime
from typing import Optional

from studybloom.schemas import (
    Course,
    CourseDraft,
    DraftSection,
    Section,
    SectionType,
    Suggestion,
    SuggestionType,
)

logger = logging.getLogger(__name__)


WIZARD_STEPS = {
    1: "Details",
    2: "Structure",
    3: "Content",
}

CATEGORIES = [
    "General", "Business", "Technology", "Science", "Mathematics",
    "Languages", "History", "Arts", "Health", "Engineering",
]

EMOJIS = [
    "📚", "💼", "💻", "🔬", "🧮", "🌍", "🎨", "⚕️", "🔧", "🎯",
    "🚀", "💡", "🌟", "🎪", "🎭", "🎵", "📊", "📈",
]

LEVELS = ["Beginner", "Intermediate", "Advanced"]

SECTION_ICONS = {
    SectionType.LESSON: "📖",
    SectionType.QUIZ: "❓",
    SectionType.FLASHCARD: "🗂️",
    SectionType.RESOURCE: "📎",
}

READY_MESSAGE = "Course is ready to save!"


class CourseBuilder:
    """Wizard state: the draft being edited plus the current step."""

    def __init__(self, draft: Optional[CourseDraft] = None):
        self.draft = draft or CourseDraft()
        self.current_step = 1
        self._section_counter = 0

    # -------------------------------------------------------------------------
    # Steps
    # -------------------------------------------------------------------------

    @property
    def step_title(self) -> str:
        return WIZARD_STEPS[self.current_step]

    @property
    def is_first_step(self) -> bool:
        return self.current_step == min(WIZARD_STEPS)

    @property
    def is_last_step(self) -> bool:
        return self.current_step == max(WIZARD_STEPS)

    def next_step(self) -> int:
        self.current_step = min(self.current_step + 1, max(WIZARD_STEPS))
        return self.current_step

    def previous_step(self) -> int:
        self.current_step = max(self.current_step - 1, min(WIZARD_STEPS))
        return self.current_step

    # -------------------------------------------------------------------------
    # Sections
    # -------------------------------------------------------------------------

    def _new_section_id(self) -> str:
        self._section_counter += 1
        return f"section_{int(time.time() * 1000)}_{self._section_counter}"

    def get_section(self, section_id: str) -> Optional[DraftSection]:
        for section in self.draft.sections:
            if section.id == section_id:
                return section
        return None

    def add_section(
        self,
        title: str = "",
        section_type: SectionType = SectionType.LESSON,
        description: str = "",
    ) -> DraftSection:
        """Append an empty section and return it."""
        section = DraftSection(
            id=self._new_section_id(),
            title=title,
            description=description,
            type=section_type,
        )
        self.draft.sections.append(section)
        return section

    def update_section(self, section_id: str, **fields) -> bool:
        """
        Update fields of a section.

        Returns False if no section has that ID.
        """
        for idx, section in enumerate(self.draft.sections):
            if section.id == section_id:
                merged = {**section.model_dump(), **fields, "id": section_id}
                self.draft.sections[idx] = DraftSection.model_validate(merged)
                return True
        return False

    def remove_section(self, section_id: str) -> bool:
        """Remove a section. Returns False if no section has that ID."""
        remaining = [s for s in self.draft.sections if s.id != section_id]
        if len(remaining) == len(self.draft.sections):
            return False
        self.draft.sections = remaining
        return True

    # -------------------------------------------------------------------------
    # Tags
    # -------------------------------------------------------------------------

    def add_tag(self, tag: str) -> bool:
        """Add a trimmed tag. Blank and duplicate tags are ignored."""
        tag = tag.strip()
        if not tag or tag in self.draft.tags:
            return False
        self.draft.tags.append(tag)
        return True

    def remove_tag(self, tag: str) -> bool:
        if tag not in self.draft.tags:
            return False
        self.draft.tags.remove(tag)
        return True

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def _untitled_sections(self) -> list[DraftSection]:
        return [s for s in self.draft.sections if not s.title.strip()]

    @property
    def is_valid_to_save(self) -> bool:
        return (
            bool(self.draft.title.strip())
            and bool(self.draft.description.strip())
            and len(self.draft.sections) > 0
            and not self._untitled_sections()
        )

    def get_validation_message(self) -> str:
        """Message for the first unmet requirement, or the ready message."""
        if not self.draft.title.strip():
            return "Course title is required"
        if not self.draft.description.strip():
            return "Course description is required"
        if not self.draft.sections:
            return "At least one section is required"
        untitled = self._untitled_sections()
        if untitled:
            return f"{len(untitled)} section(s) need titles"
        return READY_MESSAGE

    def get_requirements_status(self) -> list[tuple[str, bool, str]]:
        """Checklist rows as (label, satisfied, detail)."""
        sections = self.draft.sections
        titled = len(sections) - len(self._untitled_sections())
        title = self.draft.title.strip()
        return [
            ("Title", bool(title), title or "Required"),
            ("Description", bool(self.draft.description.strip()),
             "Complete" if self.draft.description.strip() else "Required"),
            ("Sections", len(sections) > 0, f"{len(sections)} section(s)"),
            ("Section Titles", titled == len(sections), f"{titled}/{len(sections)} completed"),
        ]

    # -------------------------------------------------------------------------
    # Assistant
    # -------------------------------------------------------------------------

    def apply_suggestion(self, suggestion: Suggestion) -> bool:
        """
        Apply an assistant suggestion to the draft.

        Returns True if the draft changed.
        """
        data = suggestion.data
        logger.debug(f"Applying suggestion {suggestion.id}")

        if suggestion.type == SuggestionType.TITLE:
            titles = data.get("suggestions") or []
            if titles:
                self.draft.title = titles[0]
                return True

        elif suggestion.type == SuggestionType.DESCRIPTION:
            if data.get("suggestion"):
                self.draft.description = data["suggestion"]
                return True

        elif suggestion.type == SuggestionType.IMPROVEMENT:
            if data.get("tags"):
                before = len(self.draft.tags)
                self.draft.tags = list(dict.fromkeys(self.draft.tags + list(data["tags"])))
                return len(self.draft.tags) != before

        elif suggestion.type == SuggestionType.STRUCTURE:
            if data.get("sections"):
                self.draft.sections = [
                    DraftSection(
                        id=self._new_section_id(),
                        title=entry.get("title", ""),
                        description=entry.get("description", ""),
                        type=SectionType(entry.get("type", SectionType.LESSON.value)),
                    )
                    for entry in data["sections"]
                ]
                return True

        elif suggestion.type == SuggestionType.CONTENT:
            if data.get("outline") and self.draft.sections:
                self.draft.sections[0].content = data["outline"]
                return True

        return False

    # -------------------------------------------------------------------------
    # Build
    # -------------------------------------------------------------------------

    def build_course(self, author: str, now: Optional[datetime] = None) -> Course:
        """
        Turn the draft into a Course.

        Args:
            author: Display name of the author
            now: Creation time (default: current time)

        Raises:
            ValueError: If the draft is not valid to save
        """
        if not self.is_valid_to_save:
            raise ValueError(self.get_validation_message())

        now = now or datetime.now()
        sections = [
            Section(
                id=s.id,
                title=s.title.strip(),
                type=s.type,
                content=s.content,
                description=s.description or None,
                icon=SECTION_ICONS[s.type],
            )
            for s in self.draft.sections
        ]

        return Course(
            id=f"user_course_{int(now.timestamp() * 1000)}",
            title=self.draft.title.strip(),
            emoji=self.draft.emoji,
            description=self.draft.description.strip(),
            sections=sections,
            completable_sections=[s.id for s in sections if s.type == SectionType.LESSON],
            author=author,
            created_at=now,
            visibility=self.draft.visibility,
            tags=list(self.draft.tags),
            estimated_time=self.draft.estimated_time.strip() or None,
            category=self.draft.category,
        )
