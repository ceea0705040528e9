"""
Navigator - Section sequencing and sidebar state for one course.

Provides:
- Next/previous section navigation
- Section position within the course
- Sidebar items with completion status indicators
"""

from dataclasses import dataclass
from typing import Optional

from studybloom.schemas import Course, Section

from .progress import ProgressTracker


@dataclass
class NavigationSection:
    """Section with navigation metadata."""
    section: Section
    is_completable: bool
    is_completed: bool
    is_current: bool


class CourseNavigator:
    """
    Navigate through a course's sections.

    Combines a Course (content) with ProgressTracker (user state) to
    provide sidebar data and prev/next navigation.
    """

    def __init__(self, course: Course, progress: ProgressTracker):
        """
        Initialize navigator.

        Args:
            course: Course being viewed
            progress: ProgressTracker instance for user progress
        """
        self.course = course
        self.progress = progress
        self._section_order: list[str] = course.section_ids
        self._section_index: dict[str, int] = {
            sid: idx for idx, sid in enumerate(self._section_order)
        }

    @property
    def total_sections(self) -> int:
        """Total number of sections."""
        return len(self._section_order)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def get_first_section_id(self) -> Optional[str]:
        """Get the ID of the first section."""
        return self._section_order[0] if self._section_order else None

    def get_next_section_id(self, current_id: str) -> Optional[str]:
        """Get the ID of the next section in order."""
        if current_id not in self._section_index:
            return None
        current_idx = self._section_index[current_id]
        if current_idx + 1 >= len(self._section_order):
            return None
        return self._section_order[current_idx + 1]

    def get_previous_section_id(self, current_id: str) -> Optional[str]:
        """Get the ID of the previous section in order."""
        if current_id not in self._section_index:
            return None
        current_idx = self._section_index[current_id]
        if current_idx <= 0:
            return None
        return self._section_order[current_idx - 1]

    def get_section_position(self, section_id: str) -> tuple[int, int]:
        """
        Get section position as (current, total).

        Returns (0, total) if section not found.
        """
        if section_id not in self._section_index:
            return (0, len(self._section_order))
        return (self._section_index[section_id] + 1, len(self._section_order))

    # -------------------------------------------------------------------------
    # Sidebar
    # -------------------------------------------------------------------------

    def get_navigation_items(self, current_id: Optional[str] = None) -> list[NavigationSection]:
        """Get every section annotated with completion and current-ness."""
        completed = self.progress.get_completed(self.course.id)
        return [
            NavigationSection(
                section=section,
                is_completable=self.course.is_completable(section.id),
                is_completed=self.course.is_completable(section.id) and section.id in completed,
                is_current=section.id == current_id,
            )
            for section in self.course.sections
        ]

    def get_status_indicator(self, section_id: str) -> str:
        """
        Get status indicator for sidebar display.

        Returns:
            ✓ for completed
            ○ for completable but not completed
            · for sections that don't count toward progress
        """
        if not self.course.is_completable(section_id):
            return "·"
        if self.progress.is_completed(self.course.id, section_id):
            return "✓"
        return "○"

    # -------------------------------------------------------------------------
    # Progress Summary
    # -------------------------------------------------------------------------

    def is_course_complete(self) -> bool:
        """True once every completable section is done (False if there are none)."""
        return self.progress.get_completion_stats(self.course)["is_complete"]

    def get_progress_summary(self) -> dict:
        """Get progress summary for display."""
        stats = self.progress.get_completion_stats(self.course)
        return {
            **stats,
            "total_sections": self.total_sections,
            "percent_exact": self.progress.percent_complete(self.course),
        }
