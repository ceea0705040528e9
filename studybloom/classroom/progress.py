"""
ProgressTracker - Track completed sections per course.

Completion state is a mapping of course id to the section ids a learner
has marked done, persisted under the "completedSections" storage key:
- Toggle completion of a section
- Percent complete over a course's completable sections
- Per-course and global reset
"""

import logging
import math
from typing import Optional

from pydantic import ValidationError

from studybloom.schemas import CompletionState, Course
from studybloom.utils.storage import KeyValueStore, COMPLETED_SECTIONS_KEY

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Pure operations
# -----------------------------------------------------------------------------

def toggle_section(state: CompletionState, course_id: str, section_id: str) -> set[str]:
    """
    Flip membership of section_id in the completed set for course_id.

    The section is not checked against the course; unknown ids are stored
    and simply never count toward progress.
    A course left with nothing completed is dropped from the state.

    Returns:
        The course's completed set after the toggle
    """
    current = state.completed.get(course_id, [])
    if section_id in current:
        updated = [sid for sid in current if sid != section_id]
    else:
        updated = current + [section_id]
    if updated:
        state.completed[course_id] = updated
    else:
        state.completed.pop(course_id, None)
    return set(updated)


def percent_complete(course: Course, completed: set[str]) -> float:
    """
    Percentage of the course's completable sections present in `completed`.

    Returns 0.0 for a course without completable sections. The value is
    not rounded; use display_percent() for presentation.
    """
    completable = set(course.completable_sections)
    if not completable:
        return 0.0
    return 100.0 * len(completable & set(completed)) / len(completable)


def display_percent(value: float) -> int:
    """Round a percentage half-up for display."""
    return int(math.floor(value + 0.5))


def load_completion_state(raw: object) -> CompletionState:
    """
    Build a CompletionState from stored data.

    Anything malformed yields an empty state instead of raising.
    """
    if raw is None:
        return CompletionState()
    try:
        return CompletionState(completed=raw)
    except ValidationError as e:
        logger.warning(f"Discarding malformed completion state: {e.error_count()} error(s)")
        return CompletionState()


# -----------------------------------------------------------------------------
# Persistent tracker
# -----------------------------------------------------------------------------

class ProgressTracker:
    """
    Track section completion in the key-value store.

    The in-memory state is loaded once and written back after every
    mutation, so the store always mirrors what the learner sees.
    """

    def __init__(self, store: Optional[KeyValueStore] = None):
        """
        Initialize progress tracker.

        Args:
            store: KeyValueStore instance (default: store at ~/.studybloom/storage.db)
        """
        self.store = store or KeyValueStore()
        self.state = load_completion_state(
            self.store.get_json(COMPLETED_SECTIONS_KEY)
        )

    def _save(self):
        self.store.set_json(COMPLETED_SECTIONS_KEY, self.state.completed)

    # -------------------------------------------------------------------------
    # Section Completion
    # -------------------------------------------------------------------------

    def toggle(self, course_id: str, section_id: str) -> set[str]:
        """Toggle a section and persist. Returns the course's completed set."""
        updated = toggle_section(self.state, course_id, section_id)
        self._save()
        logger.debug(f"Toggled {course_id}/{section_id}: {len(updated)} completed")
        return updated

    def get_completed(self, course_id: str) -> set[str]:
        """Get the set of completed section ids for a course."""
        return self.state.get(course_id)

    def is_completed(self, course_id: str, section_id: str) -> bool:
        """Check if a section is completed."""
        return section_id in self.state.get(course_id)

    def percent_complete(self, course: Course) -> float:
        """Unrounded percent complete for a course."""
        return percent_complete(course, self.get_completed(course.id))

    # -------------------------------------------------------------------------
    # Statistics
    # -------------------------------------------------------------------------

    def get_completion_stats(self, course: Course) -> dict:
        """
        Get completion statistics for a course.

        Returns:
            Dictionary with completion stats
        """
        completable = set(course.completable_sections)
        completed = self.get_completed(course.id) & completable
        percent = percent_complete(course, completed)

        return {
            "course_id": course.id,
            "total_completable": len(completable),
            "completed": len(completed),
            "remaining": len(completable) - len(completed),
            "completion_percent": display_percent(percent),
            "is_complete": bool(completable) and completed == completable,
        }

    # -------------------------------------------------------------------------
    # Reset
    # -------------------------------------------------------------------------

    def reset_course(self, course_id: str):
        """Forget all completions for one course."""
        self.state.completed.pop(course_id, None)
        self._save()

    def reset_all(self):
        """Forget all completions."""
        self.state = CompletionState()
        self._save()
