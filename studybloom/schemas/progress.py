"""
Progress tracking schemas for StudyBloom.

Defines the per-course completion state. Stored ids are not checked
against the course: stale ids simply never count toward progress.
"""

from pydantic import BaseModel, field_validator


class CompletionState(BaseModel):
    # course_id -> completed section ids, in the order they were completed
    completed: dict[str, list[str]] = {}

    @field_validator('completed')
    @classmethod
    def drop_duplicates(cls, v):
        return {
            course_id: list(dict.fromkeys(section_ids))
            for course_id, section_ids in v.items()
        }

    def get(self, course_id: str) -> set[str]:
        """Completed section ids for a course (empty if never touched)."""
        return set(self.completed.get(course_id, []))
