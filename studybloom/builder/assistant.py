"""
Mock course-building assistant.

Suggestions are canned entries from studybloom/data/suggestions.yaml,
filtered by wizard step and by simple checks on the draft. Nothing here
calls a model.
"""

from pathlib import Path
from typing import Callable, Optional

from studybloom.config import SUGGESTIONS_NAME
from studybloom.schemas import CourseDraft, Suggestion
from studybloom.utils.yaml_loader import load_data, load_yaml_file


MIN_TITLE_LENGTH = 10
MIN_DESCRIPTION_LENGTH = 50

CONDITIONS: dict[str, Callable[[CourseDraft], bool]] = {
    "always": lambda draft: True,
    "short_title": lambda draft: len(draft.title) < MIN_TITLE_LENGTH,
    "short_description": lambda draft: len(draft.description) < MIN_DESCRIPTION_LENGTH,
    "has_category_and_level": lambda draft: bool(draft.category and draft.level),
}


def load_suggestion_entries(path: Optional[Path] = None) -> list[dict]:
    """
    Load raw suggestion entries.

    Raises:
        ValueError: If an entry names an unknown condition
    """
    data = (load_yaml_file(path) if path else load_data(SUGGESTIONS_NAME)) or {}
    entries = data.get("suggestions", [])
    for entry in entries:
        condition = entry.get("when", "always")
        if condition not in CONDITIONS:
            raise ValueError(f"Unknown suggestion condition: {condition}")
    return entries


def generate_suggestions(
    draft: CourseDraft,
    step: int,
    path: Optional[Path] = None,
) -> list[Suggestion]:
    """
    Get assistant suggestions for a wizard step.

    Args:
        draft: Course being edited
        step: Wizard step (1 = details, 2 = structure, 3 = content)
        path: Optional custom suggestions file

    Returns:
        Suggestions in file order; empty for steps without suggestions
    """
    suggestions = []
    for entry in load_suggestion_entries(path):
        if entry.get("step") != step:
            continue
        if not CONDITIONS[entry.get("when", "always")](draft):
            continue
        fields = {k: v for k, v in entry.items() if k not in ("step", "when")}
        suggestions.append(Suggestion.model_validate(fields))
    return suggestions
