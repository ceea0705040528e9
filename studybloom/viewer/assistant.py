"""
Assistant renderer - Suggestion cards for the course builder sidebar.
"""

import html

from studybloom.schemas import Suggestion, SuggestionType


SUGGESTION_ICONS = {
    SuggestionType.TITLE: "🎯",
    SuggestionType.DESCRIPTION: "📝",
    SuggestionType.IMPROVEMENT: "💡",
    SuggestionType.STRUCTURE: "🧱",
    SuggestionType.CONTENT: "✨",
}


def get_assistant_css() -> str:
    """Get CSS styles for suggestion cards."""
    return """
    <style>
    .suggestion-card {
        background: #f3e5f5;
        border-radius: 10px;
        padding: 1em;
        margin: 0.8em 0;
        border-left: 4px solid #ab47bc;
    }
    .suggestion-title {
        font-weight: 600;
        color: #6a1b9a;
    }
    .suggestion-description {
        font-size: 0.9em;
        color: #555;
        margin: 0.4em 0;
    }
    .suggestion-list {
        font-size: 0.85em;
        color: #444;
        margin: 0.3em 0 0.3em 1.2em;
    }
    .confidence-track {
        background: #e1bee7;
        border-radius: 999px;
        height: 6px;
        overflow: hidden;
    }
    .confidence-fill {
        background: #8e24aa;
        height: 100%;
    }
    .confidence-label {
        font-size: 0.75em;
        color: #777;
        text-align: right;
    }
    </style>
    """


def _render_details(suggestion: Suggestion) -> str:
    """Render the list-like payload of a suggestion, if any."""
    data = suggestion.data
    if data.get("sections"):
        items = [
            f'{html.escape(s.get("title", ""))} ({html.escape(s.get("type", "lesson"))})'
            for s in data["sections"]
        ]
    else:
        items = data.get("suggestions") or data.get("tags") or data.get("elements") or data.get("tips") or []
        items = [html.escape(str(item)) for item in items]

    if not items:
        return ""
    return '<ul class="suggestion-list">' + "".join(f"<li>{item}</li>" for item in items) + "</ul>"


def render_suggestion_card(suggestion: Suggestion) -> str:
    """Render one suggestion with its details and confidence bar."""
    icon = SUGGESTION_ICONS.get(suggestion.type, "💡")
    return (
        f'<div class="suggestion-card">'
        f'<div class="suggestion-title">{icon} {html.escape(suggestion.title)}</div>'
        f'<div class="suggestion-description">{html.escape(suggestion.description)}</div>'
        f'{_render_details(suggestion)}'
        f'<div class="confidence-track"><div class="confidence-fill" style="width:{suggestion.confidence}%"></div></div>'
        f'<div class="confidence-label">{suggestion.confidence}% confidence</div>'
        f'</div>'
    )
