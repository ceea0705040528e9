#!/usr/bin/env python3
"""
render_course.py - Render a course to a standalone HTML page.

Every section is rendered with the lesson markdown renderer, in course
order, under a single page with the markdown and course styles inlined.

Usage:
  python scripts/render_course.py --course scm
  python scripts/render_course.py --course scm --output build/scm.html --db ~/.studybloom/storage.db
"""

import argparse
import html
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from studybloom.classroom import CourseCatalog, ProgressTracker
from studybloom.schemas import Course
from studybloom.utils import KeyValueStore
from studybloom.viewer import (
    get_course_css,
    get_markdown_css,
    render_completion_badge,
    render_course_card,
    render_section_content,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
{css}
</head>
<body style="max-width: 860px; margin: 2em auto; font-family: sans-serif;">
{body}
</body>
</html>
"""


def render_course_page(course: Course, completed: set[str]) -> str:
    """Render the whole course as one HTML document."""
    parts = [render_course_card(course, completed)]
    for section in course.sections:
        parts.append('<hr>')
        parts.append(render_section_content(section))
        if course.is_completable(section.id):
            parts.append(render_completion_badge(section.id in completed))

    return PAGE_TEMPLATE.format(
        title=html.escape(course.title),
        css=get_markdown_css() + get_course_css(),
        body="\n".join(parts),
    )


# -----------------------------------------------------------------------------
# Main
# -----------------------------------------------------------------------------

def main():
    parser = argparse.ArgumentParser(
        description="Render a course to a standalone HTML file",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--course",
        required=True,
        help="ID of the course to render"
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output HTML path (default: <course id>.html)"
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="Storage database with user courses and progress (default: ~/.studybloom/storage.db)"
    )

    args = parser.parse_args()

    store = KeyValueStore(args.db)
    catalog = CourseCatalog(store)
    progress = ProgressTracker(store)

    course = catalog.get_course(args.course)
    if course is None:
        available = ", ".join(c.id for c in catalog.get_courses())
        logger.error(f"Course not found: {args.course} (available: {available})")
        sys.exit(1)

    output = args.output or Path(f"{course.id}.html")
    output.parent.mkdir(parents=True, exist_ok=True)

    page = render_course_page(course, progress.get_completed(course.id))
    with open(output, "w", encoding="utf-8") as f:
        f.write(page)

    logger.info(f"Rendered {len(course.sections)} sections of '{course.title}' to {output}")


if __name__ == "__main__":
    main()
