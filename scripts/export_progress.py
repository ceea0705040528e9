#!/usr/bin/env python3
"""
export_progress.py - Export per-course progress to CSV.

One row per course with completable/completed counts and the rounded
percentage shown on the dashboard.

Usage:
  python scripts/export_progress.py
  python scripts/export_progress.py --output progress.csv --db ~/.studybloom/storage.db
"""

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import pandas as pd

from studybloom.classroom import CourseCatalog, ProgressTracker
from studybloom.utils import KeyValueStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


COLUMNS = [
    "course_id", "title", "is_user_course", "total_completable",
    "completed", "remaining", "completion_percent", "is_complete",
]


def build_progress_frame(catalog: CourseCatalog, progress: ProgressTracker) -> pd.DataFrame:
    """Collect completion stats for every course into a DataFrame."""
    rows = []
    for course in catalog.get_courses():
        stats = progress.get_completion_stats(course)
        rows.append({
            **stats,
            "title": course.title,
            "is_user_course": course.is_user_course,
        })
    return pd.DataFrame(rows, columns=COLUMNS)


# -----------------------------------------------------------------------------
# Main
# -----------------------------------------------------------------------------

def main():
    parser = argparse.ArgumentParser(
        description="Export per-course progress to CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("progress.csv"),
        help="Output CSV path"
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="Storage database (default: ~/.studybloom/storage.db)"
    )

    args = parser.parse_args()

    store = KeyValueStore(args.db)
    df = build_progress_frame(CourseCatalog(store), ProgressTracker(store))

    args.output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(args.output, index=False)

    logger.info(f"Exported progress for {len(df)} course(s) to {args.output}")
    if not df.empty:
        logger.info(f"  Complete: {int(df['is_complete'].sum())}/{len(df)}")


if __name__ == "__main__":
    main()
