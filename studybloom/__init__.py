"""StudyBloom - course dashboard with markdown lessons and progress tracking."""

__version__ = "0.1.0"
