"""Rise learning backend: lesson progress, exams and completion certificates."""

__version__ = "0.1.0"
