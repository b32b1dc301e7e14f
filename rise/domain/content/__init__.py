"""Content module: courses, quizzes and exam definitions (read-only)."""
