from .exam_attempt import ExamAttempt
from .lesson_progress import MAX_REFLECTION_LENGTH, LessonProgress, ProgressUpdate

__all__ = ["MAX_REFLECTION_LENGTH", "ExamAttempt", "LessonProgress", "ProgressUpdate"]
