from .exam_attempt_repository import ExamAttemptRepository
from .progress_repository import ProgressRepository

__all__ = ["ExamAttemptRepository", "ProgressRepository"]
