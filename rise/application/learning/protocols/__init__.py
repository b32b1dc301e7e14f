from .exam_attempt_repository import ExamAttemptRepositoryProtocol
from .progress_repository import ProgressRepositoryProtocol

__all__ = ["ExamAttemptRepositoryProtocol", "ProgressRepositoryProtocol"]
