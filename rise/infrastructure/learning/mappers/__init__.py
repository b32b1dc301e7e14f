from .exam_attempt_mapper import ExamAttemptMapper
from .progress_mapper import ProgressMapper

__all__ = ["ExamAttemptMapper", "ProgressMapper"]
