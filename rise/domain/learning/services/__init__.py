from .exam_scorer import ExamScore, score, validate_answers

__all__ = ["ExamScore", "score", "validate_answers"]
