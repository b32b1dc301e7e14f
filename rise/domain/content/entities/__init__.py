from .course import Course
from .exam_definition import DEFAULT_PASS_SCORE, ExamDefinition
from .quiz_question import QuizQuestion

__all__ = ["DEFAULT_PASS_SCORE", "Course", "ExamDefinition", "QuizQuestion"]
