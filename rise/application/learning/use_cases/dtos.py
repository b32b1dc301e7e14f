"""Result objects returned by learning use cases."""

from dataclasses import dataclass

from rise.domain.content.entities import QuizQuestion
from rise.domain.learning.entities import ExamAttempt


@dataclass(frozen=True)
class ExamResult:
    """Outcome of one exam submission."""

    score: int
    passed: bool
    pass_score: int
    correct_count: int
    question_count: int
    language: str


@dataclass(frozen=True)
class LearnerExam:
    """Exam as shown to a learner, with the latest attempt if any."""

    course_id: str
    language: str
    pass_score: int
    questions: tuple[QuizQuestion, ...]
    latest_attempt: ExamAttempt | None
