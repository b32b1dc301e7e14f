"""Use case for reading the latest exam attempt."""

from rise.application.learning.protocols import ExamAttemptRepositoryProtocol
from rise.domain.common.value_objects import CourseId, UserId
from rise.domain.learning.entities import ExamAttempt


class GetExamStatusUseCase:
    def __init__(self, attempt_repository: ExamAttemptRepositoryProtocol) -> None:
        self.attempt_repository = attempt_repository

    def get_status(self, user_id: int, course_id: str) -> ExamAttempt | None:
        """Latest attempt for the learner and course, or None if they never submitted."""
        return self.attempt_repository.find(UserId(user_id), CourseId(course_id))
