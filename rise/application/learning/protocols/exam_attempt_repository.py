"""Protocol for ExamAttempt repository."""

from typing import Protocol

from rise.domain.common.value_objects import CourseId, UserId
from rise.domain.learning.entities import ExamAttempt


class ExamAttemptRepositoryProtocol(Protocol):
    """Interface for latest-attempt persistence."""

    def replace(self, attempt: ExamAttempt) -> ExamAttempt: ...

    def find(self, user_id: UserId, course_id: CourseId) -> ExamAttempt | None: ...
