"""Use case for deciding whether a learner may receive a certificate."""

from rise.application.content.protocols import CourseContentRepositoryProtocol
from rise.application.learning.protocols import (
    ExamAttemptRepositoryProtocol,
    ProgressRepositoryProtocol,
)
from rise.domain.certification.value_objects import Eligibility
from rise.domain.common.value_objects import CourseId, UserId


class EvaluateEligibilityUseCase:
    """
    The single place eligibility is computed.

    Certificate claim, certificate status and the course overview all go
    through this use case.
    """

    def __init__(
        self,
        content_repository: CourseContentRepositoryProtocol,
        progress_repository: ProgressRepositoryProtocol,
        attempt_repository: ExamAttemptRepositoryProtocol,
    ) -> None:
        self.content_repository = content_repository
        self.progress_repository = progress_repository
        self.attempt_repository = attempt_repository

    def evaluate(self, user_id: int, course_id: str) -> Eligibility:
        """
        Combine lesson completion and the latest exam attempt.

        Read-only. Each count is an independent read; the result is a
        best-effort snapshot while the learner may still be active. Zero
        lessons and a missing attempt are normal states, not errors.
        """
        user_id_vo = UserId(user_id)
        course_id_vo = CourseId(course_id)

        total_lessons = self.content_repository.count_lessons(course_id_vo)
        completed_lessons = self.progress_repository.count_completed(
            user_id_vo, course_id_vo, total_lessons
        )
        attempt = self.attempt_repository.find(user_id_vo, course_id_vo)

        return Eligibility(
            total_lessons=total_lessons,
            completed_lessons=completed_lessons,
            exam_passed=attempt is not None and attempt.passed,
            exam_score=attempt.score if attempt is not None else None,
        )
