"""Latest exam attempt of a learner for a course."""

from dataclasses import dataclass
from datetime import datetime

from rise.domain.common.exceptions import ValidationError
from rise.domain.common.value_objects import CourseId, UserId


@dataclass(frozen=True)
class ExamAttempt:
    """
    Outcome of the most recent exam submission.

    Only one attempt per (user, course) is kept; a new submission replaces
    score, passed and updated_at.
    """

    user_id: UserId
    course_id: CourseId
    score: int
    passed: bool
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not 0 <= self.score <= 100:
            raise ValidationError("Score must be between 0 and 100", field="score", value=self.score)

    @classmethod
    def record(
        cls,
        user_id: UserId,
        course_id: CourseId,
        score: int,
        pass_score: int,
        now: datetime,
    ) -> "ExamAttempt":
        """Create an attempt, deciding pass/fail against the pass score."""
        return cls(
            user_id=user_id,
            course_id=course_id,
            score=score,
            passed=score >= pass_score,
            updated_at=now,
        )
