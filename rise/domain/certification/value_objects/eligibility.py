"""Certificate eligibility verdict."""

from dataclasses import dataclass

from rise.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class Eligibility(ValueObject):
    """
    Snapshot of a learner's standing in one course.

    Eligible only when the course has lessons, every lesson is completed and
    the latest exam attempt passed. A failed attempt counts the same as no
    attempt, whatever its score.
    """

    total_lessons: int
    completed_lessons: int
    exam_passed: bool
    exam_score: int | None = None

    @property
    def eligible(self) -> bool:
        return (
            self.total_lessons > 0
            and self.completed_lessons >= self.total_lessons
            and self.exam_passed
        )

    @property
    def lessons_remaining(self) -> int:
        return max(self.total_lessons - self.completed_lessons, 0)

    def to_dict(self) -> dict[str, object]:
        return {
            "total_lessons": self.total_lessons,
            "completed_lessons": self.completed_lessons,
            "lessons_remaining": self.lessons_remaining,
            "exam_passed": self.exam_passed,
            "exam_score": self.exam_score,
            "eligible": self.eligible,
        }
