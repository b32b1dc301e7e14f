"""
Lesson progress record and its partial-update merge rules.
"""

from dataclasses import dataclass, replace
from datetime import datetime

from rise.domain.common.exceptions import ValidationError
from rise.domain.common.value_objects import CourseId, LessonIndex, UserId

MAX_REFLECTION_LENGTH = 2000
MIN_QUIZ_SCORE = 0
MAX_QUIZ_SCORE = 100


@dataclass(frozen=True)
class ProgressUpdate:
    """
    Partial update of a lesson progress record.

    ``None`` means the field was not supplied and must keep its stored value.
    An empty reflection string is a supplied value.
    """

    completed: bool | None = None
    quiz_score: int | None = None
    reflection_text: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.completed is not None and not isinstance(self.completed, bool):
            raise ValidationError(
                "Completed flag must be a boolean", field="completed", value=self.completed
            )
        if self.quiz_score is not None:
            if isinstance(self.quiz_score, bool) or not isinstance(self.quiz_score, int):
                raise ValidationError(
                    "Quiz score must be an integer", field="quiz_score", value=self.quiz_score
                )
            if not MIN_QUIZ_SCORE <= self.quiz_score <= MAX_QUIZ_SCORE:
                raise ValidationError(
                    f"Quiz score must be between {MIN_QUIZ_SCORE} and {MAX_QUIZ_SCORE}",
                    field="quiz_score",
                    value=self.quiz_score,
                )
        if self.reflection_text is not None:
            if not isinstance(self.reflection_text, str):
                raise ValidationError("Reflection must be text", field="reflection_text")
            if len(self.reflection_text) > MAX_REFLECTION_LENGTH:
                raise ValidationError(
                    f"Reflection cannot exceed {MAX_REFLECTION_LENGTH} characters",
                    field="reflection_text",
                    value=len(self.reflection_text),
                )

    @property
    def supplies_reflection(self) -> bool:
        return self.reflection_text is not None

    def supplied_fields(self) -> list[str]:
        """Names of the fields this update overwrites, in declaration order."""
        names = ["completed", "quiz_score", "reflection_text"]
        return [name for name in names if getattr(self, name) is not None]


@dataclass(frozen=True)
class LessonProgress:
    """
    Progress of one learner on one lesson.

    Business Rules:
    - Created by the first update for its (user, course, lesson) key
    - Later updates merge: omitted fields keep their stored value
    - reflection_updated_at only moves when reflection text is supplied
    - updated_at moves on every write
    - Never deleted
    """

    user_id: UserId
    course_id: CourseId
    lesson_index: LessonIndex
    completed: bool = False
    quiz_score: int | None = None
    reflection_text: str | None = None
    reflection_updated_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def has_reflection(self) -> bool:
        return bool(self.reflection_text and self.reflection_text.strip())

    def merge(self, update: ProgressUpdate, now: datetime) -> "LessonProgress":
        """
        Fold a partial update over this record.

        Args:
            update: Fields supplied by the caller
            now: Write timestamp

        Returns:
            New record with supplied fields replaced and timestamps stamped
        """
        merged = replace(self, updated_at=now)
        if update.completed is not None:
            merged = replace(merged, completed=update.completed)
        if update.quiz_score is not None:
            merged = replace(merged, quiz_score=update.quiz_score)
        if update.reflection_text is not None:
            merged = replace(
                merged, reflection_text=update.reflection_text, reflection_updated_at=now
            )
        return merged

    @classmethod
    def blank(
        cls, user_id: UserId, course_id: CourseId, lesson_index: LessonIndex
    ) -> "LessonProgress":
        """Default record used when no row exists yet for the key."""
        return cls(user_id=user_id, course_id=course_id, lesson_index=lesson_index)

    @classmethod
    def apply(
        cls,
        previous: "LessonProgress | None",
        update: ProgressUpdate,
        *,
        user_id: UserId,
        course_id: CourseId,
        lesson_index: LessonIndex,
        now: datetime,
    ) -> "LessonProgress":
        """Merge an update over an optional previous record."""
        base = previous or cls.blank(user_id, course_id, lesson_index)
        return base.merge(update, now)
