from dataclasses import dataclass

from ..entity import EntityId
from ..exceptions import ValidationError
from ..value_object import ValueObject

MAX_COURSE_ID_LENGTH = 64


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""

    value: int


@dataclass(frozen=True)
class CertificateId(EntityId):
    """Strongly-typed certificate identifier."""

    value: int


@dataclass(frozen=True)
class CourseId(ValueObject):
    """
    Course identifier.

    Courses are keyed by a short slug (``foundation``, ``growth``) owned by
    the content store, not by a database sequence.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValidationError("Course id cannot be empty", field="course_id")
        if len(self.value) > MAX_COURSE_ID_LENGTH:
            raise ValidationError(
                f"Course id cannot exceed {MAX_COURSE_ID_LENGTH} characters",
                field="course_id",
                value=self.value,
            )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class LessonIndex(ValueObject):
    """Zero-based position of a lesson within its course."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                "Lesson index must be an integer", field="lesson_index", value=self.value
            )
        if self.value < 0:
            raise ValidationError(
                "Lesson index must be non-negative", field="lesson_index", value=self.value
            )

    def __int__(self) -> int:
        return self.value
