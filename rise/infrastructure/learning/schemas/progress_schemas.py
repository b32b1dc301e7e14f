"""Pydantic schemas for lesson progress request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field, StrictBool, StrictInt

from rise.domain.learning.entities import MAX_REFLECTION_LENGTH


class LessonProgressUpdateRequest(BaseModel):
    """
    Partial update of one lesson's progress.

    Omitted fields keep their stored values; an empty reflection is a value.
    """

    completed: StrictBool | None = Field(None, description="Whether the lesson is finished")
    quiz_score: StrictInt | None = Field(
        None, ge=0, le=100, description="Lesson quiz score in percent"
    )
    reflection_text: str | None = Field(
        None, max_length=MAX_REFLECTION_LENGTH, description="Learner's written reflection"
    )


class LessonProgressRecord(BaseModel):
    """Stored progress of one lesson."""

    lesson_index: int
    completed: bool
    quiz_score: int | None
    has_reflection: bool
    reflection_text: str | None
    reflection_updated_at: datetime | None
    updated_at: datetime | None


class LessonProgressUpdateResponse(BaseModel):
    """Schema for progress update response."""

    success: bool = Field(..., description="Whether the update was successful")
    message: str = Field(..., description="Response message")
    course_id: str
    progress: LessonProgressRecord = Field(..., description="Merged progress record")


class CourseProgressResponse(BaseModel):
    """All stored lesson records of a course, keyed by lesson index."""

    course_id: str
    by_lesson_index: dict[int, LessonProgressRecord] = Field(
        ..., description="Progress records keyed by lesson index"
    )


class CourseOverviewItem(BaseModel):
    """Eligibility figures for one course on the learner dashboard."""

    course_id: str
    total_lessons: int
    completed_lessons: int
    exam_passed: bool
    exam_score: int | None
    eligible: bool
    has_certificate: bool


class CourseOverviewResponse(BaseModel):
    courses: list[CourseOverviewItem]
