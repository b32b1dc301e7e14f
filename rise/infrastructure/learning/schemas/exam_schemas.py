"""Pydantic schemas for exam request/response validation."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ExamSubmitRequest(BaseModel):
    """Schema for submitting exam answers."""

    # Element types are checked by exam_scorer.validate_answers
    answers: list[Any] = Field(
        ..., description="Selected option index per question, in question order"
    )
    language: str | None = Field(
        None, max_length=35, description="Question language; defaults to the primary language"
    )


class ExamResultResponse(BaseModel):
    """Schema for exam submission response."""

    course_id: str
    score: int = Field(..., description="Score in percent, rounded half up")
    passed: bool
    pass_score: int
    correct_count: int
    question_count: int
    language: str = Field(..., description="Language of the question set that was scored")


class ExamStatusResponse(BaseModel):
    """Latest attempt for a course; attempted is False when there is none."""

    course_id: str
    attempted: bool
    score: int | None = None
    passed: bool = False
    updated_at: datetime | None = None


class ExamQuestion(BaseModel):
    """Question as shown to a learner, without the correct answer."""

    index: int
    text: str
    options: list[str]


class LearnerExamResponse(BaseModel):
    course_id: str
    language: str
    pass_score: int
    questions: list[ExamQuestion]
    latest_attempt: ExamStatusResponse
