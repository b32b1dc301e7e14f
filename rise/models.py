"""Database models."""

from datetime import datetime
from typing import Any

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rise.database import Base


class User(Base):
    """Learner or staff account, owned by the identity provider."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    email: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="student")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"


class Course(Base):
    """Bilingual course header."""

    __tablename__ = "courses"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    title_en: Mapped[str] = mapped_column(Text, nullable=False)
    title_ti: Mapped[str] = mapped_column(Text, nullable=False)
    description_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    description_ti: Mapped[str | None] = mapped_column(Text, nullable=True)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=99)

    lessons: Mapped[list["Lesson"]] = relationship(
        back_populates="course", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Course(id='{self.id}')>"


class Lesson(Base):
    """One lesson of a course with bilingual text and an embedded quiz."""

    __tablename__ = "lessons"
    __table_args__ = (UniqueConstraint("course_id", "lesson_index", name="uq_lesson_position"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    course_id: Mapped[str] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"), index=True, nullable=False
    )
    lesson_index: Mapped[int] = mapped_column(Integer, nullable=False)
    title_en: Mapped[str] = mapped_column(Text, nullable=False)
    title_ti: Mapped[str] = mapped_column(Text, nullable=False)
    body_en: Mapped[str] = mapped_column(Text, nullable=False, default="")
    body_ti: Mapped[str] = mapped_column(Text, nullable=False, default="")
    task_en: Mapped[str] = mapped_column(Text, nullable=False, default="")
    task_ti: Mapped[str] = mapped_column(Text, nullable=False, default="")
    quiz: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    course: Mapped[Course] = relationship(back_populates="lessons")


class ExamDefinition(Base):
    """Final exam settings for a course."""

    __tablename__ = "exam_definitions"

    course_id: Mapped[str] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"), primary_key=True
    )
    pass_score: Mapped[int] = mapped_column(Integer, nullable=False, default=70)

    question_sets: Mapped[list["ExamQuestionSet"]] = relationship(
        back_populates="exam", cascade="all, delete-orphan", lazy="selectin"
    )


class ExamQuestionSet(Base):
    """Ordered exam questions in one language."""

    __tablename__ = "exam_question_sets"

    course_id: Mapped[str] = mapped_column(
        ForeignKey("exam_definitions.course_id", ondelete="CASCADE"), primary_key=True
    )
    language: Mapped[str] = mapped_column(String(8), primary_key=True)
    questions: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    exam: Mapped[ExamDefinition] = relationship(back_populates="question_sets")


class LessonProgress(Base):
    """Per-learner, per-lesson completion, quiz score and reflection."""

    __tablename__ = "lesson_progress"
    __table_args__ = (
        CheckConstraint(
            "quiz_score IS NULL OR (quiz_score >= 0 AND quiz_score <= 100)",
            name="ck_lesson_progress_quiz_score",
        ),
    )

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    course_id: Mapped[str] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"), primary_key=True
    )
    lesson_index: Mapped[int] = mapped_column(Integer, primary_key=True)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    quiz_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    reflection_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    reflection_updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


class ExamAttempt(Base):
    """Latest exam attempt; replaced on every submission."""

    __tablename__ = "exam_attempts"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    course_id: Mapped[str] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"), primary_key=True
    )
    score: Mapped[int] = mapped_column(Integer, nullable=False)
    passed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


class Certificate(Base):
    """Issued completion certificate."""

    __tablename__ = "certificates"
    __table_args__ = (UniqueConstraint("user_id", "course_id", name="uq_certificate_user_course"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    course_id: Mapped[str] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"), nullable=False
    )
    issued_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    course: Mapped[Course] = relationship()

    def __repr__(self) -> str:
        return f"<Certificate(id={self.id}, user_id={self.user_id}, course_id='{self.course_id}')>"
