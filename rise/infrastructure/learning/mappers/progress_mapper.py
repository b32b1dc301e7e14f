"""Mapper for LessonProgress ORM ↔ Domain conversion."""

from typing import Any

from rise.domain.common.value_objects import CourseId, LessonIndex, UserId
from rise.domain.learning.entities import LessonProgress
from rise.models import LessonProgress as LessonProgressORM


class ProgressMapper:
    """Mapper for LessonProgress ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: LessonProgressORM) -> LessonProgress:
        """Convert ORM model to domain entity."""
        return LessonProgress(
            user_id=UserId(orm_model.user_id),
            course_id=CourseId(orm_model.course_id),
            lesson_index=LessonIndex(orm_model.lesson_index),
            completed=orm_model.completed,
            quiz_score=orm_model.quiz_score,
            reflection_text=orm_model.reflection_text,
            reflection_updated_at=orm_model.reflection_updated_at,
            updated_at=orm_model.updated_at,
        )

    def to_row(self, domain_entity: LessonProgress) -> dict[str, Any]:
        """Column values for an INSERT statement."""
        return {
            "user_id": domain_entity.user_id.value,
            "course_id": domain_entity.course_id.value,
            "lesson_index": domain_entity.lesson_index.value,
            "completed": domain_entity.completed,
            "quiz_score": domain_entity.quiz_score,
            "reflection_text": domain_entity.reflection_text,
            "reflection_updated_at": domain_entity.reflection_updated_at,
            "updated_at": domain_entity.updated_at,
        }
