"""Mapper for ExamAttempt ORM ↔ Domain conversion."""

from typing import Any

from rise.domain.common.value_objects import CourseId, UserId
from rise.domain.learning.entities import ExamAttempt
from rise.models import ExamAttempt as ExamAttemptORM


class ExamAttemptMapper:
    def to_domain(self, orm_model: ExamAttemptORM) -> ExamAttempt:
        return ExamAttempt(
            user_id=UserId(orm_model.user_id),
            course_id=CourseId(orm_model.course_id),
            score=orm_model.score,
            passed=orm_model.passed,
            updated_at=orm_model.updated_at,
        )

    def to_row(self, domain_entity: ExamAttempt) -> dict[str, Any]:
        return {
            "user_id": domain_entity.user_id.value,
            "course_id": domain_entity.course_id.value,
            "score": domain_entity.score,
            "passed": domain_entity.passed,
            "updated_at": domain_entity.updated_at,
        }
