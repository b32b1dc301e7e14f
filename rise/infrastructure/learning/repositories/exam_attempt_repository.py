"""Repository for the latest ExamAttempt per learner and course."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from rise.domain.common.value_objects import CourseId, UserId
from rise.domain.learning.entities import ExamAttempt
from rise.exceptions import ServiceError
from rise.infrastructure.common.persistence import atomic_write, upsert_statement
from rise.infrastructure.learning.mappers.exam_attempt_mapper import ExamAttemptMapper
from rise.models import ExamAttempt as ExamAttemptORM


class ExamAttemptRepository:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ExamAttemptMapper()

    def replace(self, attempt: ExamAttempt) -> ExamAttempt:
        """
        Insert the attempt or overwrite score, passed and updated_at.

        Args:
            attempt: The freshly scored attempt

        Returns:
            The stored attempt
        """
        stmt = upsert_statement(self.db, ExamAttemptORM).values(**self.mapper.to_row(attempt))
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "course_id"],
            set_={
                "score": stmt.excluded.score,
                "passed": stmt.excluded.passed,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        with atomic_write(self.db, "replace_exam_attempt"):
            self.db.execute(stmt)

        stored = self.find(attempt.user_id, attempt.course_id)
        if stored is None:
            raise ServiceError("Exam attempt row missing after upsert")
        return stored

    def find(self, user_id: UserId, course_id: CourseId) -> ExamAttempt | None:
        stmt = select(ExamAttemptORM).where(
            ExamAttemptORM.user_id == user_id.value,
            ExamAttemptORM.course_id == course_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None
