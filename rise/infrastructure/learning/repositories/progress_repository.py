"""Repository for LessonProgress records."""

from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from rise.domain.common.value_objects import CourseId, LessonIndex, UserId
from rise.domain.learning.entities import LessonProgress, ProgressUpdate
from rise.exceptions import ServiceError
from rise.infrastructure.common.persistence import atomic_write, upsert_statement
from rise.infrastructure.learning.mappers.progress_mapper import ProgressMapper
from rise.models import LessonProgress as LessonProgressORM

PROGRESS_KEY = ["user_id", "course_id", "lesson_index"]


class ProgressRepository:
    """Repository for LessonProgress records."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ProgressMapper()

    def merge_upsert(
        self,
        user_id: UserId,
        course_id: CourseId,
        lesson_index: LessonIndex,
        update: ProgressUpdate,
        now: datetime,
    ) -> LessonProgress:
        """
        Create or merge-update the record for one lesson in a single statement.

        The INSERT branch writes the update over a blank record. The conflict
        branch only touches the supplied columns plus the timestamps, so two
        concurrent updates that supply different fields both survive.

        Args:
            user_id: Learner
            course_id: Course slug
            lesson_index: Zero-based lesson position
            update: Supplied fields
            now: Write timestamp

        Returns:
            The stored record after the write
        """
        initial = LessonProgress.apply(
            None,
            update,
            user_id=user_id,
            course_id=course_id,
            lesson_index=lesson_index,
            now=now,
        )
        stmt = upsert_statement(self.db, LessonProgressORM).values(**self.mapper.to_row(initial))

        set_ = {"updated_at": stmt.excluded.updated_at}
        for name in update.supplied_fields():
            set_[name] = stmt.excluded[name]
        if update.supplies_reflection:
            set_["reflection_updated_at"] = stmt.excluded.reflection_updated_at

        stmt = stmt.on_conflict_do_update(index_elements=PROGRESS_KEY, set_=set_)
        with atomic_write(self.db, "merge_lesson_progress"):
            self.db.execute(stmt)

        stored = self.find(user_id, course_id, lesson_index)
        if stored is None:
            raise ServiceError("Lesson progress row missing after upsert")
        return stored

    def find(
        self, user_id: UserId, course_id: CourseId, lesson_index: LessonIndex
    ) -> LessonProgress | None:
        stmt = select(LessonProgressORM).where(
            LessonProgressORM.user_id == user_id.value,
            LessonProgressORM.course_id == course_id.value,
            LessonProgressORM.lesson_index == lesson_index.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_course(self, user_id: UserId, course_id: CourseId) -> list[LessonProgress]:
        """All records of a learner for one course, ordered by lesson index."""
        stmt = (
            select(LessonProgressORM)
            .where(
                LessonProgressORM.user_id == user_id.value,
                LessonProgressORM.course_id == course_id.value,
            )
            .order_by(LessonProgressORM.lesson_index)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def count_completed(self, user_id: UserId, course_id: CourseId, lesson_count: int) -> int:
        """Completed records among the course's first lesson_count lessons."""
        stmt = (
            select(func.count())
            .select_from(LessonProgressORM)
            .where(
                LessonProgressORM.user_id == user_id.value,
                LessonProgressORM.course_id == course_id.value,
                LessonProgressORM.completed.is_(True),
                LessonProgressORM.lesson_index < lesson_count,
            )
        )
        return self.db.execute(stmt).scalar_one()
