"""Repository for read-only course content."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from rise.domain.common.value_objects import CourseId
from rise.domain.content.entities import Course, ExamDefinition
from rise.infrastructure.content.mappers.content_mapper import ContentMapper
from rise.models import Course as CourseORM
from rise.models import ExamDefinition as ExamDefinitionORM
from rise.models import Lesson as LessonORM


class CourseContentRepository:
    """Reads courses, lesson counts and exam definitions from the content tables."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ContentMapper()

    def find_course(self, course_id: CourseId) -> Course | None:
        stmt = select(CourseORM).where(CourseORM.id == course_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.course_to_domain(orm_model) if orm_model else None

    def list_courses(self) -> list[Course]:
        """All courses in catalog order."""
        stmt = select(CourseORM).order_by(CourseORM.sort_order, CourseORM.id)
        return [self.mapper.course_to_domain(orm) for orm in self.db.execute(stmt).scalars()]

    def count_lessons(self, course_id: CourseId) -> int:
        stmt = select(func.count()).select_from(LessonORM).where(
            LessonORM.course_id == course_id.value
        )
        return self.db.execute(stmt).scalar_one()

    def find_exam_definition(self, course_id: CourseId) -> ExamDefinition | None:
        """
        Find the exam for a course.

        Args:
            course_id: The course slug

        Returns:
            ExamDefinition with every language's questions, or None
        """
        stmt = select(ExamDefinitionORM).where(ExamDefinitionORM.course_id == course_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.exam_to_domain(orm_model) if orm_model else None
