"""Use case for reading a learner's progress in one course."""

from rise.application.learning.protocols import ProgressRepositoryProtocol
from rise.domain.common.value_objects import CourseId, UserId
from rise.domain.learning.entities import LessonProgress


class GetCourseProgressUseCase:
    def __init__(self, progress_repository: ProgressRepositoryProtocol) -> None:
        self.progress_repository = progress_repository

    def get_course_progress(self, user_id: int, course_id: str) -> dict[int, LessonProgress]:
        """Return progress rows keyed by lesson index; empty when nothing was recorded."""
        records = self.progress_repository.find_by_course(UserId(user_id), CourseId(course_id))
        return {record.lesson_index.value: record for record in records}
