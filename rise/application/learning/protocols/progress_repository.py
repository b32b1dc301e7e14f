"""Protocol for LessonProgress repository."""

from datetime import datetime
from typing import Protocol

from rise.domain.common.value_objects import CourseId, LessonIndex, UserId
from rise.domain.learning.entities import LessonProgress, ProgressUpdate


class ProgressRepositoryProtocol(Protocol):
    """Interface for lesson progress persistence."""

    def merge_upsert(
        self,
        user_id: UserId,
        course_id: CourseId,
        lesson_index: LessonIndex,
        update: ProgressUpdate,
        now: datetime,
    ) -> LessonProgress: ...

    def find(
        self, user_id: UserId, course_id: CourseId, lesson_index: LessonIndex
    ) -> LessonProgress | None: ...

    def find_by_course(self, user_id: UserId, course_id: CourseId) -> list[LessonProgress]: ...

    def count_completed(
        self, user_id: UserId, course_id: CourseId, lesson_count: int
    ) -> int: ...
