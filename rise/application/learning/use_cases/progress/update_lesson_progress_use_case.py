"""Use case for recording lesson progress."""

from datetime import UTC, datetime

import structlog

from rise.application.content.protocols import CourseContentRepositoryProtocol
from rise.application.learning.protocols import ProgressRepositoryProtocol
from rise.domain.common.exceptions import ValidationError
from rise.domain.common.value_objects import CourseId, LessonIndex, UserId
from rise.domain.learning.entities import LessonProgress, ProgressUpdate
from rise.exceptions import CourseNotFoundError

logger = structlog.get_logger(__name__)


class UpdateLessonProgressUseCase:
    def __init__(
        self,
        progress_repository: ProgressRepositoryProtocol,
        content_repository: CourseContentRepositoryProtocol,
    ) -> None:
        self.progress_repository = progress_repository
        self.content_repository = content_repository

    def update_progress(
        self,
        user_id: int,
        course_id: str,
        lesson_index: int,
        *,
        completed: bool | None = None,
        quiz_score: int | None = None,
        reflection_text: str | None = None,
    ) -> LessonProgress:
        """
        Merge a partial update into a learner's lesson progress.

        Omitted fields keep their stored values. The whole update is
        validated before anything is written, so a rejected call leaves the
        stored record untouched.

        Args:
            user_id: ID of the learner
            course_id: Course slug
            lesson_index: Zero-based lesson position
            completed: New completion flag, if supplied
            quiz_score: New quiz score 0-100, if supplied
            reflection_text: New reflection text, if supplied

        Returns:
            The merged progress record as stored

        Raises:
            ValidationError: If any supplied field is invalid or the lesson
                index is past the end of the course
            CourseNotFoundError: If the course does not exist
        """
        user_id_vo = UserId(user_id)
        course_id_vo = CourseId(course_id)
        lesson_index_vo = LessonIndex(lesson_index)
        update = ProgressUpdate(
            completed=completed, quiz_score=quiz_score, reflection_text=reflection_text
        )

        if self.content_repository.find_course(course_id_vo) is None:
            raise CourseNotFoundError(course_id)

        total_lessons = self.content_repository.count_lessons(course_id_vo)
        if lesson_index >= total_lessons:
            raise ValidationError(
                f"Lesson index must be below the course's {total_lessons} lessons",
                field="lesson_index",
                value=lesson_index,
            )

        progress = self.progress_repository.merge_upsert(
            user_id_vo, course_id_vo, lesson_index_vo, update, datetime.now(UTC)
        )

        logger.info(
            "lesson_progress_updated",
            user_id=user_id,
            course_id=course_id,
            lesson_index=lesson_index,
            fields=update.supplied_fields(),
        )
        return progress
