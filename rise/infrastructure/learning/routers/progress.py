"""API routes for lesson progress."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.exc import OperationalError

from rise.application.certification.use_cases.get_course_overview_use_case import (
    GetCourseOverviewUseCase,
)
from rise.application.learning.use_cases.progress.get_course_progress_use_case import (
    GetCourseProgressUseCase,
)
from rise.application.learning.use_cases.progress.update_lesson_progress_use_case import (
    UpdateLessonProgressUseCase,
)
from rise.core import container
from rise.domain.common.exceptions import DomainError
from rise.domain.learning.entities import LessonProgress
from rise.exceptions import RiseError
from rise.infrastructure.common.di import inject_use_case
from rise.infrastructure.identity.dependencies import CurrentPrincipal
from rise.infrastructure.learning.schemas import (
    CourseOverviewItem,
    CourseOverviewResponse,
    CourseProgressResponse,
    LessonProgressRecord,
    LessonProgressUpdateRequest,
    LessonProgressUpdateResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/progress", tags=["progress"])


def _to_record(progress: LessonProgress) -> LessonProgressRecord:
    return LessonProgressRecord(
        lesson_index=progress.lesson_index.value,
        completed=progress.completed,
        quiz_score=progress.quiz_score,
        has_reflection=progress.has_reflection,
        reflection_text=progress.reflection_text,
        reflection_updated_at=progress.reflection_updated_at,
        updated_at=progress.updated_at,
    )


@router.put(
    "/{course_id}/lessons/{lesson_index}",
    response_model=LessonProgressUpdateResponse,
    status_code=status.HTTP_200_OK,
)
def update_lesson_progress(
    course_id: str,
    lesson_index: Annotated[int, Path(ge=0)],
    request: LessonProgressUpdateRequest,
    principal: CurrentPrincipal,
    use_case: UpdateLessonProgressUseCase = Depends(
        inject_use_case(container.update_lesson_progress_use_case)
    ),
) -> LessonProgressUpdateResponse:
    """
    Record progress on one lesson.

    Only the fields present in the body are changed; the rest of the stored
    record is kept.

    Args:
        course_id: Course slug
        lesson_index: Zero-based lesson position
        request: Fields to update
        use_case: UpdateLessonProgressUseCase injected via dependency container

    Returns:
        The merged progress record

    Raises:
        HTTPException: If the course is unknown or the update fails
    """
    try:
        progress = use_case.update_progress(
            user_id=principal.user_id.value,
            course_id=course_id,
            lesson_index=lesson_index,
            completed=request.completed,
            quiz_score=request.quiz_score,
            reflection_text=request.reflection_text,
        )
        return LessonProgressUpdateResponse(
            success=True,
            message="Progress saved",
            course_id=course_id,
            progress=_to_record(progress),
        )
    except (RiseError, DomainError, OperationalError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to update progress for {course_id} lesson {lesson_index}: {e!s}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{course_id}", response_model=CourseProgressResponse)
def get_course_progress(
    course_id: str,
    principal: CurrentPrincipal,
    use_case: GetCourseProgressUseCase = Depends(
        inject_use_case(container.get_course_progress_use_case)
    ),
) -> CourseProgressResponse:
    """Get every stored lesson record of the current learner for a course."""
    try:
        by_index = use_case.get_course_progress(principal.user_id.value, course_id)
        return CourseProgressResponse(
            course_id=course_id,
            by_lesson_index={index: _to_record(progress) for index, progress in by_index.items()},
        )
    except (RiseError, DomainError, OperationalError):
        raise
    except Exception as e:
        logger.error(f"Failed to read progress for {course_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("", response_model=CourseOverviewResponse)
def get_progress_overview(
    principal: CurrentPrincipal,
    use_case: GetCourseOverviewUseCase = Depends(
        inject_use_case(container.get_course_overview_use_case)
    ),
) -> CourseOverviewResponse:
    """Get completion, exam and certificate figures for every course."""
    try:
        overview = use_case.get_overview(principal.user_id.value)
        return CourseOverviewResponse(
            courses=[
                CourseOverviewItem(
                    course_id=item.course_id,
                    total_lessons=item.eligibility.total_lessons,
                    completed_lessons=item.eligibility.completed_lessons,
                    exam_passed=item.eligibility.exam_passed,
                    exam_score=item.eligibility.exam_score,
                    eligible=item.eligibility.eligible,
                    has_certificate=item.has_certificate,
                )
                for item in overview
            ]
        )
    except (RiseError, DomainError, OperationalError):
        raise
    except Exception as e:
        logger.error(f"Failed to build progress overview: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
