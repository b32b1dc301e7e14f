"""API routes for course final exams."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from sqlalchemy.exc import OperationalError

from rise.application.learning.use_cases.exams.get_exam_status_use_case import (
    GetExamStatusUseCase,
)
from rise.application.learning.use_cases.exams.get_exam_use_case import GetExamUseCase
from rise.application.learning.use_cases.exams.submit_exam_use_case import SubmitExamUseCase
from rise.config import get_settings
from rise.core import container
from rise.domain.common.exceptions import DomainError
from rise.domain.learning.entities import ExamAttempt
from rise.exceptions import RiseError
from rise.infrastructure.common.di import inject_use_case
from rise.infrastructure.common.rate_limit import limiter
from rise.infrastructure.identity.dependencies import CurrentPrincipal
from rise.infrastructure.learning.schemas import (
    ExamQuestion,
    ExamResultResponse,
    ExamStatusResponse,
    ExamSubmitRequest,
    LearnerExamResponse,
)

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(prefix="/exams", tags=["exams"])


def _to_status(course_id: str, attempt: ExamAttempt | None) -> ExamStatusResponse:
    if attempt is None:
        return ExamStatusResponse(course_id=course_id, attempted=False)
    return ExamStatusResponse(
        course_id=course_id,
        attempted=True,
        score=attempt.score,
        passed=attempt.passed,
        updated_at=attempt.updated_at,
    )


@router.get("/{course_id}", response_model=LearnerExamResponse)
def get_exam(
    course_id: str,
    principal: CurrentPrincipal,
    language: str | None = Query(None, max_length=35),
    use_case: GetExamUseCase = Depends(inject_use_case(container.get_exam_use_case)),
) -> LearnerExamResponse:
    """
    Get the exam questions for a course, without the answers.

    Falls back to the default language when the requested one has no
    question set; ``language`` in the response is the one served.
    """
    try:
        exam = use_case.get_exam(principal.user_id.value, course_id, language)
        return LearnerExamResponse(
            course_id=exam.course_id,
            language=exam.language,
            pass_score=exam.pass_score,
            questions=[
                ExamQuestion(index=index, text=question.text, options=list(question.options))
                for index, question in enumerate(exam.questions)
            ],
            latest_attempt=_to_status(course_id, exam.latest_attempt),
        )
    except (RiseError, DomainError, OperationalError):
        raise
    except Exception as e:
        logger.error(f"Failed to load exam for {course_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{course_id}/submit",
    response_model=ExamResultResponse,
    status_code=status.HTTP_200_OK,
)
@limiter.limit(settings.EXAM_SUBMIT_RATE_LIMIT)  # type: ignore[misc]
def submit_exam(
    request: Request,
    course_id: str,
    submission: ExamSubmitRequest,
    principal: CurrentPrincipal,
    use_case: SubmitExamUseCase = Depends(inject_use_case(container.submit_exam_use_case)),
) -> ExamResultResponse:
    """
    Score a set of answers and store it as the latest attempt.

    Args:
        course_id: Course slug
        submission: One selected option index per question
        use_case: SubmitExamUseCase injected via dependency container

    Returns:
        Score, pass/fail verdict and the pass score

    Raises:
        HTTPException: If the exam is unknown or the answers cannot be scored
    """
    try:
        result = use_case.submit_exam(
            user_id=principal.user_id.value,
            course_id=course_id,
            language=submission.language,
            answers=submission.answers,
        )
        return ExamResultResponse(
            course_id=course_id,
            score=result.score,
            passed=result.passed,
            pass_score=result.pass_score,
            correct_count=result.correct_count,
            question_count=result.question_count,
            language=result.language,
        )
    except (RiseError, DomainError, OperationalError):
        raise
    except Exception as e:
        logger.error(f"Failed to submit exam for {course_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{course_id}/status", response_model=ExamStatusResponse)
def get_exam_status(
    course_id: str,
    principal: CurrentPrincipal,
    use_case: GetExamStatusUseCase = Depends(inject_use_case(container.get_exam_status_use_case)),
) -> ExamStatusResponse:
    """Get the latest exam attempt for a course."""
    try:
        return _to_status(course_id, use_case.get_status(principal.user_id.value, course_id))
    except (RiseError, DomainError, OperationalError):
        raise
    except Exception as e:
        logger.error(f"Failed to read exam status for {course_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
