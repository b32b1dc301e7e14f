"""Use case for submitting a final exam."""

from datetime import UTC, datetime

import structlog

from rise.application.content.protocols import CourseContentRepositoryProtocol
from rise.application.learning.protocols import ExamAttemptRepositoryProtocol
from rise.application.learning.use_cases.dtos import ExamResult
from rise.domain.common.value_objects import CourseId, Language, UserId
from rise.domain.learning.entities import ExamAttempt
from rise.domain.learning.exceptions import NoQuestionsError
from rise.domain.learning.services import exam_scorer
from rise.exceptions import ExamNotFoundError

logger = structlog.get_logger(__name__)


class SubmitExamUseCase:
    def __init__(
        self,
        content_repository: CourseContentRepositoryProtocol,
        attempt_repository: ExamAttemptRepositoryProtocol,
        default_language: str,
    ) -> None:
        self.content_repository = content_repository
        self.attempt_repository = attempt_repository
        self.default_language = Language(default_language)

    def submit_exam(
        self, user_id: int, course_id: str, language: str | None, answers: object
    ) -> ExamResult:
        """
        Score an answer set and store it as the learner's latest attempt.

        Any earlier attempt for the course is replaced.

        Args:
            user_id: ID of the learner
            course_id: Course slug
            language: Requested question language; None or unknown serves the default
            answers: One option index per question

        Returns:
            Score, pass/fail verdict and the pass score used

        Raises:
            ExamNotFoundError: If the course has no exam definition
            NoQuestionsError: If the selected question set is empty
            InvalidAnswersError: If the answers cannot be scored
        """
        user_id_vo = UserId(user_id)
        course_id_vo = CourseId(course_id)

        definition = self.content_repository.find_exam_definition(course_id_vo)
        if definition is None:
            raise ExamNotFoundError(course_id)

        served_language, questions = definition.questions_for(
            Language.requested(language, self.default_language), self.default_language
        )
        if not questions:
            raise NoQuestionsError(course_id, served_language.value)

        validated = exam_scorer.validate_answers(questions, answers)
        result = exam_scorer.score(questions, validated)

        attempt = ExamAttempt.record(
            user_id=user_id_vo,
            course_id=course_id_vo,
            score=result.score_percent,
            pass_score=definition.pass_score,
            now=datetime.now(UTC),
        )
        attempt = self.attempt_repository.replace(attempt)

        logger.info(
            "exam_submitted",
            user_id=user_id,
            course_id=course_id,
            language=served_language.value,
            score=attempt.score,
            passed=attempt.passed,
        )
        return ExamResult(
            score=attempt.score,
            passed=attempt.passed,
            pass_score=definition.pass_score,
            correct_count=result.correct_count,
            question_count=len(questions),
            language=served_language.value,
        )
