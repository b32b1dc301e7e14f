"""Use case for loading an exam for a learner."""

from rise.application.content.protocols import CourseContentRepositoryProtocol
from rise.application.learning.protocols import ExamAttemptRepositoryProtocol
from rise.application.learning.use_cases.dtos import LearnerExam
from rise.domain.common.value_objects import CourseId, Language, UserId
from rise.exceptions import ExamNotFoundError


class GetExamUseCase:
    def __init__(
        self,
        content_repository: CourseContentRepositoryProtocol,
        attempt_repository: ExamAttemptRepositoryProtocol,
        default_language: str,
    ) -> None:
        self.content_repository = content_repository
        self.attempt_repository = attempt_repository
        self.default_language = Language(default_language)

    def get_exam(self, user_id: int, course_id: str, language: str | None = None) -> LearnerExam:
        """
        Load exam questions in the requested language plus the latest attempt.

        Raises:
            ExamNotFoundError: If the course has no exam definition
        """
        course_id_vo = CourseId(course_id)
        definition = self.content_repository.find_exam_definition(course_id_vo)
        if definition is None:
            raise ExamNotFoundError(course_id)

        served_language, questions = definition.questions_for(
            Language.requested(language, self.default_language), self.default_language
        )
        return LearnerExam(
            course_id=course_id,
            language=served_language.value,
            pass_score=definition.pass_score,
            questions=questions,
            latest_attempt=self.attempt_repository.find(UserId(user_id), course_id_vo),
        )
