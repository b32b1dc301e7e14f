"""Learning module domain exceptions."""

from rise.domain.common.exceptions import DomainError, ValidationError


class InvalidAnswersError(ValidationError):
    """Raised when a submitted answer set cannot be scored."""

    def __init__(self, reason: str, message: str, index: int | None = None) -> None:
        super().__init__(message, field="answers", value=index)
        self.reason = reason
        self.index = index
        self.details = {"reason": reason, "index": index}


class NoQuestionsError(DomainError):
    """Raised when the selected exam question set is empty."""

    def __init__(self, course_id: str, language: str) -> None:
        super().__init__(
            "Exam has no questions configured",
            {"course_id": course_id, "language": language},
        )
        self.course_id = course_id
        self.language = language
