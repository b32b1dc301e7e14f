"""Final exam configured for a course."""

from dataclasses import dataclass, field

from rise.domain.common.exceptions import ValidationError
from rise.domain.common.value_objects import CourseId, Language
from rise.domain.content.entities.quiz_question import QuizQuestion

DEFAULT_PASS_SCORE = 70


@dataclass
class ExamDefinition:
    """
    Per-course exam with one ordered question list per language.

    Owned by the content store; the core only reads it.
    """

    course_id: CourseId
    pass_score: int = DEFAULT_PASS_SCORE
    question_sets: dict[Language, tuple[QuizQuestion, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not 0 <= self.pass_score <= 100:
            raise ValidationError(
                "Pass score must be between 0 and 100", field="pass_score", value=self.pass_score
            )

    @property
    def languages(self) -> list[Language]:
        return sorted(self.question_sets, key=lambda language: language.value)

    def resolve_language(self, requested: Language, default: Language) -> Language:
        """Return the requested language if it has a question set, otherwise the default."""
        if requested in self.question_sets:
            return requested
        return default

    def questions_for(
        self, requested: Language, default: Language
    ) -> tuple[Language, tuple[QuizQuestion, ...]]:
        """
        Select the question set to serve for a language.

        Falls back to the default language when the requested one has no
        question set. The returned set may be empty; callers decide whether
        that is an error.
        """
        language = self.resolve_language(requested, default)
        return language, self.question_sets.get(language, ())
