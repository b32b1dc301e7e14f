"""Mapper for content ORM ↔ Domain conversion."""

from typing import Any

from rise.domain.common.value_objects import CourseId, Language
from rise.domain.content.entities import Course, ExamDefinition, QuizQuestion
from rise.models import Course as CourseORM
from rise.models import ExamDefinition as ExamDefinitionORM


class ContentMapper:
    """Mapper for course and exam definition rows."""

    def course_to_domain(self, orm_model: CourseORM) -> Course:
        return Course(
            id=CourseId(orm_model.id),
            title_en=orm_model.title_en,
            title_ti=orm_model.title_ti,
            description_en=orm_model.description_en,
            description_ti=orm_model.description_ti,
        )

    def exam_to_domain(self, orm_model: ExamDefinitionORM) -> ExamDefinition:
        """Convert an exam definition and its per-language question sets."""
        return ExamDefinition(
            course_id=CourseId(orm_model.course_id),
            pass_score=orm_model.pass_score,
            question_sets={
                Language(question_set.language): self.questions_to_domain(question_set.questions)
                for question_set in orm_model.question_sets
            },
        )

    def questions_to_domain(self, payload: Any) -> tuple[QuizQuestion, ...]:  # noqa: ANN401
        """
        Parse stored question JSON.

        Accepts a bare list of questions or the authoring tool's
        ``{"questions": [...]}`` wrapper.
        """
        if isinstance(payload, dict):
            payload = payload.get("questions")
        if not isinstance(payload, list):
            return ()
        return tuple(QuizQuestion.from_dict(item) for item in payload if isinstance(item, dict))
