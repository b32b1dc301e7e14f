import pytest

from rise.domain.common.exceptions import ValidationError
from rise.domain.common.value_objects import CourseId, Language
from rise.domain.content.entities import Course, ExamDefinition, QuizQuestion

EN = Language("en")
TI = Language("ti")


def _question(text: str) -> QuizQuestion:
    return QuizQuestion(text=text, options=("a", "b"), correct_index=0)


def test_requested_language_is_used_when_present() -> None:
    exam = ExamDefinition(
        CourseId("foundation"),
        question_sets={EN: (_question("en"),), TI: (_question("ti"),)},
    )

    language, questions = exam.questions_for(TI, EN)

    assert language == TI
    assert questions[0].text == "ti"


def test_missing_language_falls_back_to_default() -> None:
    exam = ExamDefinition(CourseId("foundation"), question_sets={EN: (_question("en"),)})

    language, questions = exam.questions_for(Language("fr"), EN)

    assert language == EN
    assert questions[0].text == "en"


def test_pass_score_must_be_a_percentage() -> None:
    with pytest.raises(ValidationError):
        ExamDefinition(CourseId("foundation"), pass_score=120)


def test_language_code_is_normalized() -> None:
    assert Language(" TI ") == TI


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        (None, EN),
        ("", EN),
        ("  ", EN),
        ("12", EN),
        ("ti", TI),
        ("TI-ER", TI),
        ("en_US", EN),
        ("pt-BR", Language("pt")),
    ],
)
def test_requested_language_resolves_or_falls_back(code: str | None, expected: Language) -> None:
    assert Language.requested(code, EN) == expected


def test_question_from_stored_json() -> None:
    question = QuizQuestion.from_dict(
        {"text": "Capital?", "options": ["Keren", "Asmara"], "correctIndex": 1}
    )

    assert question.options == ("Keren", "Asmara")
    assert question.correct_index == 1


def test_question_needs_two_options() -> None:
    with pytest.raises(ValidationError):
        QuizQuestion(text="Only one", options=("a",), correct_index=0)


def test_question_correct_index_must_point_at_an_option() -> None:
    with pytest.raises(ValidationError):
        QuizQuestion(text="Bad", options=("a", "b"), correct_index=2)


def test_course_title_falls_back_to_english() -> None:
    course = Course(id=CourseId("growth"), title_en="Growth", title_ti=" ")

    assert course.title_for(TI) == "Growth"
    assert course.title_for(EN) == "Growth"
