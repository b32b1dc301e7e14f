import pytest

from rise.domain.content.entities import QuizQuestion
from rise.domain.learning.exceptions import InvalidAnswersError
from rise.domain.learning.services.exam_scorer import score, validate_answers


def _questions(*correct: int) -> list[QuizQuestion]:
    return [
        QuizQuestion(text=f"Q{i}", options=("a", "b", "c"), correct_index=index)
        for i, index in enumerate(correct)
    ]


def test_two_of_three_rounds_to_67() -> None:
    result = score(_questions(0, 1, 0), [0, 1, 1])

    assert result.correct_count == 2
    assert result.score_percent == 67


@pytest.mark.parametrize(
    ("correct", "total", "expected"),
    [
        (0, 3, 0),
        (1, 3, 33),
        (3, 3, 100),
        (1, 8, 13),  # 12.5 rounds up
        (5, 8, 63),  # 62.5 rounds up
        (7, 10, 70),
    ],
)
def test_percentage_rounds_half_up(correct: int, total: int, expected: int) -> None:
    questions = _questions(*([0] * total))
    answers = [0] * correct + [1] * (total - correct)

    assert score(questions, answers).score_percent == expected


def test_scoring_is_deterministic() -> None:
    questions = _questions(2, 0, 1, 1)

    results = {score(questions, [2, 0, 0, 1]) for _ in range(5)}

    assert len(results) == 1


def test_wrong_length_has_no_index() -> None:
    with pytest.raises(InvalidAnswersError) as exc_info:
        validate_answers(_questions(0, 1), [0])

    assert exc_info.value.reason == "wrong_length"
    assert exc_info.value.index is None


@pytest.mark.parametrize(
    ("answers", "reason", "index"),
    [
        ([0, "1"], "not_integer", 1),
        ([True, 0], "not_integer", 0),
        ([0, -1], "unanswered", 1),
        ([3, 0], "out_of_range", 0),
    ],
)
def test_invalid_answers_report_reason_and_index(
    answers: list[object], reason: str, index: int
) -> None:
    with pytest.raises(InvalidAnswersError) as exc_info:
        validate_answers(_questions(0, 1), answers)

    assert exc_info.value.reason == reason
    assert exc_info.value.index == index
    assert exc_info.value.details == {"reason": reason, "index": index}


def test_answers_must_be_a_list() -> None:
    with pytest.raises(InvalidAnswersError) as exc_info:
        validate_answers(_questions(0), "0")

    assert exc_info.value.reason == "not_a_list"


def test_question_without_options_skips_range_check() -> None:
    legacy = [QuizQuestion(text="Free", options=(), correct_index=5)]

    assert validate_answers(legacy, [5]) == [5]
    assert score(legacy, [5]).score_percent == 100
