"""
Pure exam scoring.

Exact-match multiple choice: one point per answer equal to the question's
correct index, percentage rounded half up.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from rise.domain.content.entities.quiz_question import QuizQuestion
from rise.domain.learning.exceptions import InvalidAnswersError


@dataclass(frozen=True)
class ExamScore:
    correct_count: int
    score_percent: int


def validate_answers(questions: Sequence[QuizQuestion], answers: object) -> list[int]:
    """
    Check an answer set against its questions before scoring.

    Args:
        questions: Non-empty question list
        answers: Submitted answers, one option index per question

    Returns:
        The answers as a list of ints

    Raises:
        InvalidAnswersError: With the offending index and a reason of
            ``not_a_list``, ``wrong_length``, ``not_integer``,
            ``unanswered`` or ``out_of_range``
    """
    if not isinstance(answers, list | tuple):
        raise InvalidAnswersError("not_a_list", "Invalid answers: answers must be a list")
    if len(answers) != len(questions):
        raise InvalidAnswersError(
            "wrong_length",
            f"Invalid answers: expected {len(questions)} answers, got {len(answers)}",
        )

    for i, (question, answer) in enumerate(zip(questions, answers, strict=True)):
        if isinstance(answer, bool) or not isinstance(answer, int):
            raise InvalidAnswersError(
                "not_integer", f"Invalid answers: answer #{i + 1} is not an integer", index=i
            )
        # Negative values are the client's "unanswered" sentinel
        if answer < 0:
            raise InvalidAnswersError(
                "unanswered", f"Invalid answers: answer #{i + 1} is missing", index=i
            )
        if question.options and answer >= question.option_count:
            raise InvalidAnswersError(
                "out_of_range", f"Invalid answers: answer #{i + 1} out of range", index=i
            )
    return list(answers)


def score(questions: Sequence[QuizQuestion], answers: Sequence[int]) -> ExamScore:
    """
    Score validated answers.

    ``questions`` must be non-empty and ``answers`` must already have passed
    ``validate_answers``.
    """
    correct = sum(
        1
        for question, answer in zip(questions, answers, strict=True)
        if question.correct_index is not None and answer == question.correct_index
    )
    total = len(questions)
    # round(correct / total * 100) with halves rounded up, in integer arithmetic
    percent = (correct * 200 + total) // (2 * total)
    return ExamScore(correct_count=correct, score_percent=percent)
