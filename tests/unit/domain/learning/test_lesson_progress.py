from datetime import UTC, datetime, timedelta

import pytest

from rise.domain.common.exceptions import ValidationError
from rise.domain.common.value_objects import CourseId, LessonIndex, UserId
from rise.domain.learning.entities import LessonProgress, ProgressUpdate

T0 = datetime(2026, 1, 1, 9, 0, tzinfo=UTC)
T1 = T0 + timedelta(minutes=5)


def _blank() -> LessonProgress:
    return LessonProgress.blank(UserId(1), CourseId("foundation"), LessonIndex(0))


def test_merge_replaces_only_supplied_fields() -> None:
    previous = _blank().merge(ProgressUpdate(completed=True, quiz_score=60), T0)

    merged = previous.merge(ProgressUpdate(quiz_score=90), T1)

    assert merged.completed is True
    assert merged.quiz_score == 90
    assert merged.reflection_text is None
    assert merged.updated_at == T1


def test_merge_stamps_reflection_time_only_with_reflection() -> None:
    with_reflection = _blank().merge(ProgressUpdate(reflection_text="Notes"), T0)

    later = with_reflection.merge(ProgressUpdate(completed=True), T1)

    assert with_reflection.reflection_updated_at == T0
    assert later.reflection_updated_at == T0
    assert later.updated_at == T1


def test_merge_can_clear_completion() -> None:
    done = _blank().merge(ProgressUpdate(completed=True), T0)

    assert done.merge(ProgressUpdate(completed=False), T1).completed is False


def test_apply_without_previous_starts_from_defaults() -> None:
    progress = LessonProgress.apply(
        None,
        ProgressUpdate(quiz_score=10),
        user_id=UserId(1),
        course_id=CourseId("foundation"),
        lesson_index=LessonIndex(2),
        now=T0,
    )

    assert progress.completed is False
    assert progress.quiz_score == 10
    assert progress.lesson_index == LessonIndex(2)
    assert progress.reflection_updated_at is None


def test_has_reflection_ignores_whitespace() -> None:
    assert _blank().merge(ProgressUpdate(reflection_text="  \n"), T0).has_reflection is False
    assert _blank().merge(ProgressUpdate(reflection_text=" ok "), T0).has_reflection is True


def test_supplied_fields_treats_empty_reflection_as_supplied() -> None:
    update = ProgressUpdate(completed=False, reflection_text="")

    assert update.supplied_fields() == ["completed", "reflection_text"]
    assert update.supplies_reflection is True


@pytest.mark.parametrize("score", [-1, 101, True])
def test_update_rejects_invalid_quiz_score(score: int) -> None:
    with pytest.raises(ValidationError) as exc_info:
        ProgressUpdate(quiz_score=score)

    assert exc_info.value.field == "quiz_score"


def test_update_accepts_quiz_score_bounds() -> None:
    assert ProgressUpdate(quiz_score=0).quiz_score == 0
    assert ProgressUpdate(quiz_score=100).quiz_score == 100


def test_update_rejects_long_reflection() -> None:
    with pytest.raises(ValidationError):
        ProgressUpdate(reflection_text="x" * 2001)


def test_lesson_index_must_be_non_negative() -> None:
    with pytest.raises(ValidationError):
        LessonIndex(-1)
