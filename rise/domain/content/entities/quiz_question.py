"""Multiple-choice question shared by lesson quizzes and course exams."""

from dataclasses import dataclass
from typing import Any

from rise.domain.common.exceptions import ValidationError
from rise.domain.common.value_object import ValueObject

MIN_OPTIONS = 2


@dataclass(frozen=True)
class QuizQuestion(ValueObject):
    """
    One question with ordered answer options.

    Business Rules:
    - When options are given there must be at least MIN_OPTIONS of them
    - correct_index points into the options list
    - An empty options list is tolerated for legacy content; such a question
      accepts any non-negative answer and is scored by index equality only
    """

    text: str
    options: tuple[str, ...]
    correct_index: int | None

    def __post_init__(self) -> None:
        if not self.options:
            return
        if len(self.options) < MIN_OPTIONS:
            raise ValidationError(
                f"A question needs at least {MIN_OPTIONS} options",
                field="options",
                value=len(self.options),
            )
        if self.correct_index is None or not 0 <= self.correct_index < len(self.options):
            raise ValidationError(
                "Correct index must point at one of the options",
                field="correct_index",
                value=self.correct_index,
            )

    @property
    def option_count(self) -> int:
        return len(self.options)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "QuizQuestion":
        """Build a question from its stored JSON shape."""
        correct_index = data.get("correctIndex", data.get("correct_index"))
        if isinstance(correct_index, bool) or not isinstance(correct_index, int):
            correct_index = None
        return cls(
            text=str(data.get("text") or ""),
            options=tuple(str(option) for option in data.get("options") or ()),
            correct_index=correct_index,
        )
