import re
from dataclasses import dataclass

from ..exceptions import ValidationError
from ..value_object import ValueObject

MAX_LANGUAGE_CODE_LENGTH = 8

_SUBTAG_SEPARATOR = re.compile(r"[-_]")


@dataclass(frozen=True)
class Language(ValueObject):
    """Lowercase language code such as ``en`` or ``ti``."""

    value: str

    def __post_init__(self) -> None:
        code = (self.value or "").strip()
        if not code or len(code) > MAX_LANGUAGE_CODE_LENGTH or not code.isalpha():
            raise ValidationError("Invalid language code", field="language", value=self.value)
        object.__setattr__(self, "value", code.lower())

    @classmethod
    def requested(cls, code: str | None, default: "Language") -> "Language":
        """
        Resolve a caller-supplied code, falling back to ``default``.

        Regional tags such as ``pt-BR`` or ``en_US`` are reduced to their
        primary subtag. Missing or unparseable codes resolve to ``default``.
        """
        primary = _SUBTAG_SEPARATOR.split((code or "").strip(), maxsplit=1)[0]
        try:
            return cls(primary)
        except ValidationError:
            return default

    def __str__(self) -> str:
        return self.value
