"""Common value objects shared across all domain modules."""

from .ids import CertificateId, CourseId, LessonIndex, UserId
from .language import Language

__all__ = [
    "CertificateId",
    "CourseId",
    "Language",
    "LessonIndex",
    "UserId",
]
