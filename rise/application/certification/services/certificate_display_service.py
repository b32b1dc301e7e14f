"""Assembles the human-readable fields of a certificate at read time."""

from rise.application.certification.protocols import UserDirectoryProtocol
from rise.application.content.protocols import CourseContentRepositoryProtocol
from rise.domain.certification.entities import Certificate
from rise.domain.common.value_objects import Language
from rise.exceptions import UserNotFoundError

FALLBACK_STUDENT_NAME = "Student"


class CertificateDisplayService:
    """
    Looks up the student name and course title for a certificate.

    Names and titles are read fresh on every call so a corrected name shows
    up on certificates that were issued before the correction.
    """

    def __init__(
        self,
        content_repository: CourseContentRepositoryProtocol,
        user_directory: UserDirectoryProtocol,
    ) -> None:
        self.content_repository = content_repository
        self.user_directory = user_directory

    def student_name(self, certificate: Certificate) -> str:
        name = self.user_directory.find_display_name(certificate.user_id)
        if name is None:
            raise UserNotFoundError(certificate.user_id.value)
        return name.strip() or FALLBACK_STUDENT_NAME

    def course_title(self, certificate: Certificate, language: Language) -> str:
        course = self.content_repository.find_course(certificate.course_id)
        if course is None:
            return certificate.course_id.value
        return course.title_for(language)
