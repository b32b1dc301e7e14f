"""Use case for listing a learner's certificates."""

from rise.application.certification.protocols import CertificateRepositoryProtocol
from rise.application.certification.use_cases.dtos import CertificateListing
from rise.application.content.protocols import CourseContentRepositoryProtocol
from rise.domain.common.value_objects import UserId


class ListCertificatesUseCase:
    def __init__(
        self,
        certificate_repository: CertificateRepositoryProtocol,
        content_repository: CourseContentRepositoryProtocol,
    ) -> None:
        self.certificate_repository = certificate_repository
        self.content_repository = content_repository

    def list_certificates(self, user_id: int) -> list[CertificateListing]:
        """Certificates of the learner, newest first, with both course titles."""
        listings = []
        for certificate in self.certificate_repository.find_by_user(UserId(user_id)):
            course = self.content_repository.find_course(certificate.course_id)
            listings.append(
                CertificateListing(
                    certificate=certificate,
                    course_title_en=course.title_en if course else certificate.course_id.value,
                    course_title_ti=course.title_ti if course else certificate.course_id.value,
                )
            )
        return listings
