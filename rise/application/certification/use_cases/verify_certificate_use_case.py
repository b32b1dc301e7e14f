"""Use case behind the public certificate verification link."""

from rise.application.certification.protocols import CertificateRepositoryProtocol
from rise.application.certification.services.certificate_display_service import (
    CertificateDisplayService,
)
from rise.application.certification.use_cases.dtos import CertificateVerification
from rise.domain.common.value_objects import CertificateId, Language
from rise.exceptions import CertificateNotFoundError


class VerifyCertificateUseCase:
    def __init__(
        self,
        certificate_repository: CertificateRepositoryProtocol,
        display_service: CertificateDisplayService,
        default_language: str,
    ) -> None:
        self.certificate_repository = certificate_repository
        self.display_service = display_service
        self.default_language = Language(default_language)

    def verify(self, certificate_id: int) -> CertificateVerification:
        """
        Look up a certificate by its public id.

        Raises:
            CertificateNotFoundError: If no certificate has this id
        """
        if certificate_id <= 0:
            raise CertificateNotFoundError(certificate_id)
        certificate = self.certificate_repository.find_by_id(CertificateId(certificate_id))
        if certificate is None:
            raise CertificateNotFoundError(certificate_id)

        return CertificateVerification(
            certificate_id=certificate.id.value,
            course_id=certificate.course_id.value,
            student_name=self.display_service.student_name(certificate),
            course_title=self.display_service.course_title(certificate, self.default_language),
            issued_at=certificate.issued_at,
        )
