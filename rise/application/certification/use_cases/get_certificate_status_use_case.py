"""Use case for the certificate panel shown next to a course."""

from rise.application.certification.protocols import CertificateRepositoryProtocol
from rise.application.certification.use_cases.dtos import CertificateStatus
from rise.application.certification.use_cases.evaluate_eligibility_use_case import (
    EvaluateEligibilityUseCase,
)
from rise.domain.common.value_objects import CourseId, UserId


class GetCertificateStatusUseCase:
    def __init__(
        self,
        certificate_repository: CertificateRepositoryProtocol,
        eligibility_use_case: EvaluateEligibilityUseCase,
        api_prefix: str,
    ) -> None:
        self.certificate_repository = certificate_repository
        self.eligibility_use_case = eligibility_use_case
        self.api_prefix = api_prefix

    def get_status(self, user_id: int, course_id: str) -> CertificateStatus:
        """Eligibility figures plus the issued certificate and its links, if any."""
        eligibility = self.eligibility_use_case.evaluate(user_id, course_id)
        certificate = self.certificate_repository.find_by_user_and_course(
            UserId(user_id), CourseId(course_id)
        )
        if certificate is None:
            return CertificateStatus(
                course_id=course_id,
                eligibility=eligibility,
                certificate=None,
                pdf_url=None,
                verify_url=None,
            )
        return CertificateStatus(
            course_id=course_id,
            eligibility=eligibility,
            certificate=certificate,
            pdf_url=f"{self.api_prefix}/certificates/{course_id}/pdf",
            verify_url=f"{self.api_prefix}{certificate.verification_path()}",
        )
