"""Use case for producing the printable certificate."""

import structlog

from rise.application.certification.protocols import CertificateRendererProtocol
from rise.application.certification.services.certificate_display_service import (
    CertificateDisplayService,
)
from rise.application.certification.use_cases.claim_certificate_use_case import (
    ClaimCertificateUseCase,
)
from rise.domain.certification.value_objects import CertificateDocument, RenderedCertificate
from rise.domain.common.value_objects import Language

logger = structlog.get_logger(__name__)


class RenderCertificateUseCase:
    def __init__(
        self,
        claim_use_case: ClaimCertificateUseCase,
        display_service: CertificateDisplayService,
        renderer: CertificateRendererProtocol,
        public_base_url: str,
        api_prefix: str,
        organization_name: str,
        default_language: str,
    ) -> None:
        self.claim_use_case = claim_use_case
        self.display_service = display_service
        self.renderer = renderer
        self.public_base_url = public_base_url
        self.api_prefix = api_prefix
        self.organization_name = organization_name
        self.default_language = Language(default_language)

    def render(
        self, user_id: int, course_id: str, language: str | None = None
    ) -> RenderedCertificate:
        """
        Claim (or fetch) the certificate and render it.

        Raises:
            NotEligibleError: If no certificate exists and the learner is not eligible
            UserNotFoundError: If the learner is missing from the user directory
        """
        title_language = Language.requested(language, self.default_language)
        certificate = self.claim_use_case.claim_or_get(user_id, course_id)
        document = CertificateDocument(
            certificate_id=certificate.id.value,
            student_name=self.display_service.student_name(certificate),
            course_title=self.display_service.course_title(certificate, title_language),
            issued_at=certificate.issued_at,
            verification_url=(
                f"{self.public_base_url}{self.api_prefix}{certificate.verification_path()}"
            ),
            organization_name=self.organization_name,
        )
        rendered = self.renderer.render(document)
        logger.info(
            "certificate_rendered",
            user_id=user_id,
            course_id=course_id,
            certificate_id=certificate.id.value,
            size=len(rendered.content),
        )
        return rendered
