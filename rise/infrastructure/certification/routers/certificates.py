"""API routes for course certificates."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from sqlalchemy.exc import OperationalError

from rise.application.certification.use_cases.claim_certificate_use_case import (
    ClaimCertificateUseCase,
)
from rise.application.certification.use_cases.evaluate_eligibility_use_case import (
    EvaluateEligibilityUseCase,
)
from rise.application.certification.use_cases.get_certificate_status_use_case import (
    GetCertificateStatusUseCase,
)
from rise.application.certification.use_cases.list_certificates_use_case import (
    ListCertificatesUseCase,
)
from rise.application.certification.use_cases.render_certificate_use_case import (
    RenderCertificateUseCase,
)
from rise.application.certification.use_cases.verify_certificate_use_case import (
    VerifyCertificateUseCase,
)
from rise.config import get_settings
from rise.core import container
from rise.domain.certification.entities import Certificate as CertificateEntity
from rise.domain.common.exceptions import DomainError
from rise.exceptions import RiseError
from rise.infrastructure.certification.schemas import (
    Certificate,
    CertificateClaimRequest,
    CertificateClaimResponse,
    CertificateListItem,
    CertificatesListResponse,
    CertificateStatusResponse,
    CertificateVerificationResponse,
    EligibilityResponse,
)
from rise.infrastructure.common.di import inject_use_case
from rise.infrastructure.common.rate_limit import limiter
from rise.infrastructure.identity.dependencies import CurrentPrincipal

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(prefix="/certificates", tags=["certificates"])


def _to_schema(certificate: CertificateEntity) -> Certificate:
    return Certificate(
        id=certificate.id.value,
        user_id=certificate.user_id.value,
        course_id=certificate.course_id.value,
        issued_at=certificate.issued_at,
    )


@router.get("", response_model=CertificatesListResponse)
def list_certificates(
    principal: CurrentPrincipal,
    use_case: ListCertificatesUseCase = Depends(
        inject_use_case(container.list_certificates_use_case)
    ),
) -> CertificatesListResponse:
    """List the current learner's certificates, newest first."""
    try:
        listings = use_case.list_certificates(principal.user_id.value)
        return CertificatesListResponse(
            certificates=[
                CertificateListItem(
                    **_to_schema(listing.certificate).model_dump(),
                    course_title_en=listing.course_title_en,
                    course_title_ti=listing.course_title_ti,
                )
                for listing in listings
            ]
        )
    except (RiseError, DomainError, OperationalError):
        raise
    except Exception as e:
        logger.error(f"Failed to list certificates: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("/claim", response_model=CertificateClaimResponse, status_code=status.HTTP_200_OK)
@limiter.limit(settings.CERTIFICATE_CLAIM_RATE_LIMIT)  # type: ignore[misc]
def claim_certificate(
    request: Request,
    claim: CertificateClaimRequest,
    principal: CurrentPrincipal,
    use_case: ClaimCertificateUseCase = Depends(
        inject_use_case(container.claim_certificate_use_case)
    ),
) -> CertificateClaimResponse:
    """
    Claim the certificate for a finished course.

    Idempotent: a learner who already holds the certificate gets the same
    one back.

    Args:
        claim: Course to claim the certificate for
        use_case: ClaimCertificateUseCase injected via dependency container

    Returns:
        The issued or existing certificate

    Raises:
        HTTPException: 403 with the eligibility figures if the course is not finished
    """
    try:
        certificate = use_case.claim_or_get(principal.user_id.value, claim.course_id)
        return CertificateClaimResponse(
            success=True,
            message="Certificate issued",
            certificate=_to_schema(certificate),
        )
    except (RiseError, DomainError, OperationalError):
        raise
    except Exception as e:
        logger.error(f"Failed to claim certificate for {claim.course_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/verify/{certificate_id}", response_model=CertificateVerificationResponse)
def verify_certificate(
    certificate_id: int,
    use_case: VerifyCertificateUseCase = Depends(
        inject_use_case(container.verify_certificate_use_case)
    ),
) -> CertificateVerificationResponse:
    """
    Public verification of a certificate.

    No authentication: this is the target of the QR code printed on the
    certificate.
    """
    try:
        verification = use_case.verify(certificate_id)
        return CertificateVerificationResponse(
            certificate_id=verification.certificate_id,
            course_id=verification.course_id,
            student_name=verification.student_name,
            course_title=verification.course_title,
            issued_at=verification.issued_at,
        )
    except (RiseError, DomainError, OperationalError):
        raise
    except Exception as e:
        logger.error(f"Failed to verify certificate {certificate_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{course_id}/eligibility", response_model=EligibilityResponse)
def get_eligibility(
    course_id: str,
    principal: CurrentPrincipal,
    use_case: EvaluateEligibilityUseCase = Depends(
        inject_use_case(container.evaluate_eligibility_use_case)
    ),
) -> EligibilityResponse:
    """Get lesson completion and exam figures for a course."""
    try:
        eligibility = use_case.evaluate(principal.user_id.value, course_id)
        return EligibilityResponse(course_id=course_id, **eligibility.to_dict())
    except (RiseError, DomainError, OperationalError):
        raise
    except Exception as e:
        logger.error(f"Failed to evaluate eligibility for {course_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{course_id}/status", response_model=CertificateStatusResponse)
def get_certificate_status(
    course_id: str,
    principal: CurrentPrincipal,
    use_case: GetCertificateStatusUseCase = Depends(
        inject_use_case(container.get_certificate_status_use_case)
    ),
) -> CertificateStatusResponse:
    """Get eligibility plus the issued certificate and its links, if any."""
    try:
        result = use_case.get_status(principal.user_id.value, course_id)
        certificate = result.certificate
        return CertificateStatusResponse(
            course_id=course_id,
            **result.eligibility.to_dict(),
            issued=certificate is not None,
            certificate_id=certificate.id.value if certificate else None,
            issued_at=certificate.issued_at if certificate else None,
            pdf_url=result.pdf_url,
            verify_url=result.verify_url,
        )
    except (RiseError, DomainError, OperationalError):
        raise
    except Exception as e:
        logger.error(f"Failed to read certificate status for {course_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get(
    "/{course_id}/pdf",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
def download_certificate_pdf(
    course_id: str,
    principal: CurrentPrincipal,
    language: str | None = Query(None, max_length=35),
    use_case: RenderCertificateUseCase = Depends(
        inject_use_case(container.render_certificate_use_case)
    ),
) -> Response:
    """
    Download the certificate as a PDF.

    Issues the certificate first if the learner is eligible and has not
    claimed it yet.
    """
    try:
        rendered = use_case.render(principal.user_id.value, course_id, language)
        return Response(
            content=rendered.content,
            media_type=rendered.media_type,
            headers={
                "Content-Disposition": f'attachment; filename="certificate-{course_id}.pdf"'
            },
        )
    except (RiseError, DomainError, OperationalError):
        raise
    except Exception as e:
        logger.error(f"Failed to render certificate for {course_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
