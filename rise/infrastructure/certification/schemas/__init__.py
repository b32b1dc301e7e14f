from .certificate_schemas import (
    Certificate,
    CertificateClaimRequest,
    CertificateClaimResponse,
    CertificateListItem,
    CertificatesListResponse,
    CertificateStatusResponse,
    CertificateVerificationResponse,
    EligibilityResponse,
)

__all__ = [
    "Certificate",
    "CertificateClaimRequest",
    "CertificateClaimResponse",
    "CertificateListItem",
    "CertificateStatusResponse",
    "CertificateVerificationResponse",
    "CertificatesListResponse",
    "EligibilityResponse",
]
