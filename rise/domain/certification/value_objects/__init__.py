from .certificate_document import CertificateDocument, RenderedCertificate
from .eligibility import Eligibility

__all__ = ["CertificateDocument", "Eligibility", "RenderedCertificate"]
