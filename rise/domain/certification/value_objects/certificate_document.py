"""Data handed to the document renderer."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CertificateDocument:
    """Display strings for one certificate, assembled at render time."""

    certificate_id: int
    student_name: str
    course_title: str
    issued_at: datetime
    verification_url: str
    organization_name: str


@dataclass(frozen=True)
class RenderedCertificate:
    """Renderer output: the printable artifact and its media type."""

    content: bytes
    media_type: str
