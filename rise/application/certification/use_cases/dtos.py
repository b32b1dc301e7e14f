"""Result objects returned by certification use cases."""

from dataclasses import dataclass
from datetime import datetime

from rise.domain.certification.entities import Certificate
from rise.domain.certification.value_objects import Eligibility


@dataclass(frozen=True)
class CertificateStatus:
    course_id: str
    eligibility: Eligibility
    certificate: Certificate | None
    pdf_url: str | None
    verify_url: str | None


@dataclass(frozen=True)
class CertificateListing:
    certificate: Certificate
    course_title_en: str
    course_title_ti: str


@dataclass(frozen=True)
class CertificateVerification:
    certificate_id: int
    course_id: str
    student_name: str
    course_title: str
    issued_at: datetime


@dataclass(frozen=True)
class CourseOverview:
    course_id: str
    eligibility: Eligibility
    has_certificate: bool
