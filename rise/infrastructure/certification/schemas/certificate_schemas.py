"""Pydantic schemas for certificate request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field


class CertificateClaimRequest(BaseModel):
    """Schema for claiming a course certificate."""

    course_id: str = Field(..., min_length=1, max_length=64, description="Course slug")


class Certificate(BaseModel):
    """Schema for an issued certificate."""

    id: int
    user_id: int
    course_id: str
    issued_at: datetime


class EligibilityResponse(BaseModel):
    """Schema for a learner's eligibility in one course."""

    course_id: str
    total_lessons: int
    completed_lessons: int
    lessons_remaining: int
    exam_passed: bool
    exam_score: int | None
    eligible: bool


class CertificateStatusResponse(EligibilityResponse):
    """Eligibility plus the issued certificate, if any."""

    issued: bool
    certificate_id: int | None = None
    issued_at: datetime | None = None
    pdf_url: str | None = None
    verify_url: str | None = None


class CertificateClaimResponse(BaseModel):
    """Schema for certificate claim response."""

    success: bool = Field(..., description="Whether the claim was successful")
    message: str = Field(..., description="Response message")
    certificate: Certificate = Field(..., description="Issued or existing certificate")


class CertificateListItem(Certificate):
    course_title_en: str
    course_title_ti: str


class CertificatesListResponse(BaseModel):
    """Schema for list of certificates response."""

    certificates: list[CertificateListItem] = Field(..., description="Newest first")


class CertificateVerificationResponse(BaseModel):
    """Public view of a certificate."""

    valid: bool = True
    certificate_id: int
    course_id: str
    student_name: str
    course_title: str
    issued_at: datetime
