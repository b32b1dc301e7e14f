"""Certificate entity: immutable proof of course completion."""

from dataclasses import dataclass
from datetime import datetime

from rise.domain.common.entity import Entity
from rise.domain.common.value_objects import CertificateId, CourseId, UserId


@dataclass
class Certificate(Entity[CertificateId]):
    """
    Completion certificate for one learner and one course.

    Business Rules:
    - At most one certificate exists per (user, course)
    - Created only when the learner is eligible
    - issued_at is fixed at creation; no re-issue, no revocation
    - Display strings (student name, course title) are not stored here
    """

    id: CertificateId
    user_id: UserId
    course_id: CourseId
    issued_at: datetime

    def verification_path(self) -> str:
        return f"/certificates/verify/{self.id.value}"

    @classmethod
    def create_with_id(
        cls,
        id: CertificateId,
        user_id: UserId,
        course_id: CourseId,
        issued_at: datetime,
    ) -> "Certificate":
        """Reconstitute a certificate from persistence."""
        return cls(id=id, user_id=user_id, course_id=course_id, issued_at=issued_at)
