"""Protocol for Certificate repository."""

from datetime import datetime
from typing import Protocol

from rise.domain.certification.entities import Certificate
from rise.domain.common.value_objects import CertificateId, CourseId, UserId


class CertificateRepositoryProtocol(Protocol):
    """Interface for certificate persistence."""

    def find_by_user_and_course(
        self, user_id: UserId, course_id: CourseId
    ) -> Certificate | None: ...

    def find_by_id(self, certificate_id: CertificateId) -> Certificate | None: ...

    def find_by_user(self, user_id: UserId) -> list[Certificate]: ...

    def insert_if_absent(self, user_id: UserId, course_id: CourseId, issued_at: datetime) -> bool: ...
