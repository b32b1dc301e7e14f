"""Mapper for Certificate ORM ↔ Domain conversion."""

from rise.domain.certification.entities import Certificate
from rise.domain.common.value_objects import CertificateId, CourseId, UserId
from rise.models import Certificate as CertificateORM


class CertificateMapper:
    """Mapper for Certificate ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: CertificateORM) -> Certificate:
        """Convert ORM model to domain entity."""
        return Certificate.create_with_id(
            id=CertificateId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            course_id=CourseId(orm_model.course_id),
            issued_at=orm_model.issued_at,
        )
