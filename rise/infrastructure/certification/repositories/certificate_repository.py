"""Repository for Certificate domain entities."""

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.orm import Session

from rise.domain.certification.entities import Certificate
from rise.domain.common.value_objects import CertificateId, CourseId, UserId
from rise.infrastructure.certification.mappers.certificate_mapper import CertificateMapper
from rise.infrastructure.common.persistence import atomic_write, upsert_statement
from rise.models import Certificate as CertificateORM


class CertificateRepository:
    """Repository for Certificate domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = CertificateMapper()

    def find_by_user_and_course(self, user_id: UserId, course_id: CourseId) -> Certificate | None:
        stmt = select(CertificateORM).where(
            CertificateORM.user_id == user_id.value,
            CertificateORM.course_id == course_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_id(self, certificate_id: CertificateId) -> Certificate | None:
        stmt = select(CertificateORM).where(CertificateORM.id == certificate_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_user(self, user_id: UserId) -> list[Certificate]:
        """
        Get all certificates of a learner.

        Returns:
            List of certificates ordered by issued_at DESC, newest first
        """
        stmt = (
            select(CertificateORM)
            .where(CertificateORM.user_id == user_id.value)
            .order_by(CertificateORM.issued_at.desc(), CertificateORM.id.desc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def insert_if_absent(self, user_id: UserId, course_id: CourseId, issued_at: datetime) -> bool:
        """
        Insert a certificate unless one already exists for (user, course).

        Relies on the uq_certificate_user_course constraint, so of several
        concurrent claims exactly one inserts.

        Returns:
            True if this call created the row, False if it already existed
        """
        stmt = (
            upsert_statement(self.db, CertificateORM)
            .values(user_id=user_id.value, course_id=course_id.value, issued_at=issued_at)
            .on_conflict_do_nothing(index_elements=["user_id", "course_id"])
        )
        with atomic_write(self.db, "insert_certificate"):
            result = self.db.execute(stmt)
        return result.rowcount > 0
