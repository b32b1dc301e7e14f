"""Use case for claiming a completion certificate."""

from datetime import UTC, datetime

import structlog

from rise.application.certification.protocols import CertificateRepositoryProtocol
from rise.application.certification.use_cases.evaluate_eligibility_use_case import (
    EvaluateEligibilityUseCase,
)
from rise.domain.certification.entities import Certificate
from rise.domain.certification.exceptions import NotEligibleError
from rise.domain.common.value_objects import CourseId, UserId
from rise.exceptions import ServiceError

logger = structlog.get_logger(__name__)


class ClaimCertificateUseCase:
    def __init__(
        self,
        certificate_repository: CertificateRepositoryProtocol,
        eligibility_use_case: EvaluateEligibilityUseCase,
    ) -> None:
        self.certificate_repository = certificate_repository
        self.eligibility_use_case = eligibility_use_case

    def claim_or_get(self, user_id: int, course_id: str) -> Certificate:
        """
        Return the learner's certificate for a course, issuing it if needed.

        An existing certificate is returned without re-checking eligibility.
        Otherwise the certificate is inserted only if no row exists for the
        key, then the stored row is read back, so concurrent claims all end
        up with the same id and issued_at.

        Args:
            user_id: ID of the learner
            course_id: Course slug

        Returns:
            The canonical certificate

        Raises:
            NotEligibleError: If the learner has not finished the course
        """
        user_id_vo = UserId(user_id)
        course_id_vo = CourseId(course_id)

        existing = self.certificate_repository.find_by_user_and_course(user_id_vo, course_id_vo)
        if existing:
            return existing

        eligibility = self.eligibility_use_case.evaluate(user_id, course_id)
        if not eligibility.eligible:
            logger.info(
                "certificate_claim_rejected",
                user_id=user_id,
                course_id=course_id,
                lessons_remaining=eligibility.lessons_remaining,
                exam_passed=eligibility.exam_passed,
            )
            raise NotEligibleError(course_id, eligibility)

        inserted = self.certificate_repository.insert_if_absent(
            user_id_vo, course_id_vo, datetime.now(UTC)
        )
        certificate = self.certificate_repository.find_by_user_and_course(user_id_vo, course_id_vo)
        if certificate is None:
            raise ServiceError(f"Failed to create certificate for course '{course_id}'")

        if inserted:
            logger.info(
                "certificate_issued",
                user_id=user_id,
                course_id=course_id,
                certificate_id=certificate.id.value,
            )
        else:
            logger.info(
                "certificate_claim_race_resolved",
                user_id=user_id,
                course_id=course_id,
                certificate_id=certificate.id.value,
            )
        return certificate
