"""Use case for the dashboard overview across all courses."""

from rise.application.certification.protocols import CertificateRepositoryProtocol
from rise.application.certification.use_cases.dtos import CourseOverview
from rise.application.certification.use_cases.evaluate_eligibility_use_case import (
    EvaluateEligibilityUseCase,
)
from rise.application.content.protocols import CourseContentRepositoryProtocol
from rise.domain.common.value_objects import UserId


class GetCourseOverviewUseCase:
    def __init__(
        self,
        content_repository: CourseContentRepositoryProtocol,
        certificate_repository: CertificateRepositoryProtocol,
        eligibility_use_case: EvaluateEligibilityUseCase,
    ) -> None:
        self.content_repository = content_repository
        self.certificate_repository = certificate_repository
        self.eligibility_use_case = eligibility_use_case

    def get_overview(self, user_id: int) -> list[CourseOverview]:
        """Eligibility and certificate presence for every course, in catalog order."""
        issued = {
            certificate.course_id
            for certificate in self.certificate_repository.find_by_user(UserId(user_id))
        }
        return [
            CourseOverview(
                course_id=course.id.value,
                eligibility=self.eligibility_use_case.evaluate(user_id, course.id.value),
                has_certificate=course.id in issued,
            )
            for course in self.content_repository.list_courses()
        ]
