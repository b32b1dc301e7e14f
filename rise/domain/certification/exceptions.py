"""Certification module domain exceptions."""

from rise.domain.certification.value_objects.eligibility import Eligibility
from rise.domain.common.exceptions import BusinessRuleViolationError


class NotEligibleError(BusinessRuleViolationError):
    """Raised when a certificate is claimed before the course is finished."""

    def __init__(self, course_id: str, eligibility: Eligibility) -> None:
        super().__init__("certificate_requires_eligibility", "Not eligible yet")
        self.course_id = course_id
        self.eligibility = eligibility
        self.details = {"course_id": course_id, **eligibility.to_dict()}
