"""Claim flow against in-memory fakes, including a lost insert race."""

from datetime import UTC, datetime

import pytest

from rise.application.certification.use_cases.claim_certificate_use_case import (
    ClaimCertificateUseCase,
)
from rise.domain.certification.entities import Certificate
from rise.domain.certification.exceptions import NotEligibleError
from rise.domain.certification.value_objects import Eligibility
from rise.domain.common.value_objects import CertificateId, CourseId, UserId

WINNER_ISSUED_AT = datetime(2026, 5, 1, 8, 30, tzinfo=UTC)


class FakeEligibility:
    def __init__(self, eligibility: Eligibility) -> None:
        self.eligibility = eligibility
        self.calls = 0

    def evaluate(self, user_id: int, course_id: str) -> Eligibility:
        self.calls += 1
        return self.eligibility


class FakeCertificateRepository:
    """Stores certificates in a dict keyed by (user, course)."""

    def __init__(self) -> None:
        self.rows: dict[tuple[int, str], Certificate] = {}
        self.next_id = 1

    def _store(self, user_id: UserId, course_id: CourseId, issued_at: datetime) -> None:
        self.rows[(user_id.value, course_id.value)] = Certificate.create_with_id(
            id=CertificateId(self.next_id),
            user_id=user_id,
            course_id=course_id,
            issued_at=issued_at,
        )
        self.next_id += 1

    def find_by_user_and_course(self, user_id: UserId, course_id: CourseId) -> Certificate | None:
        return self.rows.get((user_id.value, course_id.value))

    def find_by_id(self, certificate_id: CertificateId) -> Certificate | None:
        return next((c for c in self.rows.values() if c.id == certificate_id), None)

    def find_by_user(self, user_id: UserId) -> list[Certificate]:
        return [c for c in self.rows.values() if c.user_id == user_id]

    def insert_if_absent(self, user_id: UserId, course_id: CourseId, issued_at: datetime) -> bool:
        if (user_id.value, course_id.value) in self.rows:
            return False
        self._store(user_id, course_id, issued_at)
        return True


class RacingCertificateRepository(FakeCertificateRepository):
    """Another claimer inserts between our existence check and our insert."""

    def insert_if_absent(self, user_id: UserId, course_id: CourseId, issued_at: datetime) -> bool:
        self._store(user_id, course_id, WINNER_ISSUED_AT)
        return super().insert_if_absent(user_id, course_id, issued_at)


ELIGIBLE = Eligibility(total_lessons=2, completed_lessons=2, exam_passed=True, exam_score=80)
NOT_ELIGIBLE = Eligibility(total_lessons=2, completed_lessons=1, exam_passed=False)


def test_claim_issues_once_and_returns_same_certificate() -> None:
    repository = FakeCertificateRepository()
    eligibility = FakeEligibility(ELIGIBLE)
    use_case = ClaimCertificateUseCase(repository, eligibility)  # type: ignore[arg-type]

    first = use_case.claim_or_get(1, "foundation")
    second = use_case.claim_or_get(1, "foundation")

    assert first.id == second.id
    assert first.issued_at == second.issued_at
    assert len(repository.rows) == 1
    # Existing certificates are returned without re-evaluating
    assert eligibility.calls == 1


def test_lost_race_converges_on_winner_row() -> None:
    repository = RacingCertificateRepository()
    use_case = ClaimCertificateUseCase(
        repository, FakeEligibility(ELIGIBLE)  # type: ignore[arg-type]
    )

    certificate = use_case.claim_or_get(1, "foundation")

    assert certificate.issued_at == WINNER_ISSUED_AT
    assert certificate.id == CertificateId(1)
    assert len(repository.rows) == 1


def test_not_eligible_carries_eligibility() -> None:
    repository = FakeCertificateRepository()
    use_case = ClaimCertificateUseCase(
        repository, FakeEligibility(NOT_ELIGIBLE)  # type: ignore[arg-type]
    )

    with pytest.raises(NotEligibleError) as exc_info:
        use_case.claim_or_get(1, "foundation")

    assert exc_info.value.eligibility == NOT_ELIGIBLE
    assert exc_info.value.details["lessons_remaining"] == 1
    assert repository.rows == {}
