"""Tests for exam API endpoints."""

from collections.abc import Callable

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from rise import models
from tests.exam_data import SAMPLE_QUESTIONS_EN, SAMPLE_QUESTIONS_TI


class TestGetExam:
    """Test suite for GET /exams/:course_id endpoint."""

    def test_questions_are_served_without_answers(
        self,
        client: TestClient,
        make_course: Callable[..., models.Course],
        make_exam: Callable[..., models.ExamDefinition],
    ) -> None:
        make_course()
        make_exam()

        response = client.get("/api/v1/exams/foundation")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["language"] == "en"
        assert data["pass_score"] == 70
        assert len(data["questions"]) == 3
        first = data["questions"][0]
        assert first == {"index": 0, "text": "What is 1 + 1?", "options": ["2", "3", "4"]}
        assert data["latest_attempt"]["attempted"] is False

    def test_requested_language_is_served(
        self,
        client: TestClient,
        make_course: Callable[..., models.Course],
        make_exam: Callable[..., models.ExamDefinition],
    ) -> None:
        make_course()
        make_exam(question_sets={"en": SAMPLE_QUESTIONS_EN, "ti": SAMPLE_QUESTIONS_TI})

        data = client.get("/api/v1/exams/foundation", params={"language": "ti"}).json()

        assert data["language"] == "ti"
        assert data["questions"][1]["text"] == SAMPLE_QUESTIONS_TI[1]["text"]

    def test_unknown_language_falls_back_to_default(
        self,
        client: TestClient,
        make_course: Callable[..., models.Course],
        make_exam: Callable[..., models.ExamDefinition],
    ) -> None:
        make_course()
        make_exam()

        data = client.get("/api/v1/exams/foundation", params={"language": "ti"}).json()

        assert data["language"] == "en"
        assert data["questions"][0]["text"] == SAMPLE_QUESTIONS_EN[0]["text"]

    def test_missing_exam_returns_404(self, client: TestClient) -> None:
        response = client.get("/api/v1/exams/foundation")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestSubmitExam:
    """Test suite for POST /exams/:course_id/submit endpoint."""

    def test_score_is_rounded_half_up(
        self,
        client: TestClient,
        make_course: Callable[..., models.Course],
        make_exam: Callable[..., models.ExamDefinition],
    ) -> None:
        """Two of three correct is 66.67 percent, stored as 67."""
        make_course()
        make_exam()

        response = client.post("/api/v1/exams/foundation/submit", json={"answers": [0, 1, 1]})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["score"] == 67
        assert data["correct_count"] == 2
        assert data["question_count"] == 3
        assert data["passed"] is False
        assert data["pass_score"] == 70
        assert data["language"] == "en"

    def test_scoring_is_deterministic(
        self,
        client: TestClient,
        make_course: Callable[..., models.Course],
        make_exam: Callable[..., models.ExamDefinition],
    ) -> None:
        make_course()
        make_exam()

        scores = {
            client.post("/api/v1/exams/foundation/submit", json={"answers": [0, 1, 1]}).json()[
                "score"
            ]
            for _ in range(3)
        }

        assert scores == {67}

    def test_score_equal_to_pass_score_passes(
        self,
        client: TestClient,
        make_course: Callable[..., models.Course],
        make_exam: Callable[..., models.ExamDefinition],
    ) -> None:
        make_course()
        make_exam(pass_score=67)

        data = client.post("/api/v1/exams/foundation/submit", json={"answers": [0, 1, 1]}).json()

        assert data["score"] == 67
        assert data["passed"] is True

    def test_new_submission_replaces_latest_attempt(
        self,
        client: TestClient,
        db_session: Session,
        make_course: Callable[..., models.Course],
        make_exam: Callable[..., models.ExamDefinition],
    ) -> None:
        make_course()
        make_exam()
        client.post("/api/v1/exams/foundation/submit", json={"answers": [0, 1, 0]})

        client.post("/api/v1/exams/foundation/submit", json={"answers": [1, 0, 1]})

        attempts = db_session.query(models.ExamAttempt).all()
        assert len(attempts) == 1
        assert attempts[0].score == 0
        assert attempts[0].passed is False

    def test_questions_follow_requested_language(
        self,
        client: TestClient,
        make_course: Callable[..., models.Course],
        make_exam: Callable[..., models.ExamDefinition],
    ) -> None:
        make_course()
        make_exam(question_sets={"en": SAMPLE_QUESTIONS_EN, "ti": SAMPLE_QUESTIONS_TI})

        data = client.post(
            "/api/v1/exams/foundation/submit", json={"answers": [0, 1, 0], "language": "ti"}
        ).json()

        assert data["language"] == "ti"
        assert data["score"] == 100

    def test_regional_language_tag_without_questions_falls_back(
        self,
        client: TestClient,
        make_course: Callable[..., models.Course],
        make_exam: Callable[..., models.ExamDefinition],
    ) -> None:
        make_course()
        make_exam(question_sets={"en": SAMPLE_QUESTIONS_EN, "ti": SAMPLE_QUESTIONS_TI})

        response = client.post(
            "/api/v1/exams/foundation/submit", json={"answers": [0, 1, 0], "language": "pt-BR"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["language"] == "en"
        assert response.json()["score"] == 100

    def test_regional_language_tag_uses_primary_subtag(
        self,
        client: TestClient,
        make_course: Callable[..., models.Course],
        make_exam: Callable[..., models.ExamDefinition],
    ) -> None:
        make_course()
        make_exam(question_sets={"en": SAMPLE_QUESTIONS_EN, "ti": SAMPLE_QUESTIONS_TI})

        response = client.post(
            "/api/v1/exams/foundation/submit", json={"answers": [0, 1, 0], "language": "ti_ER"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["language"] == "ti"

    def test_blank_language_uses_default(
        self,
        client: TestClient,
        make_course: Callable[..., models.Course],
        make_exam: Callable[..., models.ExamDefinition],
    ) -> None:
        make_course()
        make_exam()

        response = client.get("/api/v1/exams/foundation", params={"language": "  "})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["language"] == "en"

    def test_wrong_answer_count_is_rejected(
        self,
        client: TestClient,
        db_session: Session,
        make_course: Callable[..., models.Course],
        make_exam: Callable[..., models.ExamDefinition],
    ) -> None:
        make_course()
        make_exam()

        response = client.post("/api/v1/exams/foundation/submit", json={"answers": [0, 1]})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        data = response.json()
        assert data["reason"] == "wrong_length"
        assert data["index"] is None
        assert db_session.query(models.ExamAttempt).count() == 0

    def test_unanswered_question_is_rejected(
        self,
        client: TestClient,
        make_course: Callable[..., models.Course],
        make_exam: Callable[..., models.ExamDefinition],
    ) -> None:
        make_course()
        make_exam()

        response = client.post("/api/v1/exams/foundation/submit", json={"answers": [0, -1, 0]})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["reason"] == "unanswered"
        assert response.json()["index"] == 1

    def test_out_of_range_answer_is_rejected(
        self,
        client: TestClient,
        make_course: Callable[..., models.Course],
        make_exam: Callable[..., models.ExamDefinition],
    ) -> None:
        make_course()
        make_exam()

        response = client.post("/api/v1/exams/foundation/submit", json={"answers": [0, 1, 3]})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["reason"] == "out_of_range"
        assert response.json()["index"] == 2

    def test_non_integer_answer_is_rejected(
        self,
        client: TestClient,
        make_course: Callable[..., models.Course],
        make_exam: Callable[..., models.ExamDefinition],
    ) -> None:
        make_course()
        make_exam()

        response = client.post(
            "/api/v1/exams/foundation/submit", json={"answers": [0, "1", 0]}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["reason"] == "not_integer"
        assert response.json()["index"] == 1

    def test_boolean_answer_is_rejected(
        self,
        client: TestClient,
        make_course: Callable[..., models.Course],
        make_exam: Callable[..., models.ExamDefinition],
    ) -> None:
        make_course()
        make_exam()

        response = client.post(
            "/api/v1/exams/foundation/submit", json={"answers": [True, 1, 0]}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["reason"] == "not_integer"
        assert response.json()["index"] == 0

    def test_missing_exam_returns_404(self, client: TestClient) -> None:
        response = client.post("/api/v1/exams/foundation/submit", json={"answers": [0]})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_empty_question_set_is_rejected(
        self,
        client: TestClient,
        make_course: Callable[..., models.Course],
        make_exam: Callable[..., models.ExamDefinition],
    ) -> None:
        make_course()
        make_exam(question_sets={"en": []})

        response = client.post("/api/v1/exams/foundation/submit", json={"answers": []})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["language"] == "en"


class TestExamStatus:
    """Test suite for GET /exams/:course_id/status endpoint."""

    def test_status_without_attempt(self, client: TestClient) -> None:
        response = client.get("/api/v1/exams/foundation/status")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "course_id": "foundation",
            "attempted": False,
            "score": None,
            "passed": False,
            "updated_at": None,
        }

    def test_status_reports_latest_attempt(
        self,
        client: TestClient,
        make_course: Callable[..., models.Course],
        make_exam: Callable[..., models.ExamDefinition],
    ) -> None:
        make_course()
        make_exam()
        client.post("/api/v1/exams/foundation/submit", json={"answers": [0, 1, 0]})

        data = client.get("/api/v1/exams/foundation/status").json()

        assert data["attempted"] is True
        assert data["score"] == 100
        assert data["passed"] is True
        assert data["updated_at"] is not None
