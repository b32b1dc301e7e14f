"""Pytest configuration and fixtures."""

import os

os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key-for-signing-tokens"
os.environ["RATE_LIMIT_ENABLED"] = "false"

from collections.abc import Callable, Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from rise import models  # noqa: E402
from rise.database import Base, get_db  # noqa: E402
from rise.domain.common.value_objects import UserId  # noqa: E402
from rise.domain.identity import Principal  # noqa: E402
from rise.infrastructure.identity.dependencies import get_current_principal  # noqa: E402
from rise.main import app  # noqa: E402
from tests.exam_data import CORRECT_ANSWERS, SAMPLE_QUESTIONS_EN  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Single shared connection: TestClient runs sync endpoints in worker threads
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    """Create the learner the default client acts as."""
    user = models.User(id=1, name="Test Learner", email="learner@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def other_user(db_session: Session) -> models.User:
    user = models.User(id=2, name="Other Learner", email="other@example.com")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def anonymous_client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Test client with the database override only; auth goes through bearer tokens."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def login_as() -> Callable[[int], None]:
    """Switch the principal every authenticated endpoint sees."""

    def _login_as(user_id: int) -> None:
        app.dependency_overrides[get_current_principal] = lambda: Principal(
            user_id=UserId(user_id)
        )

    return _login_as


@pytest.fixture
def client(
    anonymous_client: TestClient,
    test_user: models.User,
    login_as: Callable[[int], None],
) -> TestClient:
    """Create a test client authenticated as test_user."""
    login_as(test_user.id)
    return anonymous_client


@pytest.fixture
def make_course(db_session: Session) -> Callable[..., models.Course]:
    """Factory for a course with a number of lessons."""

    def _make_course(
        course_id: str = "foundation",
        lessons: int = 3,
        title_en: str = "Foundation",
        title_ti: str = "መሰረት",
        sort_order: int = 1,
    ) -> models.Course:
        course = models.Course(
            id=course_id,
            title_en=title_en,
            title_ti=title_ti,
            description_en=f"{title_en} course",
            sort_order=sort_order,
        )
        course.lessons = [
            models.Lesson(
                lesson_index=index,
                title_en=f"Lesson {index + 1}",
                title_ti=f"ትምህርቲ {index + 1}",
                quiz=[],
            )
            for index in range(lessons)
        ]
        db_session.add(course)
        db_session.commit()
        db_session.refresh(course)
        return course

    return _make_course


@pytest.fixture
def make_exam(db_session: Session) -> Callable[..., models.ExamDefinition]:
    """Factory for an exam definition with per-language question sets."""

    def _make_exam(
        course_id: str = "foundation",
        pass_score: int = 70,
        question_sets: dict[str, list[dict[str, Any]]] | None = None,
    ) -> models.ExamDefinition:
        if question_sets is None:
            question_sets = {"en": SAMPLE_QUESTIONS_EN}
        exam = models.ExamDefinition(
            course_id=course_id,
            pass_score=pass_score,
            question_sets=[
                models.ExamQuestionSet(language=language, questions=questions)
                for language, questions in question_sets.items()
            ],
        )
        db_session.add(exam)
        db_session.commit()
        db_session.refresh(exam)
        return exam

    return _make_exam


@pytest.fixture
def complete_course(client: TestClient) -> Callable[..., None]:
    """Finish every lesson and pass the exam through the API."""

    def _complete_course(course_id: str = "foundation", lessons: int = 3) -> None:
        for index in range(lessons):
            response = client.put(
                f"/api/v1/progress/{course_id}/lessons/{index}", json={"completed": True}
            )
            assert response.status_code == 200
        response = client.post(
            f"/api/v1/exams/{course_id}/submit", json={"answers": CORRECT_ANSWERS}
        )
        assert response.status_code == 200
        assert response.json()["passed"] is True

    return _complete_course
