"""Custom exception hierarchy for the Rise application."""

from fastapi import HTTPException
from starlette import status


class RiseError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(RiseError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class CourseNotFoundError(NotFoundError):
    """Course not found in the content store."""

    def __init__(self, course_id: str) -> None:
        self.course_id = course_id
        super().__init__(f"Course '{course_id}' not found")


class ExamNotFoundError(NotFoundError):
    """No exam definition exists for a course."""

    def __init__(self, course_id: str) -> None:
        self.course_id = course_id
        super().__init__(f"Exam for course '{course_id}' not found")


class CertificateNotFoundError(NotFoundError):
    """Certificate not found error."""

    def __init__(self, certificate_id: int) -> None:
        self.certificate_id = certificate_id
        super().__init__(f"Certificate with id {certificate_id} not found")


class UserNotFoundError(NotFoundError):
    """User not found in the user directory."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"User with id {user_id} not found")


class ServiceError(RiseError):
    """Service layer error."""


class StoreUnavailableError(RiseError):
    """The persistent store could not be reached."""

    def __init__(self, message: str = "Service temporarily unavailable") -> None:
        super().__init__(message, status_code=503)


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
