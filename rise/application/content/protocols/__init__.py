from .course_content_repository import CourseContentRepositoryProtocol

__all__ = ["CourseContentRepositoryProtocol"]
