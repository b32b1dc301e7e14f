from .course_content_repository import CourseContentRepository

__all__ = ["CourseContentRepository"]
