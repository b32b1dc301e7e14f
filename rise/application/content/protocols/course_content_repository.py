"""Protocol for the read-only content store."""

from typing import Protocol

from rise.domain.common.value_objects import CourseId
from rise.domain.content.entities import Course, ExamDefinition


class CourseContentRepositoryProtocol(Protocol):
    """Interface for course, lesson and exam definition reads."""

    def find_course(self, course_id: CourseId) -> Course | None: ...

    def list_courses(self) -> list[Course]: ...

    def count_lessons(self, course_id: CourseId) -> int: ...

    def find_exam_definition(self, course_id: CourseId) -> ExamDefinition | None: ...
