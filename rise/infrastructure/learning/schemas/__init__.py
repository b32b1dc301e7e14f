from .exam_schemas import (
    ExamQuestion,
    ExamResultResponse,
    ExamStatusResponse,
    ExamSubmitRequest,
    LearnerExamResponse,
)
from .progress_schemas import (
    CourseOverviewItem,
    CourseOverviewResponse,
    CourseProgressResponse,
    LessonProgressRecord,
    LessonProgressUpdateRequest,
    LessonProgressUpdateResponse,
)

__all__ = [
    "CourseOverviewItem",
    "CourseOverviewResponse",
    "CourseProgressResponse",
    "ExamQuestion",
    "ExamResultResponse",
    "ExamStatusResponse",
    "ExamSubmitRequest",
    "LearnerExamResponse",
    "LessonProgressRecord",
    "LessonProgressUpdateRequest",
    "LessonProgressUpdateResponse",
]
