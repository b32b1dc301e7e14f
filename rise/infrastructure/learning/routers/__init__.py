from .exams import router as exams_router
from .progress import router as progress_router

__all__ = ["exams_router", "progress_router"]
