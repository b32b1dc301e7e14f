from .certificates import router as certificates_router

__all__ = ["certificates_router"]
