"""FastAPI application for the Rise learning backend."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import OperationalError
from starlette import status

from rise.config import configure_logging, get_settings
from rise.database import dispose_engine, initialize_database
from rise.domain.certification.exceptions import NotEligibleError
from rise.domain.common.exceptions import DomainError
from rise.exceptions import RiseError
from rise.infrastructure.certification.routers import certificates_router
from rise.infrastructure.common.rate_limit import limiter
from rise.infrastructure.learning.routers import exams_router, progress_router

settings = get_settings()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    logger.info("application_started", environment=settings.ENVIRONMENT)
    yield
    dispose_engine()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    docs_url=f"{settings.API_V1_PREFIX}/docs",
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RiseError)
async def rise_error_handler(_request: Request, exc: RiseError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("request_failed", status_code=exc.status_code, error=exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(DomainError)
async def domain_error_handler(_request: Request, exc: DomainError) -> JSONResponse:
    """Invalid input: validation failures, unscorable answers, empty exams."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": exc.message, **jsonable_encoder(exc.details)},
    )


@app.exception_handler(NotEligibleError)
async def not_eligible_handler(_request: Request, exc: NotEligibleError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={
            "detail": exc.message,
            "course_id": exc.course_id,
            "eligibility": exc.eligibility.to_dict(),
        },
    )


@app.exception_handler(OperationalError)
async def store_unavailable_handler(_request: Request, exc: OperationalError) -> JSONResponse:
    logger.error("store_unavailable", error=str(exc.orig))
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Service temporarily unavailable"},
    )


app.include_router(progress_router, prefix=settings.API_V1_PREFIX)
app.include_router(exams_router, prefix=settings.API_V1_PREFIX)
app.include_router(certificates_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
async def root() -> dict[str, str]:
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}


@app.get("/health")
@app.get(f"{settings.API_V1_PREFIX}/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@app.get(f"{settings.API_V1_PREFIX}/")
async def api_root() -> dict[str, str]:
    return {
        "message": f"{settings.PROJECT_NAME} v1",
        "version": settings.VERSION,
        "docs": f"{settings.API_V1_PREFIX}/docs",
    }
