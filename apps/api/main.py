"""FastAPI application entrypoint for the booking backend."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.config import settings
from core.logging import setup_logging
from db.session import init_db
from domain.exceptions import (
    BookingError,
    NotFoundError,
    SlotConflictError,
    StaffUnavailableError,
)
from apps.api.routers import reports, reservations, staff


logger = logging.getLogger(__name__)


ERROR_STATUS = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    StaffUnavailableError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    SlotConflictError: status.HTTP_409_CONFLICT,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    setup_logging(settings)
    logger.info(f"Starting {settings.app_name}...")

    try:
        init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise

    yield

    logger.info(f"Shutting down {settings.app_name}...")


app = FastAPI(
    title=settings.app_name,
    description="Shift-aware booking backend",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BookingError)
async def booking_error_handler(request: Request, exc: BookingError) -> JSONResponse:
    """Translate booking failures into client-facing responses."""
    status_code = next(
        (code for error_type, code in ERROR_STATUS.items() if isinstance(exc, error_type)),
        status.HTTP_400_BAD_REQUEST,
    )
    logger.info(
        "Request rejected",
        extra={"path": request.url.path, "error": type(exc).__name__, "status_code": status_code},
    )
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


app.include_router(reservations.router, prefix=settings.api_prefix)
app.include_router(staff.router, prefix=settings.api_prefix)
app.include_router(reports.router, prefix=settings.api_prefix)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "app": settings.app_name,
        "status": "healthy",
        "version": "1.0.0"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "apps.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
