"""
Exception handlers for the FastAPI application.

Application exceptions are rendered as ``{"error": message}`` with the
status code they carry.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from utils.exceptions import ExerciseTrackerError
from utils.logger import setup_logger

logger = setup_logger(__name__)


async def exercise_tracker_error_handler(
    request: Request,
    exc: ExerciseTrackerError,
) -> JSONResponse:
    """Handle all ExerciseTrackerError exceptions."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def generic_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    """Register the application's exception handlers."""
    app.add_exception_handler(ExerciseTrackerError, exercise_tracker_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
