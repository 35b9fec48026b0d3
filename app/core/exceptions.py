"""Application-level exceptions and FastAPI exception handlers."""


import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.db.errors import StorageError
from app.schemas.message import Message, message_for

logger = logging.getLogger(__name__)

class AppException(Exception):
    """Base application exception; also the generic ``Error`` kind."""

    kind = "Error"

    def __init__(self, message: str, status_code: int = 500, code: str = "ERROR"):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)

    def to_message(self) -> Message:
        return message_for(self.kind, self.message)

class NotFoundError(AppException):
    """Missing entity, or a list/aggregate query with nothing to return."""

    kind = "NotFound"

    def __init__(self, message: str):
        super().__init__(message, status_code=404, code="NOT_FOUND")

class InvalidPayloadError(AppException):
    kind = "InvalidPayload"

    def __init__(self, message: str = "Missing required fields"):
        super().__init__(message, status_code=422, code="INVALID_PAYLOAD")

# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def _error_body(code: str, message: str) -> dict:
    return {"error": {"code": code, "message": message}}

def register_exception_handlers(app: FastAPI) -> None:
    """Attach all custom exception handlers to the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.code, exc.message),
        )

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=500,
            content=_error_body("STORAGE_ERROR", "The operation was aborted"),
        )

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content=_error_body("NOT_FOUND", "Resource not found"),
        )

    @app.exception_handler(500)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content=_error_body("INTERNAL_ERROR", "An unexpected error occurred"),
        )
