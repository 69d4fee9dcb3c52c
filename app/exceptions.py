# =============================================================================
# app/exceptions.py - Errors and the Error Translator
# =============================================================================
# Centralized exception handling for the application.
#
# Every error a handler raises ends up here exactly once:
# - HttpError (and subclasses) carry their own status/error/message triple
# - Framework errors (unknown route, bad method, request validation) are
#   normalized into an HttpError first
# - Anything else becomes a generic 500 that never echoes the original message
#
# The translated error is rendered as an HTML error page for browsers and as
# JSON for API clients.
# =============================================================================

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import TYPE_CHECKING

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ConfigDict, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

if TYPE_CHECKING:
    from app.rendering import Renderer

logger = logging.getLogger(__name__)

GENERIC_SERVER_MESSAGE = "An internal server error occurred"


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Unknown Error"


# =============================================================================
# Error Payload
# =============================================================================

class ErrorPayload(BaseModel):
    """Structured description of an HTTP error, as shown to the client."""

    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(..., alias="statusCode", ge=400, le=599)
    error: str
    message: str

    @property
    def is_server_error(self) -> bool:
        return self.status_code >= 500

    def to_props(self) -> dict:
        return self.model_dump(by_alias=True)


# =============================================================================
# Exception Classes
# =============================================================================

class HttpError(Exception):
    """
    Base exception for errors that map onto an HTTP response.

    All custom exceptions inherit from this class. `error` defaults to the
    standard reason phrase for the status code.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        error: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error = error or _reason_phrase(status_code)

    def to_payload(self) -> ErrorPayload:
        """Convert exception to the payload handed to the renderer."""
        return ErrorPayload(
            status_code=self.status_code,
            error=self.error,
            message=self.message,
        )


class ValidationError(HttpError):
    """Raised when the client supplied an empty or missing required field."""

    def __init__(self, message: str):
        super().__init__(status_code=422, message=message)


class BadRequestError(HttpError):
    """Raised when the request body cannot be read at all."""

    def __init__(self, message: str):
        super().__init__(status_code=400, message=message)


class UnknownScreenError(HttpError):
    """Raised when a handler asks for a screen the renderer doesn't know."""

    def __init__(self, screen: str):
        super().__init__(status_code=500, message=f"Unknown screen: {screen}")
        self.screen = screen


# =============================================================================
# Error Translator
# =============================================================================

class ErrorTranslator:
    """
    Turns any exception into exactly one response.

    Client errors (< 500) keep their message. Server errors that were raised
    on purpose as HttpError keep their label but not their message when they
    reach the page, and unexpected exceptions are always reduced to a
    generic 500.
    """

    def __init__(self, renderer: "Renderer"):
        self.renderer = renderer

    def to_payload(self, exc: Exception) -> ErrorPayload:
        """Normalize any exception into an ErrorPayload."""
        if isinstance(exc, HttpError):
            payload = exc.to_payload()
            if payload.is_server_error:
                # Deliberate 5xx errors may still carry internal detail
                return payload.model_copy(update={"message": GENERIC_SERVER_MESSAGE})
            return payload

        if isinstance(exc, StarletteHTTPException):
            return HttpError(exc.status_code, str(exc.detail)).to_payload()

        if isinstance(exc, RequestValidationError):
            return ValidationError("Request validation failed").to_payload()

        return ErrorPayload(
            status_code=500,
            error=_reason_phrase(500),
            message=GENERIC_SERVER_MESSAGE,
        )

    @staticmethod
    def wants_json(request: Request) -> bool:
        """API paths and clients that prefer JSON get a JSON error body."""
        if request.url.path.startswith("/api/"):
            return True
        accept = request.headers.get("accept", "")
        return "application/json" in accept and "text/html" not in accept

    def translate(self, request: Request, exc: Exception) -> Response:
        payload = self.to_payload(exc)

        if payload.is_server_error:
            logger.error(
                "Unhandled error on %s %s",
                request.method,
                request.url.path,
                exc_info=exc,
            )
        else:
            logger.info(
                "%s %s -> %d %s",
                request.method,
                request.url.path,
                payload.status_code,
                payload.message,
            )

        if self.wants_json(request):
            return JSONResponse(
                status_code=payload.status_code,
                content=payload.to_props(),
            )

        screen = "errors/500" if payload.is_server_error else "errors/400"
        return self.renderer.render(
            request,
            screen,
            props=payload.to_props(),
            status_code=payload.status_code,
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def app_exception_handler(request: Request, exc: Exception) -> Response:
    """
    Single boundary for every error class registered in create_app().

    Delegates to the ErrorTranslator assembled on app.state.
    """
    translator: ErrorTranslator = request.app.state.error_translator
    return translator.translate(request, exc)
