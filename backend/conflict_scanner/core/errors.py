"""
Conflict Scanner
Domain errors and their JSON rendering
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ScannerError(Exception):
    """Base error carrying the HTTP status and public message."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        status_code: Optional[int] = None,
        extra: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details
        if status_code is not None:
            self.status_code = status_code
        self.extra = extra or {}

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message}
        if self.details:
            body["details"] = self.details
        body.update(self.extra)
        return body


class ConfigurationError(ScannerError):
    """A required API key or URL is not configured."""
    status_code = 500


class InvalidRequestError(ScannerError):
    status_code = 400


class DocumentExtractionError(ScannerError):
    """Readable text could not be pulled out of an upload."""
    status_code = 400


class UploadTooLargeError(ScannerError):
    status_code = 413


class UpstreamServiceError(ScannerError):
    """The news API, LLM API or webhook failed."""
    status_code = 500


class ResponseParseError(ScannerError):
    """LLM output was not the JSON we asked for."""
    status_code = 500


def missing_setting(name: str) -> ConfigurationError:
    return ConfigurationError(
        f"{name} is not configured. Please add it to your .env file."
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ScannerError)
    async def scanner_error_handler(request: Request, exc: ScannerError):
        if exc.status_code >= 500:
            logger.error("%s %s: %s (%s)", request.method, request.url.path, exc.message, exc.details)
        else:
            logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        details = "; ".join(
            "{}: {}".format(".".join(str(p) for p in err.get("loc", ()) if p != "body"), err.get("msg"))
            for err in exc.errors()
        )
        logger.info("%s %s rejected: %s", request.method, request.url.path, details)
        return JSONResponse(status_code=422, content={"error": "Invalid request", "details": details})
