# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every JSON error body has the same shape: {"error": "<message>"}.
# Page (non-API) errors are plain text.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

API_PREFIX = "/api"

# Labels used when listing allowed image types in error messages
_IMAGE_TYPE_LABELS = {
    "image/jpeg": "JPEG",
    "image/png": "PNG",
    "image/gif": "GIF",
    "image/webp": "WebP",
}


class SiteException(Exception):
    """
    Base exception for the site backend.

    All custom exceptions inherit from this class. The message is returned
    to the caller as-is.
    """

    def __init__(
        self,
        message: str,
        code: str = "SITE_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {"error": self.message}


# =============================================================================
# Request Exceptions
# =============================================================================

class InvalidRequestBodyError(SiteException):
    """Raised when a JSON body is malformed or isn't an object."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Invalid request body: {error}",
            code="INVALID_REQUEST_BODY",
            status_code=400,
            details={"error": error},
        )


class PermissionDeniedError(SiteException):
    """Raised when the configured authorizer rejects a capability."""

    def __init__(self, capability: str):
        super().__init__(
            message=f"Not allowed: {capability}",
            code="PERMISSION_DENIED",
            status_code=403,
            details={"capability": capability},
        )


# =============================================================================
# Upload Exceptions
# =============================================================================

class NoFileProvidedError(SiteException):
    """Raised when the multipart body has no `file` part."""

    def __init__(self):
        super().__init__(
            message="No file provided",
            code="NO_FILE",
            status_code=400,
        )


def describe_image_types(allowed: list[str]) -> str:
    """
    Human-readable list of allowed types.

    Example: ["image/jpeg", "image/png", "image/gif"] -> "JPEG, PNG, and GIF"
    """
    labels = [_IMAGE_TYPE_LABELS.get(t, t) for t in allowed]
    if len(labels) <= 2:
        return " and ".join(labels)
    return ", ".join(labels[:-1]) + ", and " + labels[-1]


class InvalidFileTypeError(SiteException):
    """Raised when the uploaded MIME type is not allowed."""

    def __init__(self, content_type: str | None, allowed: list[str]):
        super().__init__(
            message=f"Invalid file type. Only {describe_image_types(allowed)} are allowed.",
            code="INVALID_FILE_TYPE",
            status_code=400,
            details={"content_type": content_type, "allowed_types": allowed},
        )


class FileTooLargeError(SiteException):
    """Raised when the uploaded file exceeds the size limit."""

    def __init__(self, size_bytes: int, max_mb: float):
        super().__init__(
            message=f"File too large. Maximum size is {max_mb:g}MB.",
            code="FILE_TOO_LARGE",
            status_code=400,
            details={"size_bytes": size_bytes, "max_mb": max_mb},
        )


# =============================================================================
# Store Exceptions
# =============================================================================

class SettingsStoreError(SiteException):
    """Raised when the settings document can't be read, parsed or written."""

    def __init__(self, error: str):
        super().__init__(
            message=error,
            code="SETTINGS_STORE_ERROR",
            status_code=500,
        )


class StorageUploadError(SiteException):
    """Raised when an object store write fails."""

    def __init__(self, key: str, error: str):
        super().__init__(
            message=error,
            code="STORAGE_UPLOAD_ERROR",
            status_code=500,
            details={"key": key},
        )


class StorageDownloadError(SiteException):
    """Raised when an object store read fails."""

    def __init__(self, key: str, error: str):
        super().__init__(
            message=error,
            code="STORAGE_DOWNLOAD_ERROR",
            status_code=500,
            details={"key": key},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

def is_api_path(path: str) -> bool:
    return path == API_PREFIX or path.startswith(API_PREFIX + "/")


async def site_exception_handler(
    request: Request,
    exc: SiteException
) -> JSONResponse:
    """Convert SiteException to its JSON response."""
    if exc.status_code >= 500:
        logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.warning(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
):
    """
    Handle routing misses.

    Unknown paths and unsupported methods are both reported as 404:
    JSON under /api, plain text for pages.
    """
    logger.info(f"No route for {request.method} {request.url.path} ({exc.status_code})")
    if exc.status_code not in (404, 405):
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})
    if is_api_path(request.url.path):
        return JSONResponse(status_code=404, content={"error": "Not found"})
    return PlainTextResponse("Page not found", status_code=404)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors as client errors."""
    logger.warning(f"Validation error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=400,
        content={"error": str(exc)}
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Last resort: expose the raw message with a 500."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": str(exc)}
    )
