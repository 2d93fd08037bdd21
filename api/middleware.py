"""
Consolidated middleware for the QuickBite API
"""

import time
import logging
from uuid import uuid4

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import ServiceError
from api.responses import error_response

logger = logging.getLogger("quickbite.middleware")


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log each request and tag the response with X-Request-ID / X-Process-Time.

    A caller-supplied X-Request-ID is reused so a request can be followed
    across services; otherwise a fresh one is generated.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid4())
        request.state.request_id = request_id
        path = request.url.path

        logger.info(f"request_started id={request_id} method={request.method} path={path}")
        started = time.perf_counter()

        try:
            response: Response = await call_next(request)
        except Exception:
            elapsed = time.perf_counter() - started
            logger.error(
                f"request_failed id={request_id} method={request.method} path={path} "
                f"elapsed={elapsed:.4f}s",
                exc_info=True,
            )
            raise

        elapsed = time.perf_counter() - started
        logger.info(
            f"request_finished id={request_id} method={request.method} path={path} "
            f"status={response.status_code} elapsed={elapsed:.4f}s"
        )
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        return response


# ============================================================================
# Error Handlers
# ============================================================================


def _field_errors(errors) -> list:
    """Flatten pydantic errors into {field, reason} pairs"""
    result = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "path", "query")]
        result.append({"field": ".".join(loc) or "body", "reason": err.get("msg", "")})
    return result


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request body / path validation errors as 400"""
    details = _field_errors(exc.errors())
    logger.warning(f"Validation error on {request.url}: {details}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_response(
            "VALIDATION_FAILED", "One or more validation errors occurred.", details
        ),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(f"HTTP_{exc.status_code}", str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def service_exception_handler(request: Request, exc: ServiceError):
    """Map service errors to their HTTP status; 5xx bodies carry no internals"""
    if exc.http_status >= 500:
        logger.error(
            f"Service failure on {request.url}: {exc.code} {exc}",
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=error_response(exc.code, "An unexpected error occurred"),
        )

    logger.warning(f"{exc.code} on {request.url}: {exc}")
    return JSONResponse(
        status_code=exc.http_status,
        content=error_response(exc.code, exc.message, exc.details),
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response("INTERNAL_SERVER_ERROR", "An unexpected error occurred"),
    )
