"""Error taxonomy for the Berry API.

Every error is terminal for the request that raised it. Nothing in the
backend retries; the client may re-issue the same request.
"""

import structlog
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = structlog.get_logger(__name__)


class BerryError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Server error"

    def __init__(self, detail: str | None = None, headers: dict[str, str] | None = None):
        super().__init__(status_code=self.status_code, detail=detail or self.default_detail, headers=headers)


class AuthenticationRequired(BerryError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Not authenticated"

    def __init__(self, detail: str | None = None):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class PermissionDenied(BerryError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Permission denied"


class ValidationFailed(BerryError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request"

    def __init__(self, detail: str | None = None, fields: list[str] | None = None):
        super().__init__(detail)
        self.fields = list(fields or [])


class NotFound(BerryError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class Conflict(BerryError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Already exists"


class UpstreamQueryFailure(BerryError):
    default_detail = "Server error"


def missing_fields_error(fields: list[str]) -> ValidationFailed:
    return ValidationFailed(f"Missing required fields: {', '.join(fields)}", fields)


def _field_name(loc) -> str:
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts) if parts else "body"


async def berry_error_handler(_request: Request, exc: BerryError) -> JSONResponse:
    content = {"detail": exc.detail}
    if isinstance(exc, ValidationFailed):
        content["fields"] = exc.fields
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


async def request_validation_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    fields: list[str] = []
    missing: list[str] = []
    for err in exc.errors():
        name = _field_name(err.get("loc", ()))
        if name not in fields:
            fields.append(name)
        if err.get("type") == "missing" and name not in missing:
            missing.append(name)
    if missing and len(missing) == len(fields):
        detail = f"Missing required fields: {', '.join(missing)}"
    else:
        detail = f"Invalid fields: {', '.join(fields)}"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail, "fields": fields})


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("database_error", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": UpstreamQueryFailure.default_detail},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BerryError, berry_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
