import enum
import logging
from typing import Any, Dict

from fastapi import status
from fastapi.responses import JSONResponse
from fastapi.requests import Request

logger = logging.getLogger(__name__)


# ---------------------------
# Failure taxonomy
# ---------------------------

class FailureKind(str, enum.Enum):
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    OWNERSHIP_MISMATCH = "ownership_mismatch"
    ALREADY_EXISTS = "already_exists"
    VALIDATION_FAILURE = "validation_failure"


class ServiceError(Exception):
    """
    Single failure type raised by the service layer.

    The variant is carried in ``kind``; ``details`` holds the variant's
    payload (entity type and id, offending field, ...). Callers branch on
    ``exc.kind`` rather than on subclasses.
    """

    def __init__(self, kind: FailureKind, message: str, **details: Any):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.details: Dict[str, Any] = details

    def __repr__(self) -> str:
        return f"ServiceError({self.kind.value}, {self.message!r}, {self.details!r})"


def not_found(entity_type: str, id: Any) -> ServiceError:
    return ServiceError(
        FailureKind.NOT_FOUND,
        f"{entity_type} with ID {id} does not exist",
        entity_type=entity_type,
        id=id,
    )


def unauthorized(reason: str) -> ServiceError:
    return ServiceError(FailureKind.UNAUTHORIZED, reason, reason=reason)


def ownership_mismatch(child_type: str, expected_parent: Any, actual_parent: Any) -> ServiceError:
    return ServiceError(
        FailureKind.OWNERSHIP_MISMATCH,
        f"{child_type} does not belong to goal {expected_parent}",
        child_type=child_type,
        expected_parent=expected_parent,
        actual_parent=actual_parent,
    )


def already_exists(field: str, value: Any) -> ServiceError:
    return ServiceError(
        FailureKind.ALREADY_EXISTS,
        f"{field} '{value}' is already registered",
        field=field,
        value=value,
    )


def validation_failure(field: str, rule: str) -> ServiceError:
    return ServiceError(
        FailureKind.VALIDATION_FAILURE,
        f"{field}: {rule}",
        field=field,
        rule=rule,
    )


# ---------------------------
# FastAPI Exception Handlers
# ---------------------------

STATUS_BY_KIND = {
    FailureKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureKind.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    FailureKind.OWNERSHIP_MISMATCH: status.HTTP_409_CONFLICT,
    FailureKind.ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    FailureKind.VALIDATION_FAILURE: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def register_exception_handlers(app):
    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        if exc.kind in (FailureKind.UNAUTHORIZED, FailureKind.OWNERSHIP_MISMATCH):
            logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
        # ids can be of any json-incompatible type, keep the payload stringly
        details = {key: str(value) for key, value in exc.details.items()}
        return JSONResponse(
            status_code=STATUS_BY_KIND[exc.kind],
            content={"error": exc.kind.value, "detail": exc.message, **details},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "internal", "detail": "Internal server error"},
        )
