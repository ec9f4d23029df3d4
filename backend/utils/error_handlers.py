# backend/utils/error_handlers.py
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from services.errors import (
    ServiceError,
    ValidationError,
    EmailAlreadyRegistered,
    InvalidCredentials,
    NoProviderFound,
    StorageError,
)

# Error kind -> (HTTP status, machine-readable code)
ERROR_MAP = {
    ValidationError: (status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR"),
    EmailAlreadyRegistered: (status.HTTP_409_CONFLICT, "EMAIL_ALREADY_REGISTERED"),
    InvalidCredentials: (status.HTTP_401_UNAUTHORIZED, "INVALID_CREDENTIALS"),
    NoProviderFound: (status.HTTP_404_NOT_FOUND, "NO_PROVIDER_FOUND"),
    StorageError: (status.HTTP_503_SERVICE_UNAVAILABLE, "STORAGE_ERROR"),
}


def _error_body(error_code: str, message: str, details: Optional[Any] = None) -> dict:
    return {"error_code": error_code, "message": message, "details": details}


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
        status_code, error_code = ERROR_MAP.get(
            type(exc), (status.HTTP_500_INTERNAL_SERVER_ERROR, "SERVICE_ERROR")
        )
        details = None
        if isinstance(exc, ValidationError):
            details = {"rule": exc.rule.value}
        return JSONResponse(status_code=status_code, content=_error_body(error_code, exc.message, details))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=_error_body("REQUEST_INVALID", "Invalid request parameters.", jsonable_errors(exc)),
        )


def jsonable_errors(exc: RequestValidationError) -> list:
    # ctx may carry exception instances that JSONResponse cannot serialize
    return [{"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")} for e in exc.errors()]
