# employee_service/errors.py
import logging
from typing import Any, Dict, Optional
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class EmployeeNotFoundError(Exception):
    """Raised when no stored employee matches the requested id."""

    def __init__(self, employee_id: int):
        self.employee_id = employee_id
        super().__init__(f"Employee not found: {employee_id}")


class RepositoryError(RuntimeError):
    """Raised when the storage backend fails.

    Wraps driver exceptions so callers only need to know about one type.
    """


def create_error_response(
    message: str,
    details: Optional[str] = None,
    example: Optional[str] = None
) -> Dict[str, Any]:
    """Create a detailed error response"""
    response = {
        "message": message,
        "details": details if details else message
    }
    if example:
        response["example"] = example
    return response


async def employee_not_found_handler(request: Request, exc: EmployeeNotFoundError) -> JSONResponse:
    logger.warning("%s %s: employee %s not found", request.method, request.url.path, exc.employee_id)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "detail": create_error_response(
                message="Employee not found",
                details=f"No employee found with ID: {exc.employee_id}",
                example="Please ensure you're using a valid employee ID"
            )
        },
    )


async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    logger.exception("%s %s: storage failure", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": create_error_response(
                message="Storage failure",
                details=str(exc),
                example="Please try again or contact support if the problem persists"
            )
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EmployeeNotFoundError, employee_not_found_handler)
    app.add_exception_handler(RepositoryError, repository_error_handler)
