"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"

    # Ownership errors (reported with 401, see TodoAccessDeniedError)
    FORBIDDEN = "FORBIDDEN"

    # Not found errors (404)
    TASK_NOT_FOUND = "TASK_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    ROUTE_NOT_FOUND = "ROUTE_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_STATUS = "INVALID_STATUS"
    TARGET_DATE_IN_PAST = "TARGET_DATE_IN_PAST"

    # Conflict errors (reported with 400)
    EMAIL_TAKEN = "EMAIL_TAKEN"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """Input failed a domain constraint."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=400,
            details={"field": field} if field else None,
        )


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class TodoAccessDeniedError(AppException):
    """Authenticated user does not own the task.

    Reported with 401 rather than 403 to stay compatible with existing clients.
    """

    def __init__(self, action: str = "access") -> None:
        super().__init__(
            error_code=ErrorCode.FORBIDDEN,
            message=f"Not authorized to {action} this todo",
            status_code=401,
        )


class TodoNotFoundError(AppException):
    """Todo not found."""

    def __init__(self, todo_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.TASK_NOT_FOUND,
            message="Todo not found",
            status_code=404,
            details={"todo_id": todo_id},
        )


class UserNotFoundError(AppException):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            message="User not found",
            status_code=404,
            details={"user_id": user_id},
        )


class EmailAlreadyRegisteredError(AppException):
    """An account with this email already exists."""

    def __init__(self, email: str) -> None:
        super().__init__(
            error_code=ErrorCode.EMAIL_TAKEN,
            message="User already exists",
            status_code=400,
            details={"email": email},
        )
