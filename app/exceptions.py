from typing import Any, Mapping, Optional


class ServiceError(Exception):
    """Base class for errors raised by services and repositories.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_code = "SERVICE_ERROR"

    def __init__(self, message: str = "Service error", details: Optional[Any] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(ServiceError):
    """Raised when input data is malformed or a precondition for a service call is not met."""

    http_status = 400
    default_code = "VALIDATION_FAILED"

    def __init__(self, message: str = "Invalid input", details: Optional[Any] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class InvalidArgumentError(ServiceValidationError):
    """Raised when a value is outside a fixed enumerated set (category, dietary tag)."""

    default_code = "INVALID_ARGUMENT"


class NotFoundError(ServiceError):
    """Raised when a requested resource was not found."""

    http_status = 404
    default_code = "NOT_FOUND"

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class ConflictError(ServiceError):
    """Raised when a resource conflict occurs (e.g., duplicate menu item name)."""

    http_status = 409
    default_code = "CONFLICT"

    def __init__(self, message: str = "Conflict", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class StorageError(ServiceError):
    """Raised when the underlying store fails. Details are logged, never returned to callers."""

    http_status = 500
    default_code = "STORAGE_FAILURE"

    def __init__(self, message: str = "Storage failure", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class ConstraintViolationError(StorageError):
    """Raised when a write is rejected by a storage-level check constraint."""

    default_code = "CONSTRAINT_VIOLATION"
