from typing import Any, Dict, Optional


class AppException(Exception):
    def __init__(
        self,
        message: str,
        status_code: int = 400,
        error_code: str = "BUSINESS_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)


class InvalidArgumentError(AppException):
    """Out-of-domain input to a calculation (negative tenure, unknown leave type...)."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=400,
            error_code="INVALID_ARGUMENT",
            details=details
        )


class InvalidDateRangeError(InvalidArgumentError):
    def __init__(self, start_date, end_date):
        super().__init__(
            message=f"End date {end_date} is before start date {start_date}",
            details={"start_date": str(start_date), "end_date": str(end_date)}
        )
        self.error_code = "INVALID_DATE_RANGE"


class NotFoundError(AppException):
    def __init__(self, entity: str, entity_id: Any):
        super().__init__(
            message=f"{entity} not found",
            status_code=404,
            error_code="NOT_FOUND",
            details={"id": entity_id}
        )


class InvalidStateTransitionError(AppException):
    def __init__(self, entity: str, current: str, action: str):
        super().__init__(
            message=f"Cannot {action} {entity} in status '{current}'",
            status_code=409,
            error_code="INVALID_STATE_TRANSITION",
            details={"status": current, "action": action}
        )


class ConflictError(AppException):
    def __init__(self, message: str):
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT"
        )
