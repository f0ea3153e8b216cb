"""Custom exceptions for the expense tracker application."""

from typing import Dict, Iterable, Optional


class ExpenseTrackerException(Exception):
    """Base exception for all expense tracker errors."""

    def __init__(self, message: str, status_code: int = 500, headers: Optional[Dict[str, str]] = None):
        self.message = message
        self.status_code = status_code
        self.headers = headers or {}
        super().__init__(self.message)


class ValidationError(ExpenseTrackerException):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class MethodNotAllowedError(ExpenseTrackerException):
    """Raised when a request uses an HTTP method the endpoint does not serve."""

    def __init__(self, method: str, allowed_methods: Iterable[str]):
        self.method = method
        self.allowed_methods = list(allowed_methods)
        super().__init__(
            f"Method {method} Not Allowed",
            status_code=405,
            headers={"Allow": ", ".join(self.allowed_methods)}
        )
