"""
Custom exceptions for the company directory domain.

Business rule violations (duplicates, missing records) are not exceptions:
they travel as failed ``OperationResult`` values. The exceptions here cover
infrastructure failures and wiring errors.
"""

from typing import Optional


class DirectoryServiceException(Exception):
    """Base exception for all company directory errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class StoreException(DirectoryServiceException):
    """Raised when a store operation fails at the infrastructure level."""

    def __init__(self, operation: str, reason: Optional[str] = None):
        message = f"Store {operation} failed"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message, details={"operation": operation, "reason": reason}
        )


class ServiceNotInitializedException(DirectoryServiceException):
    """Raised when a service dependency is requested before startup wiring."""

    def __init__(self, service: str):
        super().__init__(
            message=f"Service '{service}' not initialized", details={"service": service}
        )
