"""
Excepciones centralizadas

Every failure raised by the service and repository layers is a
KitchenControlException tagged with an ErrorKind. The HTTP layer turns the
kind into a status code through ERROR_STATUS_CODES and renders the
ApiResponse envelope.

Author: TM3
"""
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Classification of failures surfaced to API clients"""
    INVALID_REQUEST = "INVALID_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    STORAGE_ERROR = "STORAGE_ERROR"
    UNEXPECTED = "UNEXPECTED"


# Kind -> HTTP status. Every kind is reported as a client error (400) to
# keep the contract existing clients were built against.
ERROR_STATUS_CODES: Dict[ErrorKind, int] = {
    ErrorKind.INVALID_REQUEST: 400,
    ErrorKind.NOT_FOUND: 400,
    ErrorKind.STORAGE_ERROR: 400,
    ErrorKind.UNEXPECTED: 400,
}


def status_code_for(kind: ErrorKind) -> int:
    """HTTP status for an error kind (400 for anything unmapped)"""
    return ERROR_STATUS_CODES.get(kind, 400)


class KitchenControlException(Exception):
    """
    Base exception for the application

    Subclasses set `kind` and a default message.
    """
    kind: ErrorKind = ErrorKind.UNEXPECTED
    message: str = "Unexpected error"

    def __init__(self, message: Optional[str] = None, extra: Optional[Dict[str, Any]] = None):
        self.message = message or self.__class__.message
        self.extra = extra or {}
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return status_code_for(self.kind)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for logging"""
        return {
            "kind": self.kind.value,
            "status_code": self.status_code,
            "message": self.message,
            **self.extra
        }


class InvalidRequestError(KitchenControlException):
    """Request body or parameters could not be parsed"""
    kind = ErrorKind.INVALID_REQUEST
    message = "Invalid request"


class NotFoundError(KitchenControlException):
    """Resource lookup by identifier found nothing"""
    kind = ErrorKind.NOT_FOUND
    message = "Resource not found"


class OrderNotFoundError(NotFoundError):
    """No order with the requested ID"""

    def __init__(self, order_id: int):
        self.order_id = order_id
        super().__init__(f"Order not found with id: {order_id}", extra={"order_id": order_id})


class StorageError(KitchenControlException):
    """The database rejected or failed an operation"""
    kind = ErrorKind.STORAGE_ERROR
    message = "Storage error"
