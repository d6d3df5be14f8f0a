"""
Application error taxonomy.

Services raise AppError with a structured ErrorKind; routers are the only
place where a kind is turned into an HTTP status code.
"""
from enum import Enum
from typing import List, Optional

from fastapi import status


class ErrorKind(str, Enum):
    """Classification of business errors"""
    UNAUTHORIZED = "unauthorized"          # no identity, session or enrollment
    FORBIDDEN = "forbidden"                # identity known but not entitled
    PAYMENT_REQUIRED = "payment_required"  # entitled but unpaid
    NOT_FOUND = "not_found"
    INVALID_DATA = "invalid_data"


_STATUS_BY_KIND = {
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.PAYMENT_REQUIRED: status.HTTP_402_PAYMENT_REQUIRED,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_DATA: status.HTTP_400_BAD_REQUEST,
}


class AppError(Exception):
    """
    Business error raised by services.

    Attributes:
        kind: ErrorKind classification
        message: Human-readable message
        details: Extra messages (used by INVALID_DATA)
    """

    def __init__(self, kind: ErrorKind, message: str, details: Optional[List[str]] = None):
        self.kind = kind
        self.message = message
        self.details = details or []
        super().__init__(message)

    def __repr__(self) -> str:
        return f"AppError(kind={self.kind.value}, message={self.message!r})"


def status_code_for(kind: ErrorKind) -> int:
    """HTTP status code for an error kind"""
    return _STATUS_BY_KIND[kind]


def unauthorized_error(message: str = "You must be signed in to continue") -> AppError:
    return AppError(ErrorKind.UNAUTHORIZED, message)


def forbidden_error(message: str = "Your ticket does not grant hotel access") -> AppError:
    return AppError(ErrorKind.FORBIDDEN, message)


def payment_required_error(message: str = "Ticket not paid") -> AppError:
    return AppError(ErrorKind.PAYMENT_REQUIRED, message)


def not_found_error(message: str = "No result for this search!") -> AppError:
    return AppError(ErrorKind.NOT_FOUND, message)
