"""
Closed set of service-layer error kinds.

Services raise these; the application's exception handlers translate each kind to
an HTTP status through STATUS_BY_KIND, so no caller inspects error messages.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional


class ErrorKind(str, Enum):
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    INTERNAL = "internal"


STATUS_BY_KIND: Mapping[ErrorKind, int] = MappingProxyType(
    {
        ErrorKind.AUTHORIZATION: 403,
        ErrorKind.NOT_FOUND: 404,
        ErrorKind.VALIDATION: 400,
        ErrorKind.INTERNAL: 500,
    }
)


class ServiceError(Exception):
    """Base class for errors raised by services. Subclasses fix the kind."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, *, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


class AuthorizationError(ServiceError):
    """The caller's role may not perform the requested action."""

    kind = ErrorKind.AUTHORIZATION


class NotFoundError(ServiceError):
    """The target record does not exist within the caller's tenant."""

    kind = ErrorKind.NOT_FOUND


class ValidationError(ServiceError):
    """Input passed schema validation but cannot be normalized."""

    kind = ErrorKind.VALIDATION


class InternalError(ServiceError):
    kind = ErrorKind.INTERNAL
