"""Domain-level exceptions.

Every core operation signals failure by raising a subclass of
DomainException.  Each subclass carries an ``ErrorKind`` so callers (the
CLI, or any other adapter) can map failures uniformly without knowing the
concrete class.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NOT_FOUND = "NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    CONFLICT = "CONFLICT"
    INTERNAL = "INTERNAL"


class DomainException(Exception):
    """Base class for all domain errors."""

    kind: ErrorKind = ErrorKind.INTERNAL


class ValidationError(DomainException):
    """A business rule, invariant or argument constraint was violated."""

    kind = ErrorKind.INVALID_ARGUMENT


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class ForbiddenError(DomainException):
    """The principal is authenticated but may not touch this resource."""

    kind = ErrorKind.FORBIDDEN


class ConflictError(DomainException):
    """A transactional write could not be committed."""

    kind = ErrorKind.CONFLICT


class InternalError(DomainException):
    """Unexpected persistence failure.  The message never leaks internals."""

    kind = ErrorKind.INTERNAL
