"""Store error types and driver error classification."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.exc import IntegrityError

# SQLSTATE reported by PostgreSQL drivers for a unique constraint violation.
UNIQUE_VIOLATION_SQLSTATE = "23505"


class StoreError(Exception):
    """Base exception for persistence operations the core needs to tell apart."""

    pass


class UniqueViolationError(StoreError):
    """Raised when a write collides with a unique constraint."""

    def __init__(self, message: str = "Unique constraint violated", constraint: str | None = None):
        super().__init__(message)
        self.constraint = constraint


def is_unique_violation(exc: IntegrityError) -> bool:
    """Return True if the driver error behind ``exc`` is a unique-key conflict."""
    orig = exc.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code:
        return code == UNIQUE_VIOLATION_SQLSTATE

    message = str(orig)
    return "UNIQUE constraint failed" in message or "duplicate key value" in message


def translate_integrity_error(exc: IntegrityError) -> Exception:
    """Map a unique-key IntegrityError to UniqueViolationError, else return it unchanged."""
    if is_unique_violation(exc):
        constraint = getattr(getattr(exc.orig, "diag", None), "constraint_name", None)
        return UniqueViolationError(str(exc.orig), constraint=constraint)
    return exc


def parse_uuid(value: str | UUID) -> UUID | None:
    """Parse an externally supplied id; malformed ids yield None."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        return None
