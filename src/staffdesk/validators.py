"""
Field and business-rule validation for signup, login and employee payloads.

Every function here is pure: it inspects its input and returns ``Valid`` or
``Invalid(message)``. Expected validation failures are never raised.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MIN_PASSWORD_LENGTH = 6
MIN_SALARY = 1000

EMPLOYEE_REQUIRED_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "designation",
    "salary",
    "date_of_joining",
    "department",
)


@dataclass(frozen=True)
class Valid:
    ok = True


@dataclass(frozen=True)
class Invalid:
    message: str
    ok = False


ValidationResult = Valid | Invalid

VALID = Valid()


def is_valid_email(value: Any) -> bool:
    return isinstance(value, str) and EMAIL_RE.match(value) is not None


def is_missing(value: Any) -> bool:
    """None and the empty string are missing; ``0`` and ``False`` are not."""
    return value is None or value == ""


def coerce_salary(value: Any) -> float | None:
    """Convert a salary to float, or None if it is not a finite number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float | Decimal):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(Decimal(value.strip()))
        except (InvalidOperation, ValueError):
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _check_salary(value: Any) -> Invalid | None:
    salary = coerce_salary(value)
    if salary is None:
        return Invalid("Salary must be a number")
    if salary < MIN_SALARY:
        return Invalid(f"Salary must be >= {MIN_SALARY}")
    return None


def validate_login(username_or_email: str | None, password: str | None) -> ValidationResult:
    if is_missing(username_or_email) or is_missing(password):
        return Invalid("username/email and password are required")
    return VALID


def validate_signup(
    username: str | None, email: str | None, password: str | None
) -> ValidationResult:
    if is_missing(username) or is_missing(email) or is_missing(password):
        return Invalid("username, email, password are required")
    if not is_valid_email(email):
        return Invalid("Invalid email format")
    if len(password) < MIN_PASSWORD_LENGTH:
        return Invalid(f"Password must be at least {MIN_PASSWORD_LENGTH} chars")
    return VALID


def validate_employee_create(fields: dict[str, Any]) -> ValidationResult:
    for name in EMPLOYEE_REQUIRED_FIELDS:
        if is_missing(fields.get(name)):
            return Invalid(f"{name} is required")

    if not is_valid_email(fields["email"]):
        return Invalid("Invalid email")

    salary_error = _check_salary(fields["salary"])
    if salary_error:
        return salary_error
    return VALID


def validate_employee_update(changes: dict[str, Any]) -> ValidationResult:
    """Validate only the fields present in a partial update."""
    for name in EMPLOYEE_REQUIRED_FIELDS:
        if name in changes and is_missing(changes[name]):
            return Invalid(f"{name} cannot be empty")

    if "email" in changes and not is_valid_email(changes["email"]):
        return Invalid("Invalid email")

    if "salary" in changes:
        salary_error = _check_salary(changes["salary"])
        if salary_error:
            return salary_error
    return VALID
