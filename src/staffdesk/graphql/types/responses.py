"""
Response envelopes returned by every operation.

``success=False`` always comes with empty payload fields.
"""

from __future__ import annotations

import strawberry

from .employee import Employee
from .user import User


@strawberry.type
class AuthPayload:
    success: bool
    message: str
    token: str | None = None
    user: User | None = None

    @classmethod
    def failure(cls, message: str) -> AuthPayload:
        return cls(success=False, message=message)


@strawberry.type
class ApiResponse:
    success: bool
    message: str


@strawberry.type
class EmployeeResponse:
    success: bool
    message: str
    employee: Employee | None = None

    @classmethod
    def failure(cls, message: str) -> EmployeeResponse:
        return cls(success=False, message=message)


@strawberry.type
class EmployeesResponse:
    success: bool
    message: str
    employees: list[Employee] = strawberry.field(default_factory=list)

    @classmethod
    def failure(cls, message: str) -> EmployeesResponse:
        return cls(success=False, message=message)
