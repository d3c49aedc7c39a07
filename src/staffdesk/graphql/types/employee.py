"""
Employee GraphQL type and input definitions
"""

from __future__ import annotations

import dataclasses
from datetime import date, datetime
from typing import Any

import strawberry

from ...dbmodels import Employees


@strawberry.type
class Employee:
    """Employee type for GraphQL API."""

    id: strawberry.ID
    first_name: str
    last_name: str
    email: str
    gender: str | None
    designation: str
    salary: float
    date_of_joining: date
    department: str
    employee_photo: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, employee: Employees) -> Employee:
        return cls(
            id=strawberry.ID(str(employee.id)),
            first_name=employee.first_name,
            last_name=employee.last_name,
            email=employee.email,
            gender=employee.gender,
            designation=employee.designation,
            salary=float(employee.salary),
            date_of_joining=employee.date_of_joining,
            department=employee.department,
            employee_photo=employee.employee_photo,
            created_at=employee.created_at,
            updated_at=employee.updated_at,
        )


@strawberry.input
class EmployeeInput:
    """Input for creating an employee."""

    first_name: str
    last_name: str
    email: str
    designation: str
    salary: float
    date_of_joining: date
    department: str
    gender: str | None = None
    employee_photo: str | None = None


@strawberry.input
class EmployeeUpdateInput:
    """Input for a partial employee update; omitted fields are left untouched."""

    first_name: str | None = strawberry.UNSET
    last_name: str | None = strawberry.UNSET
    email: str | None = strawberry.UNSET
    gender: str | None = strawberry.UNSET
    designation: str | None = strawberry.UNSET
    salary: float | None = strawberry.UNSET
    date_of_joining: date | None = strawberry.UNSET
    department: str | None = strawberry.UNSET
    employee_photo: str | None = strawberry.UNSET


def input_to_dict(value: Any) -> dict[str, Any]:
    """Collect the fields a client actually supplied on a strawberry input."""
    return {
        field.name: getattr(value, field.name)
        for field in dataclasses.fields(value)
        if getattr(value, field.name) is not strawberry.UNSET
    }
