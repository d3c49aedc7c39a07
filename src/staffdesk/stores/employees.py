"""Employee store: CRUD and search over the ``employees`` table."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from ..database.connection import SessionFactory, session_scope
from ..dbmodels import EMPLOYEE_WRITABLE_FIELDS, Employees, utcnow
from ..logging import get_logger
from .base import translate_integrity_error

logger = get_logger(__name__)


def _writable(fields: dict[str, Any]) -> dict[str, Any]:
    unknown = set(fields) - set(EMPLOYEE_WRITABLE_FIELDS)
    if unknown:
        raise ValueError(f"Unknown employee fields: {sorted(unknown)}")
    return dict(fields)


class EmployeeStore:
    """Persistence for employee records.

    Writes that collide with the unique email constraint raise
    ``UniqueViolationError``; every other database error propagates unchanged.
    """

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    async def list_all(self) -> list[Employees]:
        """Return every employee, newest first."""
        async with session_scope(self.session_factory) as session:
            stmt = select(Employees).order_by(Employees.created_at.desc())
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def get(self, employee_id: UUID) -> Employees | None:
        async with session_scope(self.session_factory) as session:
            return await session.get(Employees, employee_id)

    async def search(
        self, designation: str | None = None, department: str | None = None
    ) -> list[Employees]:
        """Case-insensitive substring search; criteria left empty are not filtered."""
        stmt = select(Employees)
        if designation:
            stmt = stmt.where(Employees.designation.icontains(designation, autoescape=True))
        if department:
            stmt = stmt.where(Employees.department.icontains(department, autoescape=True))
        stmt = stmt.order_by(Employees.created_at.desc())

        async with session_scope(self.session_factory) as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def create(self, fields: dict[str, Any]) -> Employees:
        employee = Employees(**_writable(fields))
        try:
            async with session_scope(self.session_factory) as session:
                session.add(employee)
                await session.flush()
        except IntegrityError as e:
            raise translate_integrity_error(e) from e

        logger.info("Employee created", employee_id=str(employee.id))
        return employee

    async def update(self, employee_id: UUID, changes: dict[str, Any]) -> Employees | None:
        """Apply a partial update; returns None when the employee does not exist."""
        changes = _writable(changes)
        try:
            async with session_scope(self.session_factory) as session:
                employee = await session.get(Employees, employee_id)
                if employee is None:
                    return None

                for name, value in changes.items():
                    setattr(employee, name, value)
                employee.updated_at = utcnow()
                await session.flush()
        except IntegrityError as e:
            raise translate_integrity_error(e) from e

        logger.info(
            "Employee updated", employee_id=str(employee_id), fields=sorted(changes)
        )
        return employee

    async def delete(self, employee_id: UUID) -> bool:
        """Delete an employee; returns False when nothing was removed."""
        async with session_scope(self.session_factory) as session:
            employee = await session.get(Employees, employee_id)
            if employee is None:
                return False
            await session.delete(employee)

        logger.info("Employee deleted", employee_id=str(employee_id))
        return True
