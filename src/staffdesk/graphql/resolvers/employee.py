"""Resolvers for employee queries and mutations.

Every resolver checks authentication before touching a store, answers
expected business failures with a ``success=False`` envelope, and lets
unexpected faults (database or storage outages) propagate.
"""

from __future__ import annotations

import strawberry

from ...logging import get_logger
from ...stores.base import UniqueViolationError, parse_uuid
from ...validators import (
    Invalid,
    coerce_salary,
    validate_employee_create,
    validate_employee_update,
)
from ..access_control import UNAUTHORIZED_MESSAGE, get_services, is_authorized
from ..types.employee import Employee, EmployeeInput, EmployeeUpdateInput, input_to_dict
from ..types.responses import ApiResponse, EmployeeResponse, EmployeesResponse

logger = get_logger(__name__)

NOT_FOUND = "Employee not found"
EMAIL_TAKEN = "Employee email must be unique"


# Query resolvers
async def get_all_employees(info: strawberry.Info) -> EmployeesResponse:
    if not is_authorized(info):
        return EmployeesResponse.failure(UNAUTHORIZED_MESSAGE)

    employees = await get_services(info).employees.list_all()
    return EmployeesResponse(
        success=True,
        message="Employees fetched",
        employees=[Employee.from_model(e) for e in employees],
    )


async def get_employee_by_eid(info: strawberry.Info, eid: str) -> EmployeeResponse:
    if not is_authorized(info):
        return EmployeeResponse.failure(UNAUTHORIZED_MESSAGE)

    employee_id = parse_uuid(eid)
    if employee_id is None:
        return EmployeeResponse.failure(NOT_FOUND)

    employee = await get_services(info).employees.get(employee_id)
    if employee is None:
        return EmployeeResponse.failure(NOT_FOUND)

    return EmployeeResponse(
        success=True, message="Employee found", employee=Employee.from_model(employee)
    )


async def search_employees(
    info: strawberry.Info,
    designation: str | None = None,
    department: str | None = None,
) -> EmployeesResponse:
    """Case-insensitive substring search on designation and/or department."""
    if not is_authorized(info):
        return EmployeesResponse.failure(UNAUTHORIZED_MESSAGE)

    employees = await get_services(info).employees.search(
        designation=designation or None, department=department or None
    )
    return EmployeesResponse(
        success=True,
        message="Search results",
        employees=[Employee.from_model(e) for e in employees],
    )


# Mutation resolvers
async def add_employee(info: strawberry.Info, input: EmployeeInput) -> EmployeeResponse:
    if not is_authorized(info):
        return EmployeeResponse.failure(UNAUTHORIZED_MESSAGE)

    fields = input_to_dict(input)
    check = validate_employee_create(fields)
    if isinstance(check, Invalid):
        return EmployeeResponse.failure(check.message)

    services = get_services(info)
    fields["salary"] = coerce_salary(fields["salary"])
    fields["employee_photo"] = await services.photos.resolve(fields.get("employee_photo"))

    try:
        employee = await services.employees.create(fields)
    except UniqueViolationError:
        logger.info("Employee email already in use")
        return EmployeeResponse.failure(EMAIL_TAKEN)

    return EmployeeResponse(
        success=True, message="Employee created", employee=Employee.from_model(employee)
    )


async def update_employee(
    info: strawberry.Info, eid: str, input: EmployeeUpdateInput
) -> EmployeeResponse:
    """Apply a partial update; only supplied fields change."""
    if not is_authorized(info):
        return EmployeeResponse.failure(UNAUTHORIZED_MESSAGE)

    changes = input_to_dict(input)
    check = validate_employee_update(changes)
    if isinstance(check, Invalid):
        return EmployeeResponse.failure(check.message)

    employee_id = parse_uuid(eid)
    if employee_id is None:
        return EmployeeResponse.failure(NOT_FOUND)

    services = get_services(info)
    if "salary" in changes:
        changes["salary"] = coerce_salary(changes["salary"])
    if "employee_photo" in changes:
        changes["employee_photo"] = await services.photos.resolve(changes["employee_photo"])

    try:
        employee = await services.employees.update(employee_id, changes)
    except UniqueViolationError:
        logger.info("Employee email already in use", employee_id=str(employee_id))
        return EmployeeResponse.failure(EMAIL_TAKEN)

    if employee is None:
        return EmployeeResponse.failure(NOT_FOUND)

    return EmployeeResponse(
        success=True, message="Employee updated", employee=Employee.from_model(employee)
    )


async def delete_employee(info: strawberry.Info, eid: str) -> ApiResponse:
    if not is_authorized(info):
        return ApiResponse(success=False, message=UNAUTHORIZED_MESSAGE)

    employee_id = parse_uuid(eid)
    if employee_id is None or not await get_services(info).employees.delete(employee_id):
        return ApiResponse(success=False, message=NOT_FOUND)

    return ApiResponse(success=True, message="Employee deleted")
