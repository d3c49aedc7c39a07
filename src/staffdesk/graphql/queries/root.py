"""
Root GraphQL query definitions
"""

import strawberry

from ..types.auth import LoginInput
from ..types.responses import AuthPayload, EmployeeResponse, EmployeesResponse


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def login(self, info: strawberry.Info, input: LoginInput) -> AuthPayload:
        """Log in with a username or email and receive a bearer token."""
        from ..resolvers.auth import login

        return await login(info, input)

    @strawberry.field(name="getAllEmployees")
    async def get_all_employees(self, info: strawberry.Info) -> EmployeesResponse:
        """List all employees, newest first."""
        from ..resolvers.employee import get_all_employees

        return await get_all_employees(info)

    @strawberry.field(name="getEmployeeByEid")
    async def get_employee_by_eid(self, info: strawberry.Info, eid: strawberry.ID) -> EmployeeResponse:
        """Get an employee by ID."""
        from ..resolvers.employee import get_employee_by_eid

        return await get_employee_by_eid(info, eid)

    @strawberry.field(name="searchEmployees")
    async def search_employees(
        self,
        info: strawberry.Info,
        designation: str | None = None,
        department: str | None = None,
    ) -> EmployeesResponse:
        """Search employees by designation and/or department."""
        from ..resolvers.employee import search_employees

        return await search_employees(info, designation, department)
