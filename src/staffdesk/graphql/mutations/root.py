"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.auth import SignupInput
from ..types.employee import EmployeeInput, EmployeeUpdateInput
from ..types.responses import ApiResponse, AuthPayload, EmployeeResponse


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation
    async def signup(self, info: strawberry.Info, input: SignupInput) -> AuthPayload:
        """Create an account and receive a bearer token."""
        from ..resolvers.auth import signup

        return await signup(info, input)

    # Employee mutations
    @strawberry.mutation(name="addEmployee")
    async def add_employee(self, info: strawberry.Info, input: EmployeeInput) -> EmployeeResponse:
        """Create an employee."""
        from ..resolvers.employee import add_employee

        return await add_employee(info, input)

    @strawberry.mutation(name="updateEmployee")
    async def update_employee(
        self, info: strawberry.Info, eid: strawberry.ID, input: EmployeeUpdateInput
    ) -> EmployeeResponse:
        """Partially update an employee."""
        from ..resolvers.employee import update_employee

        return await update_employee(info, eid, input)

    @strawberry.mutation(name="deleteEmployee")
    async def delete_employee(self, info: strawberry.Info, eid: strawberry.ID) -> ApiResponse:
        """Delete an employee."""
        from ..resolvers.employee import delete_employee

        return await delete_employee(info, eid)
