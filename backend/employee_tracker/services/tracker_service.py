"""
Employee tracker service for departments, roles and employees.
"""
from typing import Any

from sqlalchemy import String, literal_column

from employee_tracker.database.registry import TableRegistry
from employee_tracker.database.tables import department, employee, role
from employee_tracker.schemas.tracker import (
    DepartmentCreate,
    EmployeeCreate,
    EmployeeRoleUpdate,
    RoleCreate,
)
from employee_tracker.schemas.write import WriteResult
from employee_tracker.services.schema_manager import SchemaManager

ROLE_JOINS = [
    "JOIN department ON role.department_id = department.id",
]

EMPLOYEE_JOINS = [
    "JOIN role ON employee.role_id = role.id",
    "JOIN department ON role.department_id = department.id",
    "LEFT JOIN employee AS manager ON employee.manager_id = manager.id",
]


class TrackerService:
    """Service for the tracker's menu operations."""

    def __init__(self, manager: SchemaManager):
        """Initialize with a schema manager whose tables are set up."""
        self.manager = manager
        self.registry: TableRegistry = manager.registry
        self.departments = self.registry[department.TABLE_NAME]
        self.roles = self.registry[role.TABLE_NAME]
        self.employees = self.registry[employee.TABLE_NAME]

    # ==================== Views ====================

    async def list_departments(self) -> list[dict[str, Any]]:
        return await self.manager.select(
            department.TABLE_NAME, "*", order_by="department.id"
        )

    async def list_roles(self) -> list[dict[str, Any]]:
        return await self.manager.select(
            role.TABLE_NAME,
            [
                "role.id",
                "role.title",
                "role.salary",
                "department.name AS department",
            ],
            ROLE_JOINS,
            order_by="role.id",
        )

    async def list_employees(self) -> list[dict[str, Any]]:
        """
        List employees with role, department, salary and manager name.

        Employees without a manager get None as manager.
        """
        return await self.manager.select(
            employee.TABLE_NAME,
            [
                "employee.id",
                "employee.first_name",
                "employee.last_name",
                "role.title",
                "department.name AS department",
                "role.salary",
                f"{self._manager_name_sql()} AS manager",
            ],
            EMPLOYEE_JOINS,
            order_by="employee.id",
        )

    def _manager_name_sql(self) -> str:
        # concat() on MySQL, || on SQLite; NULL when there is no manager
        first = literal_column("manager.first_name", String)
        last = literal_column("manager.last_name", String)
        return self.manager.render_expression(first + " " + last)

    async def role_titles(self) -> list[str]:
        return await self.manager.select_column(role.TABLE_NAME, role.Columns.TITLE)

    # ==================== Prompt choices ====================

    async def department_choices(self) -> list[tuple[int, str]]:
        rows = await self.list_departments()
        return [(row["id"], row["name"]) for row in rows]

    async def role_choices(self) -> list[tuple[int, str]]:
        rows = await self.manager.select(
            role.TABLE_NAME, ["id", "title"], order_by="id"
        )
        return [(row["id"], row["title"]) for row in rows]

    async def employee_choices(self) -> list[tuple[int, str]]:
        rows = await self.manager.select(
            employee.TABLE_NAME, ["id", "first_name", "last_name"], order_by="id"
        )
        return [(row["id"], f"{row['first_name']} {row['last_name']}") for row in rows]

    # ==================== Writes ====================

    async def add_department(self, request: DepartmentCreate) -> WriteResult:
        return await self.manager.insert(self.departments, [(request.name,)])

    async def add_role(self, request: RoleCreate) -> WriteResult:
        return await self.manager.insert(
            self.roles, [(request.title, request.salary, request.department_id)]
        )

    async def add_employee(self, request: EmployeeCreate) -> WriteResult:
        return await self.manager.insert(
            self.employees,
            [(request.first_name, request.last_name, request.role_id, request.manager_id)],
        )

    async def update_employee_role(self, request: EmployeeRoleUpdate) -> WriteResult:
        return await self.manager.update(
            self.employees,
            {employee.Columns.ROLE_ID: request.role_id},
            {employee.Columns.ID: request.employee_id},
        )
