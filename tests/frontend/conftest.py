"""
Frontend test fixtures and mocks.

Provides a scripted prompter and a mocked tracker service for driving the
menu without a console or a store.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from employee_tracker.schemas.write import WriteResult
from frontend.utils.prompts import Prompter


class ScriptedPrompter(Prompter):
    """Prompter that answers from a list and records everything shown."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.asked = []
        self.shown = []
        super().__init__(ask=self._ask, show=self.shown.append)

    def _ask(self, message: str) -> str:
        self.asked.append(message)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    @property
    def output(self) -> str:
        return "\n".join(self.shown)


@pytest.fixture
def scripted():
    """Factory for a prompter fed with the given answers."""
    def _scripted(*answers: str) -> ScriptedPrompter:
        return ScriptedPrompter(answers)
    return _scripted


@pytest.fixture
def mock_service():
    """Tracker service mock with the seeded departments, roles and employees."""
    service = MagicMock()
    service.list_departments = AsyncMock(return_value=[
        {"id": 1, "name": "Sales"},
        {"id": 2, "name": "Engineering"},
    ])
    service.list_roles = AsyncMock(return_value=[
        {"id": 1, "title": "Sales Lead", "salary": 100000, "department": "Sales"},
    ])
    service.list_employees = AsyncMock(return_value=[
        {
            "id": 1,
            "first_name": "John",
            "last_name": "Doe",
            "title": "Sales Lead",
            "department": "Sales",
            "salary": 100000,
            "manager": None,
        },
    ])
    service.department_choices = AsyncMock(return_value=[(1, "Sales"), (2, "Engineering")])
    service.role_choices = AsyncMock(return_value=[(1, "Sales Lead"), (2, "Salesperson")])
    service.employee_choices = AsyncMock(return_value=[(1, "John Doe")])
    service.add_department = AsyncMock(return_value=WriteResult(table="department", rowcount=1))
    service.add_role = AsyncMock(return_value=WriteResult(table="role", rowcount=1))
    service.add_employee = AsyncMock(return_value=WriteResult(table="employee", rowcount=1))
    service.update_employee_role = AsyncMock(
        return_value=WriteResult(table="employee", rowcount=1)
    )
    return service
