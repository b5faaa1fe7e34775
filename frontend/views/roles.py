from employee_tracker.schemas.tracker import RoleCreate
from employee_tracker.services.tracker_service import TrackerService

from frontend.utils.formatters import format_table
from frontend.utils.prompts import Prompter


async def render(service: TrackerService, prompter: Prompter):
    rows = await service.list_roles()
    prompter.show(format_table(rows, columns=["id", "title", "department", "salary"]))


async def add(service: TrackerService, prompter: Prompter):
    departments = await service.department_choices()
    if not departments:
        prompter.show("Add a department first.")
        return

    title = prompter.text("Role title")
    salary = prompter.number("Salary")
    department_id = prompter.choose("Which department does the role belong to?", departments)

    await service.add_role(RoleCreate(title=title, salary=salary, department_id=department_id))
    prompter.show(f"Added role {title}.")
