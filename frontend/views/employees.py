from employee_tracker.schemas.tracker import EmployeeCreate, EmployeeRoleUpdate
from employee_tracker.services.tracker_service import TrackerService

from frontend.config import NO_MANAGER
from frontend.utils.formatters import format_table
from frontend.utils.prompts import Prompter

EMPLOYEE_COLUMNS = ["id", "first_name", "last_name", "title", "department", "salary", "manager"]


async def render(service: TrackerService, prompter: Prompter):
    rows = await service.list_employees()
    prompter.show(format_table(rows, columns=EMPLOYEE_COLUMNS))


async def add(service: TrackerService, prompter: Prompter):
    roles = await service.role_choices()
    if not roles:
        prompter.show("Add a role first.")
        return
    managers = await service.employee_choices()

    first_name = prompter.text("First name")
    last_name = prompter.text("Last name")
    role_id = prompter.choose("What is the employee's role?", roles)
    manager_id = prompter.choose("Who is the employee's manager?", managers, none_label=NO_MANAGER)

    await service.add_employee(
        EmployeeCreate(
            first_name=first_name,
            last_name=last_name,
            role_id=role_id,
            manager_id=manager_id,
        )
    )
    prompter.show(f"Added employee {first_name} {last_name}.")


async def update_role(service: TrackerService, prompter: Prompter):
    employees = await service.employee_choices()
    roles = await service.role_choices()
    if not employees or not roles:
        prompter.show("There are no employees or roles to update.")
        return

    employee_id = prompter.choose("Which employee's role do you want to update?", employees)
    role_id = prompter.choose("Which role do you want to assign?", roles)

    result = await service.update_employee_role(
        EmployeeRoleUpdate(employee_id=employee_id, role_id=role_id)
    )
    if result.rowcount:
        prompter.show("Updated employee's role.")
    else:
        prompter.show("No employee was updated.")
