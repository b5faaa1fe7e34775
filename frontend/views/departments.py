from employee_tracker.schemas.tracker import DepartmentCreate
from employee_tracker.services.tracker_service import TrackerService

from frontend.utils.formatters import format_table
from frontend.utils.prompts import Prompter


async def render(service: TrackerService, prompter: Prompter):
    rows = await service.list_departments()
    prompter.show(format_table(rows, columns=["id", "name"]))


async def add(service: TrackerService, prompter: Prompter):
    name = prompter.text("Department name")
    await service.add_department(DepartmentCreate(name=name))
    prompter.show(f"Added department {name}.")
