"""
Pydantic schemas for tracker requests and write acknowledgements.
"""
from employee_tracker.schemas.write import WriteResult
from employee_tracker.schemas.tracker import (
    DepartmentCreate,
    RoleCreate,
    EmployeeCreate,
    EmployeeRoleUpdate,
)

__all__ = [
    "WriteResult",
    "DepartmentCreate",
    "RoleCreate",
    "EmployeeCreate",
    "EmployeeRoleUpdate",
]
