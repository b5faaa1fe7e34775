"""
Tracker request schemas.

Presence checks only: names must be non-empty and ids must be given.
"""
from typing import Optional

from pydantic import BaseModel, Field


class DepartmentCreate(BaseModel):
    """Add department request."""
    name: str = Field(..., min_length=1, max_length=255, description="Department name")


class RoleCreate(BaseModel):
    """Add role request."""
    title: str = Field(..., min_length=1, max_length=255, description="Role title")
    salary: float = Field(..., description="Yearly salary")
    department_id: int = Field(..., description="Owning department ID")


class EmployeeCreate(BaseModel):
    """Add employee request."""
    first_name: str = Field(..., min_length=1, max_length=255, description="First name")
    last_name: str = Field(..., min_length=1, max_length=255, description="Last name")
    role_id: int = Field(..., description="Role ID")
    manager_id: Optional[int] = Field(None, description="Manager's employee ID, if any")


class EmployeeRoleUpdate(BaseModel):
    """Update employee role request."""
    employee_id: int = Field(..., description="Employee ID")
    role_id: int = Field(..., description="New role ID")
