"""
Table definitions and column constants.
"""
from employee_tracker.database.tables import department, role, employee

__all__ = ["department", "role", "employee"]
