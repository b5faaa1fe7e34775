"""
Database module - store connection and table definitions.
"""
from employee_tracker.database.connections import (
    create_engine,
    connect,
    initialize_database,
    close_connection,
)
from employee_tracker.database.registry import TableRegistry, build_registry
from employee_tracker.database.tables import department, role, employee

__all__ = [
    "create_engine",
    "connect",
    "initialize_database",
    "close_connection",
    "TableRegistry",
    "build_registry",
    "department",
    "role",
    "employee",
]
