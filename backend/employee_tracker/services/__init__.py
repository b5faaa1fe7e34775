"""
Service layer for schema management and tracker operations.
"""
from employee_tracker.services.schema_manager import SchemaManager
from employee_tracker.services.tracker_service import TrackerService

__all__ = [
    "SchemaManager",
    "TrackerService",
]
