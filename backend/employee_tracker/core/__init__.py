"""
Core module - Error taxonomy and logging setup.
"""
from employee_tracker.core.exceptions import (
    TrackerError,
    ConfigurationError,
    DatabaseConnectionError,
    StatementError,
)
from employee_tracker.core.logging import configure_logging

__all__ = [
    "TrackerError",
    "ConfigurationError",
    "DatabaseConnectionError",
    "StatementError",
    "configure_logging",
]
