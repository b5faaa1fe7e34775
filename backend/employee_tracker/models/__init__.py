"""
Pydantic models for table descriptors.
"""
from employee_tracker.models.table import (
    ColumnDefinition,
    TableDescriptor,
    SeedRow,
    SeedBatch,
)

__all__ = [
    "ColumnDefinition",
    "TableDescriptor",
    "SeedRow",
    "SeedBatch",
]
