"""
Department table definition.
Stores the company's departments.
"""
from sqlalchemy import Integer, String

from employee_tracker.models.table import ColumnDefinition, TableDescriptor

TABLE_NAME = "department"


class Columns:
    """Column names in the department table."""
    ID = "id"
    NAME = "name"


DESCRIPTOR = TableDescriptor(
    name=TABLE_NAME,
    columns=(
        ColumnDefinition(
            name=Columns.ID,
            type=Integer(),
            nullable=False,
            auto_increment=True,
            primary_key=True,
        ),
        ColumnDefinition(name=Columns.NAME, type=String(255), nullable=False),
    ),
    seeds=(
        (
            ("Sales",),
            ("Engineering",),
            ("Finance",),
            ("Legal",),
        ),
    ),
)
