"""
Role table definition.
Stores job titles, their salary and owning department.
"""
from sqlalchemy import Integer, Numeric, String

from employee_tracker.database.tables import department
from employee_tracker.models.table import ColumnDefinition, TableDescriptor

TABLE_NAME = "role"


class Columns:
    """Column names in the role table."""
    ID = "id"
    TITLE = "title"
    SALARY = "salary"
    DEPARTMENT_ID = "department_id"


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
        ColumnDefinition(name=Columns.TITLE, type=String(255), nullable=False),
        ColumnDefinition(name=Columns.SALARY, type=Numeric(12, 2), nullable=False),
        ColumnDefinition(
            name=Columns.DEPARTMENT_ID,
            type=Integer(),
            references=f"{department.TABLE_NAME}.{department.Columns.ID}",
        ),
    ),
    seeds=(
        (
            ("Sales Lead", 100000, 1),
            ("Salesperson", 80000, 1),
            ("Lead Engineer", 150000, 2),
            ("Software Engineer", 120000, 2),
            ("Account Manager", 160000, 3),
            ("Accountant", 125000, 3),
            ("Legal Team Lead", 250000, 4),
            ("Lawyer", 190000, 4),
        ),
    ),
)
