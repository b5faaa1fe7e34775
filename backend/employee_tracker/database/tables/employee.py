"""
Employee table definition.
Stores employees, their role and (optionally) their manager.

The second seed batch references managers inserted by the first, so the
batches must be loaded in order.
"""
from sqlalchemy import Integer, String

from employee_tracker.database.tables import role
from employee_tracker.models.table import ColumnDefinition, TableDescriptor

TABLE_NAME = "employee"


class Columns:
    """Column names in the employee table."""
    ID = "id"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    ROLE_ID = "role_id"
    MANAGER_ID = "manager_id"


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
        ColumnDefinition(name=Columns.FIRST_NAME, type=String(255)),
        ColumnDefinition(name=Columns.LAST_NAME, type=String(255)),
        ColumnDefinition(
            name=Columns.ROLE_ID,
            type=Integer(),
            references=f"{role.TABLE_NAME}.{role.Columns.ID}",
        ),
        ColumnDefinition(
            name=Columns.MANAGER_ID,
            type=Integer(),
            references=f"{TABLE_NAME}.{Columns.ID}",
        ),
    ),
    seeds=(
        # Managers
        (
            ("John", "Doe", 1, None),
            ("Ashley", "Rodriguez", 3, None),
            ("Kunal", "Singh", 5, None),
            ("Sarah", "Lourd", 7, None),
        ),
        # Reports
        (
            ("Mike", "Chan", 2, 1),
            ("Kevin", "Tupik", 4, 2),
            ("Malia", "Brown", 6, 3),
            ("Tom", "Allen", 8, 4),
        ),
    ),
)
