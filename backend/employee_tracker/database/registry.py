"""
Schema registry.

Holds the table descriptors in dependency order: referenced tables come
before the tables that reference them (department, role, employee).
"""
from typing import Iterable, Iterator, Optional

from employee_tracker.database.tables import department, role, employee
from employee_tracker.models.table import TableDescriptor


class TableRegistry:
    """Immutable, ordered collection of table descriptors with lookup by name."""

    def __init__(self, descriptors: Iterable[TableDescriptor]):
        self._descriptors = tuple(descriptors)
        self._by_name = {d.name: d for d in self._descriptors}
        if len(self._by_name) != len(self._descriptors):
            raise ValueError("Table names in a registry must be unique")

    def describe(self, name: str) -> Optional[TableDescriptor]:
        """Get the descriptor for `name`, or None when it is not registered."""
        return self._by_name.get(name)

    def __getitem__(self, name: str) -> TableDescriptor:
        return self._by_name[name]

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[TableDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    @property
    def names(self) -> list[str]:
        return [d.name for d in self._descriptors]

    @property
    def descriptors(self) -> tuple[TableDescriptor, ...]:
        return self._descriptors


# All table descriptors, referenced tables first
ALL_TABLES = (
    department.DESCRIPTOR,
    role.DESCRIPTOR,
    employee.DESCRIPTOR,
)


def build_registry() -> TableRegistry:
    """Build the employee tracker registry. Called once at startup."""
    return TableRegistry(ALL_TABLES)
