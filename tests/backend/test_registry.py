"""
Tests for the schema registry and table descriptors.

These tests cover:
- Registry order and lookup
- Insertable columns and seed alignment
- Foreign-key topology
- Adding / replacing columns
"""

import pytest
from pydantic import ValidationError
from sqlalchemy import Integer, String

from employee_tracker.database.registry import TableRegistry
from employee_tracker.database.tables import department, employee, role
from employee_tracker.models.table import ColumnDefinition, TableDescriptor


class TestRegistryLookup:
    """Tests for registry ordering and lookup by name."""

    def test_tables_in_dependency_order(self, registry):
        """Referenced tables come before the tables that reference them."""
        assert registry.names == ["department", "role", "employee"]

    def test_describe_returns_descriptor(self, registry):
        assert registry.describe("role") is role.DESCRIPTOR

    def test_describe_unknown_table_returns_none(self, registry):
        assert registry.describe("salary_band") is None
        assert "salary_band" not in registry

    def test_every_reference_points_backwards(self, registry):
        """Every foreign-key target is itself or registered earlier."""
        seen = set()
        for descriptor in registry:
            for target in descriptor.foreign_key_targets:
                assert target == descriptor.name or target in seen
            seen.add(descriptor.name)

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError):
            TableRegistry([department.DESCRIPTOR, department.DESCRIPTOR])


class TestDescriptors:
    """Tests for the three fixed descriptors."""

    def test_insertable_columns_skip_auto_increment(self):
        assert department.DESCRIPTOR.insertable_columns == ["name"]
        assert role.DESCRIPTOR.insertable_columns == ["title", "salary", "department_id"]
        assert employee.DESCRIPTOR.insertable_columns == [
            "first_name",
            "last_name",
            "role_id",
            "manager_id",
        ]

    def test_seed_counts(self):
        assert department.DESCRIPTOR.seed_row_count == 4
        assert role.DESCRIPTOR.seed_row_count == 8
        assert employee.DESCRIPTOR.seed_row_count == 8

    def test_employee_seeds_managers_before_reports(self):
        """The first batch has no managers; the second references the first."""
        managers, reports = employee.DESCRIPTOR.seeds

        assert all(row[3] is None for row in managers)
        assert {row[3] for row in reports} == {1, 2, 3, 4}

    def test_foreign_key_targets(self):
        assert department.DESCRIPTOR.foreign_key_targets == []
        assert role.DESCRIPTOR.foreign_key_targets == ["department"]
        assert employee.DESCRIPTOR.foreign_key_targets == ["role", "employee"]

    def test_row_to_params_maps_positionally(self):
        params = role.DESCRIPTOR.row_to_params(("Lawyer", 190000, 4))

        assert params == {"title": "Lawyer", "salary": 190000, "department_id": 4}

    def test_row_to_params_rejects_wrong_length(self):
        with pytest.raises(ValueError):
            role.DESCRIPTOR.row_to_params(("Lawyer", 190000))

    def test_column_lookup(self):
        assert employee.DESCRIPTOR.column("manager_id").references == "employee.id"
        assert employee.DESCRIPTOR.column("salary") is None


class TestDescriptorValidation:
    """Tests for descriptor invariants."""

    def test_misaligned_seed_row_rejected(self):
        with pytest.raises(ValidationError):
            TableDescriptor(
                name="team",
                columns=(
                    ColumnDefinition(name="id", type=Integer(), nullable=False,
                                     auto_increment=True, primary_key=True),
                    ColumnDefinition(name="name", type=String(50)),
                ),
                seeds=((("Platform", "extra"),),),
            )

    def test_malformed_reference_rejected(self):
        with pytest.raises(ValidationError):
            ColumnDefinition(name="team_id", type=Integer(), references="team")

    def test_duplicate_column_rejected(self):
        with pytest.raises(ValidationError):
            TableDescriptor(
                name="team",
                columns=(
                    ColumnDefinition(name="name", type=String(50)),
                    ColumnDefinition(name="name", type=String(50)),
                ),
            )

    def test_descriptor_is_immutable(self):
        with pytest.raises(ValidationError):
            department.DESCRIPTOR.name = "dept"


class TestWithColumn:
    """Tests for adding and replacing columns."""

    def test_replace_keeps_position(self):
        wider = ColumnDefinition(name="name", type=String(500), nullable=False)

        updated = department.DESCRIPTOR.with_column(wider)

        assert updated.column_names == ["id", "name"]
        assert updated.column("name").type.length == 500
        # Original is untouched
        assert department.DESCRIPTOR.column("name").type.length == 255

    def test_new_column_is_appended(self):
        """Appending an insertable column invalidates seeds of the old width."""
        budget = ColumnDefinition(name="budget", type=Integer())
        unseeded = department.DESCRIPTOR.model_copy(update={"seeds": ()})

        updated = unseeded.with_column(budget)

        assert updated.column_names == ["id", "name", "budget"]
        assert updated.insertable_columns == ["name", "budget"]

    def test_append_rechecks_seed_alignment(self):
        with pytest.raises(ValidationError):
            department.DESCRIPTOR.with_column(ColumnDefinition(name="budget", type=Integer()))
