"""
Table descriptor models.

A descriptor is the static description of one store table: its columns, in
declaration order, and the seed rows loaded when the table is set up.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from sqlalchemy import Column, ForeignKey, MetaData, Table
from sqlalchemy.types import TypeEngine

SeedRow = tuple[Any, ...]
SeedBatch = tuple[SeedRow, ...]


class ColumnDefinition(BaseModel):
    """
    One column of a table descriptor.

    `references` names the target as "<table>.<column>"; the foreign key is
    emitted with ON DELETE SET NULL.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., min_length=1)
    type: TypeEngine
    nullable: bool = True
    auto_increment: bool = False
    primary_key: bool = False
    references: Optional[str] = None

    @field_validator("references")
    @classmethod
    def _check_reference(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            table, _, column = value.partition(".")
            if not table or not column:
                raise ValueError(f"Foreign key reference must be 'table.column', got {value!r}")
        return value

    @property
    def insertable(self) -> bool:
        return not self.auto_increment

    @property
    def referenced_table(self) -> Optional[str]:
        if self.references is None:
            return None
        return self.references.partition(".")[0]

    def to_column(self) -> Column:
        """Build the SQLAlchemy column for this definition."""
        args = []
        if self.references is not None:
            args.append(ForeignKey(self.references, ondelete="SET NULL"))
        return Column(
            self.name,
            self.type,
            *args,
            nullable=self.nullable,
            primary_key=self.primary_key,
            autoincrement=self.auto_increment if self.primary_key else False,
        )


class TableDescriptor(BaseModel):
    """Static description of a table: name, ordered columns, seed batches."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., min_length=1)
    columns: tuple[ColumnDefinition, ...]
    seeds: tuple[SeedBatch, ...] = ()

    @model_validator(mode="after")
    def _check_layout(self) -> "TableDescriptor":
        names = [column.name for column in self.columns]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate column names in table {self.name!r}")

        width = len(self.insertable_columns)
        for batch in self.seeds:
            for row in batch:
                if len(row) != width:
                    raise ValueError(
                        f"Seed row {row!r} for table {self.name!r} has {len(row)} "
                        f"values, expected {width}"
                    )
        return self

    @property
    def insertable_columns(self) -> list[str]:
        """Names of the columns a row supplies values for, in declaration order."""
        return [column.name for column in self.columns if column.insertable]

    @property
    def column_names(self) -> list[str]:
        return [column.name for column in self.columns]

    @property
    def foreign_key_targets(self) -> list[str]:
        """Tables referenced by this one, in column order, self references included."""
        targets = []
        for column in self.columns:
            target = column.referenced_table
            if target is not None and target not in targets:
                targets.append(target)
        return targets

    @property
    def seed_row_count(self) -> int:
        return sum(len(batch) for batch in self.seeds)

    def column(self, name: str) -> Optional[ColumnDefinition]:
        for column in self.columns:
            if column.name == name:
                return column
        return None

    def with_column(self, column: ColumnDefinition) -> "TableDescriptor":
        """
        Return a copy with `column` added.

        A column with the same name is replaced in place; otherwise the
        column is appended. Seed rows are validated against the new layout.
        """
        columns = list(self.columns)
        for index, existing in enumerate(columns):
            if existing.name == column.name:
                columns[index] = column
                break
        else:
            columns.append(column)
        return TableDescriptor(name=self.name, columns=tuple(columns), seeds=self.seeds)

    def row_to_params(self, row: SeedRow) -> dict[str, Any]:
        """Map a positional row onto the insertable columns."""
        columns = self.insertable_columns
        if len(row) != len(columns):
            raise ValueError(
                f"Row {tuple(row)!r} for table {self.name!r} has {len(row)} values, "
                f"expected {len(columns)} ({', '.join(columns)})"
            )
        return dict(zip(columns, row))

    def to_table(self, metadata: MetaData) -> Table:
        """Build (or fetch) the SQLAlchemy table for this descriptor in `metadata`."""
        if self.name in metadata.tables:
            return metadata.tables[self.name]
        return Table(self.name, metadata, *(column.to_column() for column in self.columns))
