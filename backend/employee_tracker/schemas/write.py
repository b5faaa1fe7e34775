"""
Write acknowledgement schema.
"""
from typing import Optional

from pydantic import BaseModel, Field


class WriteResult(BaseModel):
    """Acknowledgement of an insert or update."""
    table: str = Field(..., description="Table written to")
    rowcount: int = Field(..., description="Rows affected as reported by the store")
    last_insert_id: Optional[int] = Field(
        None, description="Primary key of the inserted row (single-row inserts only)"
    )
