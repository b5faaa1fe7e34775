"""
Centralized formatting utilities for the console UI.
"""
from typing import Any, Iterable, Optional, Sequence

import pandas as pd

from frontend.config import CURRENCY_COLUMNS


def format_currency(value: float, decimals: int = 0) -> str:
    """Format as currency with $ prefix."""
    try:
        if value is None:
            return "-"
        return f"${float(value):,.{decimals}f}"
    except Exception:
        return "-"


def format_name(first_name: Optional[str], last_name: Optional[str]) -> str:
    """Full name, or "-" when both parts are missing."""
    name = " ".join(part for part in (first_name, last_name) if part)
    return name or "-"


def format_choice(index: int, label: str) -> str:
    """Numbered menu line."""
    return f"{index:>2}) {label}"


def format_table(
    rows: Sequence[dict[str, Any]],
    columns: Optional[Iterable[str]] = None,
    currency_columns: Iterable[str] = CURRENCY_COLUMNS,
) -> str:
    """
    Render result rows as a text table.

    Args:
        rows: Result rows (column name -> value)
        columns: Columns to show, in order (all columns by default)
        currency_columns: Columns formatted with format_currency

    Returns:
        The table as text, without the DataFrame index
    """
    df = pd.DataFrame(list(rows), columns=list(columns) if columns is not None else None)
    if df.empty:
        return "(no rows)"

    for column in currency_columns:
        if column in df.columns:
            df[column] = df[column].map(lambda v: format_currency(v) if pd.notna(v) else None)

    df = df.astype(object).where(df.notna(), "-")
    return df.to_string(index=False)
