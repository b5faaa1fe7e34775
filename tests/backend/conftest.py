"""
Backend-specific test fixtures.

MySQL-only behaviour (CREATE DATABASE / USE, catalog lookups, AUTO_INCREMENT
DDL) is tested against a mocked connection carrying a real MySQL dialect.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import mysql

from employee_tracker.config import Settings, load_settings


@pytest.fixture
def mysql_settings(isolated_env) -> Settings:
    """Settings for the default MySQL store."""
    return load_settings(
        db_host="db.local",
        db_user="tracker",
        db_password="secret",
        db_name="employee_tracker",
    )


@pytest.fixture
def mysql_connection():
    """
    Mock AsyncConnection with a MySQL dialect.

    `execute` is an AsyncMock, so issued statements can be read back from
    `mysql_connection.execute.call_args_list`. Catalog lookups read
    `execute.return_value.scalar`, which reports no table by default.
    """
    connection = MagicMock()
    connection.dialect = mysql.dialect()
    connection.execute = AsyncMock(return_value=MagicMock())
    connection.execute.return_value.scalar.return_value = 0
    return connection


@pytest.fixture
def executed_sql():
    """Return the SQL of every statement sent to a mocked connection, as its dialect renders it."""
    def _executed(connection) -> list[str]:
        return [
            str(call.args[0].compile(dialect=connection.dialect)).strip()
            for call in connection.execute.call_args_list
        ]
    return _executed
