"""
Global test fixtures for Employee Tracker.

This module provides shared fixtures for all tests including:
- SQLite settings (in-memory store, no .env lookup)
- Schema manager on a fresh store
- Seeded schema manager and tracker service
"""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add backend and repository root to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "backend"))
sys.path.insert(0, str(ROOT))

from employee_tracker.config import Settings, load_settings  # noqa: E402
from employee_tracker.database.connections import connect  # noqa: E402
from employee_tracker.database.registry import TableRegistry, build_registry  # noqa: E402
from employee_tracker.services.schema_manager import SchemaManager  # noqa: E402
from employee_tracker.services.tracker_service import TrackerService  # noqa: E402


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """
    Run from an empty directory with no DB_* variables set, so neither a
    stray .env file nor the developer's environment leaks into settings.
    """
    monkeypatch.chdir(tmp_path)
    for name in ("DB_HOST", "DB_USER", "DB_PASSWORD", "DB_NAME", "DB_PORT", "DB_DRIVER", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def sqlite_settings(isolated_env) -> Settings:
    """Settings for an in-memory SQLite store."""
    return load_settings(
        db_host="localhost",
        db_user="tracker",
        db_password="secret",
        db_name=":memory:",
        db_driver="sqlite+aiosqlite",
    )


@pytest.fixture
def registry() -> TableRegistry:
    return build_registry()


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def manager(sqlite_settings, registry):
    """Schema manager connected to a fresh, empty store."""
    connection = await connect(sqlite_settings)
    schema_manager = SchemaManager(connection, sqlite_settings, registry)
    await schema_manager.initialize()
    yield schema_manager
    await schema_manager.close()


@pytest_asyncio.fixture
async def seeded_manager(manager):
    """Schema manager with every table recreated and seeded."""
    await manager.setup_all(force_recreate=True, seed=True)
    yield manager


@pytest_asyncio.fixture
async def tracker(seeded_manager) -> TrackerService:
    return TrackerService(seeded_manager)


@pytest.fixture
def count_rows():
    """Count the rows of a table through the manager's select."""
    async def _count(schema_manager: SchemaManager, table_name: str) -> int:
        rows = await schema_manager.select(table_name, "COUNT(*) AS total")
        return rows[0]["total"]
    return _count
