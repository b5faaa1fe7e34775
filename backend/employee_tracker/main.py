"""
Employee Tracker Backend

Manages a small relational schema of departments, roles and employees.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from employee_tracker.config import Settings, get_settings
from employee_tracker.database.registry import TableRegistry, build_registry
from employee_tracker.services.schema_manager import SchemaManager
from employee_tracker.services.tracker_service import TrackerService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(
    settings: Optional[Settings] = None,
    registry: Optional[TableRegistry] = None,
    force_recreate: bool = False,
    seed: bool = False,
) -> AsyncIterator[TrackerService]:
    """
    Application lifespan manager.

    Startup:
    - Connect to the store
    - Create and select the database
    - Set up (and optionally recreate / seed) every table

    Shutdown:
    - Close the store connection
    """
    if settings is None:
        settings = get_settings()
    if registry is None:
        registry = build_registry()

    logger.info("Starting up Employee Tracker...")
    manager = await SchemaManager.open(
        settings, registry, force_recreate=force_recreate, seed=seed
    )
    logger.info("✓ Database initialized and tables ready")

    try:
        yield TrackerService(manager)
    finally:
        logger.info("Shutting down Employee Tracker...")
        await manager.close()
        logger.info("✓ Database connection closed")
