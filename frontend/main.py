"""
Employee Tracker - console menu.

Usage:
    employee-tracker [--reset] [--seed] [--env-file PATH]

Environment Variables:
    DB_HOST, DB_USER, DB_PASSWORD, DB_NAME: Store connection (required)
    DB_PORT: Store port (default: 3306)
    DB_DRIVER: SQLAlchemy driver (default: mysql+aiomysql)
    LOG_LEVEL: Logging level (default: INFO)
"""
import argparse
import asyncio
import logging
import sys
from typing import Optional

from pydantic import ValidationError

from employee_tracker.config import Settings, load_settings
from employee_tracker.core.exceptions import TrackerError
from employee_tracker.core.logging import configure_logging
from employee_tracker.main import lifespan
from employee_tracker.services.tracker_service import TrackerService

from frontend import config
from frontend.utils.prompts import Prompter
from frontend.views import departments, employees, roles

logger = logging.getLogger("employee_tracker.menu")

ACTIONS = {
    config.VIEW_EMPLOYEES: employees.render,
    config.ADD_EMPLOYEE: employees.add,
    config.UPDATE_EMPLOYEE_ROLE: employees.update_role,
    config.VIEW_ROLES: roles.render,
    config.ADD_ROLE: roles.add,
    config.VIEW_DEPARTMENTS: departments.render,
    config.ADD_DEPARTMENT: departments.add,
}


async def run_menu(service: TrackerService, prompter: Prompter) -> None:
    """
    Show the menu until the user quits.

    A failing selection is reported and the loop goes on; only startup
    failures end the program.
    """
    while True:
        try:
            index = prompter.select("What would you like to do?", config.MENU_CHOICES)
        except (EOFError, KeyboardInterrupt):
            break

        choice = config.MENU_CHOICES[index]
        if choice == config.QUIT:
            break

        try:
            await ACTIONS[choice](service, prompter)
        except (TrackerError, ValidationError) as e:
            logger.error(f"{choice} failed: {e}")
            prompter.show(f"Could not complete '{choice}': {e}")
        except (EOFError, KeyboardInterrupt):
            break

    prompter.show("Goodbye!")


async def run(
    settings: Settings,
    reset: bool = False,
    seed: bool = False,
    prompter: Optional[Prompter] = None,
) -> None:
    async with lifespan(settings, force_recreate=reset, seed=seed) as service:
        await run_menu(service, prompter or Prompter())


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="employee-tracker",
        description="Manage departments, roles and employees.",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="drop and recreate every table on startup",
    )
    parser.add_argument(
        "--seed",
        action="store_true",
        help="load the sample departments, roles and employees",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="read settings from this file instead of .env",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)

    try:
        settings = load_settings(env_file=args.env_file)
    except TrackerError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level)
    print(config.APP_NAME)

    try:
        asyncio.run(run(settings, reset=args.reset, seed=args.seed))
    except TrackerError as e:
        logger.error(f"Employee Tracker stopped: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
