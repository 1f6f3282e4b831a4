"""Database factory functions for creating database instances."""

import logging
import os
from pathlib import Path
from typing import Optional

from fleetledger.database.sqlalchemy_db import SQLAlchemyDatabase

logger = logging.getLogger(__name__)

DB_PATH_ENV = "FLEETLEDGER_DB_PATH"
DEFAULT_DB_PATH = Path("~/.fleetledger/fleetledger.db")


def resolve_database_path(database_path: Optional[str] = None) -> Path:
    """Pick the ledger file and make sure its directory exists.

    The explicit argument wins, then FLEETLEDGER_DB_PATH, then
    ~/.fleetledger/fleetledger.db.
    """
    chosen = database_path or os.environ.get(DB_PATH_ENV) or DEFAULT_DB_PATH
    path = Path(chosen).expanduser()
    if not path.parent.is_dir():
        logger.info("Creating ledger directory %s", path.parent)
        path.parent.mkdir(parents=True, exist_ok=True)
    return path


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to the ledger file; see resolve_database_path

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    path = resolve_database_path(database_path)
    logger.debug("Using ledger database %s", path)
    return SQLAlchemyDatabase(f"sqlite:///{path}")
