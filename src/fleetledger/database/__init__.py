"""Database layer for fleetledger application."""

from fleetledger.database.base import Database, PersistenceError
from fleetledger.database.factories import create_sqlite_database

__all__ = ["Database", "PersistenceError", "create_sqlite_database"]
