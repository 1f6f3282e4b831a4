"""Generic SQLAlchemy database implementation."""

import logging
from typing import Any, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fleetledger.database.base import Database, PersistenceError
from fleetledger.database.models import CollectionRecord, create_session_factory

logger = logging.getLogger(__name__)


class SQLAlchemyDatabase(Database):
    """SQLAlchemy-based implementation of the Database interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy database.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    def load(self, collection: str) -> Optional[list[dict[str, Any]]]:
        """Load the records of a collection, or None if it was never saved."""
        session = self._get_session()
        try:
            record = session.get(CollectionRecord, collection)
        except SQLAlchemyError as e:
            session.rollback()
            raise PersistenceError(f"Could not load '{collection}': {e}") from e
        if record is None:
            return None
        return [dict(item) for item in record.payload]

    def save(self, collection: str, records: list[dict[str, Any]]) -> None:
        """Replace the stored records of a collection."""
        session = self._get_session()
        try:
            record = session.get(CollectionRecord, collection)
            if record is None:
                session.add(CollectionRecord(name=collection, payload=list(records)))
            else:
                record.payload = list(records)
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise PersistenceError(f"Could not save '{collection}': {e}") from e
        logger.debug("Saved %d record(s) to '%s'", len(records), collection)
