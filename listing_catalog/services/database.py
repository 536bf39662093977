"""Read-only datastore handle.

This module provides ``PropertyDatabase``, the process-wide handle on
the SQLite listing datastore. It is constructed explicitly and passed
to the query functions rather than living in module globals, so tests
can open their own seeded copy.
"""

import atexit
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

from sqlalchemy import Engine, create_engine, event, text
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


def read_only_url(path: Union[str, Path]) -> str:
    """Build a SQLAlchemy URL that opens ``path`` in SQLite read-only mode.

    Args:
        path: Filesystem path of the SQLite database.

    Returns:
        ``sqlite+pysqlite`` URL using a ``file:`` URI with ``mode=ro``.
    """
    resolved = Path(path).resolve()
    return f"sqlite+pysqlite:///file:{resolved.as_posix()}?mode=ro&uri=true"


class PropertyDatabase:
    """Shared read-only connection to the listing datastore.

    One SQLite connection is opened for the lifetime of the process
    and shared by every session (``StaticPool``). Nothing is ever
    written, so sessions never commit.

    Attributes:
        path: Location of the database file.
        engine: SQLAlchemy engine bound to the single connection.
    """

    def __init__(self, path: Union[str, Path], echo: bool = False) -> None:
        self.path = Path(path)
        if not self.path.is_file():
            raise FileNotFoundError(f"Listing datastore not found: {self.path}")

        self.engine: Optional[Engine] = create_engine(
            read_only_url(self.path),
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        event.listen(self.engine, "connect", _enable_query_only)

        self._sessions = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
        )
        atexit.register(self.close)
        logger.info(f"Opened listing datastore read-only: {self.path}")

    @property
    def closed(self) -> bool:
        return self.engine is None

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Provide a session on the shared connection.

        Yields:
            Session: SQLAlchemy session; rolled back and closed on exit.

        Raises:
            RuntimeError: If the handle has already been closed.
        """
        if self.engine is None:
            raise RuntimeError("Listing datastore is closed")
        db = self._sessions()
        try:
            yield db
        finally:
            db.rollback()
            db.close()

    def ping(self) -> None:
        """Run ``SELECT 1`` to confirm the datastore is readable."""
        with self.session() as db:
            db.execute(text("SELECT 1")).scalar()

    def close(self) -> None:
        """Dispose of the engine. Safe to call more than once."""
        if self.engine is None:
            return
        self.engine.dispose()
        self.engine = None
        atexit.unregister(self.close)
        logger.info(f"Closed listing datastore: {self.path}")


def _enable_query_only(dbapi_connection, connection_record) -> None:
    # Second guard on top of mode=ro
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA query_only = ON")
    cursor.close()
