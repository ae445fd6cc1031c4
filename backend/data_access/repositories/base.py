"""
Base repository with PostgreSQL connection management.

Wraps each operation in its own connection: commit on success,
rollback and re-raise on failure, close in all cases.
"""

import logging
from contextlib import contextmanager
from typing import Generator, Any

from database_postgres import get_connection

logger = logging.getLogger(__name__)


class BaseRepository:
    """
    Base class for all repositories.

    Subclasses should use self.connection() for writes and
    self.read_connection() for queries.
    """

    @contextmanager
    def connection(self, auto_commit: bool = True) -> Generator[Any, None, None]:
        """
        Context manager for database connections.

        Args:
            auto_commit: If True, commit the transaction on successful exit.

        Yields:
            A tuple of (connection, cursor) for database operations.

        Example:
            with self.connection() as (conn, cursor):
                cursor.execute("UPDATE key_value SET value = %s", ("3",))
        """
        conn = get_connection()
        cursor = conn.cursor()
        try:
            yield conn, cursor
            if auto_commit:
                conn.commit()
        except Exception as e:
            logger.error(f"Rolling back transaction: {e}")
            conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()

    @contextmanager
    def read_connection(self) -> Generator[Any, None, None]:
        """
        Context manager for read-only operations; never commits.

        Yields:
            A tuple of (connection, cursor) for database operations.
        """
        conn = get_connection()
        cursor = conn.cursor()
        try:
            yield conn, cursor
        finally:
            cursor.close()
            conn.close()
