"""
db/connection.py
----------------
Manages the PostgreSQL connection pool and exposes `DataStore`,
the single query-execution primitive the repositories depend on.
"""

from typing import Any, Optional, Sequence

import psycopg2
from psycopg2 import pool, extras

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: Optional[pool.SimpleConnectionPool] = None


def init_pool(min_conn: int = DB_POOL_MIN, max_conn: int = DB_POOL_MAX) -> None:
    """
    Initialize the process-wide connection pool. Calling it again is a no-op.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    global _pool
    if _pool is not None:
        return
    try:
        _pool = pool.SimpleConnectionPool(min_conn, max_conn, DATABASE_URL)
        logger.info(f"Connection pool ready ({min_conn}-{max_conn} connections).")
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise


def get_connection():
    """
    Borrow a connection from the pool.

    Raises:
        RuntimeError: If the pool has not been initialized.
    """
    if _pool is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    return _pool.getconn()


def release_connection(conn) -> None:
    """Return a borrowed connection to the pool."""
    if _pool is not None:
        _pool.putconn(conn)


def close_pool() -> None:
    """Close all connections in the pool."""
    global _pool
    if _pool is not None:
        _pool.closeall()
        _pool = None
        logger.info("Database connection pool closed.")


class DataStore:
    """
    Pool-backed relational data store.

    Repositories receive an instance of this class (or any object with the
    same `paramstyle` attribute and `execute` method) instead of reaching
    for the pool directly, so tests can hand them a fake.
    """

    paramstyle = "format"

    def execute(
        self, statement: str, params: Sequence[Any] = (), commit: bool = False
    ) -> list[dict]:
        """
        Run one statement and return its rows as dicts.

        Args:
            statement: SQL text with `%s` markers.
            params: Values bound to the markers, in order.
            commit: Commit the transaction after a successful run.

        Returns:
            Every row produced by the statement; an empty list when the
            statement produces none.

        Raises:
            psycopg2.Error: Propagated unchanged after a rollback.
        """
        conn = get_connection()
        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                cur.execute(statement, tuple(params))
                rows = [dict(r) for r in cur.fetchall()] if cur.description else []
            if commit:
                conn.commit()
            else:
                conn.rollback()
            return rows
        except Exception as e:
            conn.rollback()
            logger.error(f"Statement failed: {e}")
            raise
        finally:
            release_connection(conn)
