"""
db/connection.py
----------------
Opens and closes PostgreSQL connections.
Connections are handed to table accessors by the caller; nothing here is pooled.
"""

import psycopg2
from config import DATABASE_URL
from utils.logger import get_logger

logger = get_logger(__name__)


def get_connection(dsn: str = DATABASE_URL):
    """
    Open a new database connection.

    Args:
        dsn: libpq connection string or URL (defaults to DATABASE_URL).

    Returns:
        A psycopg2 connection object.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    try:
        conn = psycopg2.connect(dsn)
        logger.info("Database connection opened.")
        return conn
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to connect to database: {e}")
        raise


def close_connection(conn) -> None:
    """
    Close a connection previously returned by get_connection().

    Args:
        conn: The psycopg2 connection to close (None is ignored).
    """
    if conn is not None:
        conn.close()
        logger.info("Database connection closed.")
