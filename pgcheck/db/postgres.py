import psycopg2
import logging

logger = logging.getLogger(__name__)


class DriverError(Exception):
    """Raised when the driver fails to open or close a connection."""


class PostgresHandle:
    """Thin wrapper exposing open/close state of a psycopg2 connection."""

    def __init__(self, conn):
        self._conn = conn

    def is_open(self) -> bool:
        # psycopg2 reports 0 while the connection is usable
        return self._conn is not None and self._conn.closed == 0

    def close(self):
        try:
            self._conn.close()
        except psycopg2.Error as e:
            raise DriverError(str(e).strip()) from e


class PostgresConnector:
    """
    PostgreSQL connector used by the connectivity check.
    Accepts a postgresql:// URL plus credentials, the way a JDBC-style
    driver manager would.
    """

    def connect(self, url: str, username: str, password: str) -> PostgresHandle:
        try:
            conn = psycopg2.connect(url, user=username, password=password)
        except psycopg2.Error as e:
            message = str(e).strip()
            logger.debug(f"PostgreSQL Connection Error ({url}): {message}")
            raise DriverError(message) from e
        return PostgresHandle(conn)
