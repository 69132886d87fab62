"""
Database Connection and Operations

Handles connections to the rates database and read-only query helpers.
Each worker thread gets its own connection, since driver connections
must not be shared between threads.
"""

import threading
from pathlib import Path

import polars as pl
import redshift_connector


# Database connection parameters
HOST = "rates-db.internal"
PORT = 5439
DBNAME = "rates"
USER = "rate_sheets"


# Open connections keyed by thread id
_connections: dict[int, redshift_connector.Connection] = {}
_lock = threading.Lock()


# ============================================================================
# CONNECTION MANAGEMENT
# ============================================================================

def _read_password() -> str:
    """
    Read password from pass.txt file in the database directory.

    Returns:
        str: The database password

    Raises:
        RuntimeError: If password file is not found or is empty
    """
    path = Path(__file__).parent / "pass.txt"

    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                val = line.strip()
                if val:
                    return val

    raise RuntimeError(
        f"Password not found. Please create 'pass.txt' in {path.parent}"
    )


def get_connection(force_new: bool = False) -> redshift_connector.Connection:
    """
    Get or create the database connection for the calling thread.

    Args:
        force_new: If True, closes this thread's connection and creates a new one

    Returns:
        redshift_connector.Connection: Active database connection

    Raises:
        RuntimeError: If connection cannot be established
    """
    key = threading.get_ident()

    with _lock:
        existing = _connections.pop(key, None) if force_new else _connections.get(key)

    if existing is not None:
        if not force_new:
            return existing
        try:
            existing.close()
        except Exception:
            pass

    try:
        connection = redshift_connector.connect(
            host=HOST,
            database=DBNAME,
            port=PORT,
            user=USER,
            password=_read_password()
        )
    except Exception as e:
        raise RuntimeError(f"Failed to create database connection: {e}")

    with _lock:
        _connections[key] = connection
    return connection


def close_connection() -> None:
    """Close every open database connection."""
    with _lock:
        connections = list(_connections.values())
        _connections.clear()

    for connection in connections:
        try:
            connection.close()
        except Exception:
            pass


# ============================================================================
# QUERY HELPERS
# ============================================================================

def _format_value(value) -> str:
    """Format a value as a SQL literal."""
    if value is None:
        return "NULL"
    elif isinstance(value, str):
        return "'" + value.replace("'", "''") + "'"
    elif isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    elif hasattr(value, 'isoformat'):  # date/datetime
        return "'" + str(value) + "'"
    else:
        return str(value)


def build_filters(**equals) -> str:
    """
    Render equality predicates as a WHERE clause.

    Args:
        **equals: Column name -> value. None values are skipped.

    Returns:
        str: "where col = value and ..." or "" when nothing is filtered

    Example:
        build_filters(client_id=1240, locale="domestic")
        # "where client_id = 1240 and locale = 'domestic'"
    """
    predicates = [
        f"{column} = {_format_value(value)}"
        for column, value in equals.items()
        if value is not None
    ]
    if not predicates:
        return ""
    return "where " + " and ".join(predicates)


def pull_data(query: str) -> pl.DataFrame:
    """
    Execute a SQL query and return results as a Polars DataFrame.

    Args:
        query: SQL query string to execute

    Returns:
        pl.DataFrame: Query results (empty frame with the query's columns
        when no rows match)

    Raises:
        RuntimeError: If query execution fails

    Example:
        df = pull_data("SELECT locale, shipping_speed FROM rates GROUP BY 1, 2")
    """
    conn = get_connection()

    try:
        cursor = conn.cursor()
        cursor.execute(query)

        columns = [desc[0] for desc in cursor.description]
        rows = cursor.fetchall()
        cursor.close()

        return pl.DataFrame(
            [tuple(row) for row in rows],
            schema=columns,
            orient="row",
            infer_schema_length=None,
        )
    except Exception as e:
        raise RuntimeError(f"Error executing query: {e}")
