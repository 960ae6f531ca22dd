"""
Validated read queries
"""

import logging
import re
import sqlite3
from typing import Any, Optional

import pandas as pd

from ..errors import DatabaseUnavailableError, ValidationError

logger = logging.getLogger(__name__)

TABLE_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_.]+$")


def quote_identifier(name: str) -> str:
    """Quote a SQL identifier, doubling embedded quotes"""
    return '"' + name.replace('"', '""') + '"'


def qualified_table(table_name: Any) -> str:
    """Validate a 'table' or 'schema.table' name and return it quoted"""
    if not isinstance(table_name, str):
        raise ValidationError("'tableName' must be a single character string")

    if not table_name:
        raise ValidationError("'tableName' cannot be empty")

    # Only letters, numbers, underscores and periods reach the SQL text
    if not TABLE_NAME_PATTERN.match(table_name):
        raise ValidationError(
            "'tableName' contains invalid characters. "
            "Only letters, numbers, underscores, and periods are allowed"
        )

    parts = table_name.split(".")
    if len(parts) > 2 or not all(parts):
        raise ValidationError("'tableName' must be in format 'table' or 'schema.table'")

    return ".".join(quote_identifier(part) for part in parts)


def query_database(con: Optional[sqlite3.Connection], table_name: str) -> Optional[pd.DataFrame]:
    """Read every row of a table into a DataFrame

    Args:
        con: Open DB-API connection
        table_name: 'table' or 'schema.table'

    Returns:
        DataFrame of the table, or None when the query fails

    Raises:
        ValidationError: Malformed table name
        DatabaseUnavailableError: No connection supplied
    """
    quoted = qualified_table(table_name)

    if con is None:
        logger.error("Database connection not found")
        raise DatabaseUnavailableError("Database connection is not available")

    query = f"SELECT * FROM {quoted}"

    try:
        data = pd.read_sql_query(query, con)
    except (sqlite3.Error, pd.errors.DatabaseError) as e:
        logger.error(f"Database query failed for table '{table_name}': {e}")
        return None

    logger.debug(f"Read {len(data)} rows from '{table_name}'")
    return data
