"""
Audit trail of user actions
"""

import logging
import sqlite3
from typing import Any, Optional

from ..clock import TimeZoneClock
from ..errors import ValidationError
from ..timekeeping.formatting import UTC_DATETIME_FORMAT

logger = logging.getLogger(__name__)

AUDIT_INSERT = "INSERT INTO audit_log (username, date_time, user_action) VALUES (?, ?, ?)"


def resolve_username(current_user: Any) -> str:
    """Pull a display name out of whatever the app keeps its user in

    Accepts a plain string, a zero-argument callable, or an object with a
    name attribute. Anything empty becomes 'Unknown'.
    """
    try:
        if callable(current_user):
            user = current_user()
        elif hasattr(current_user, "name"):
            user = current_user.name
        else:
            user = current_user
    except Exception as e:
        logger.warning(f"Could not access current user: {e}")
        return "Unknown"

    if user is None or str(user).strip() == "":
        return "Unknown"
    return str(user)


def audit_log(
    con: sqlite3.Connection,
    user_action: str,
    current_user: Any,
    clock: Optional[TimeZoneClock] = None
) -> int:
    """Record a user action in the audit_log table

    The timestamp is written in UTC as 'YYYY-MM-DD HH:MM:SS'.

    Returns:
        int: Rows written (1 on success, 0 if the insert failed)
    """
    if not isinstance(user_action, str):
        raise ValidationError("'userAction' must be a single character string")

    username = resolve_username(current_user)
    clock = clock or TimeZoneClock("UTC")
    timestamp = clock.utcnow().strftime(UTC_DATETIME_FORMAT)

    try:
        cursor = con.execute(AUDIT_INSERT, (username, timestamp, user_action))
        con.commit()
    except sqlite3.Error as e:
        logger.warning(f"Failed to write to audit log: {e}")
        return 0

    logger.debug(f"Audit: {username} - {user_action}")
    return cursor.rowcount
