"""
Reporting the outcome of database writes to the user
"""

import logging
import math
import numbers
from typing import Any, Optional

from ..errors import ValidationError
from ..ui.notifications import show_alert

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def check_write_result(
    result: Any,
    success_message: str = "Write successful.",
    context: Optional[str] = None,
    expected_min: float = 0,
    expected_max: float = 1,
    show_message: bool = True
) -> bool:
    """Check the affected-row count of a write and tell the user how it went

    A result that is not a number, is NaN, or falls outside
    [expected_min, expected_max] counts as a failure: it is logged and an
    error alert is shown. Otherwise a success alert is shown (when
    show_message is set) and the success is logged.

    Returns:
        bool: True when the write succeeded
    """
    if not isinstance(success_message, str):
        raise ValidationError("'successMessage' must be a single character string")

    if context is not None and not isinstance(context, str):
        raise ValidationError("'context' must be None or a single character string")

    if not _is_number(expected_min) or not _is_number(expected_max):
        raise ValidationError("'expectedMin' and 'expectedMax' must be numeric")

    if expected_min > expected_max:
        raise ValidationError("'expectedMin' must be less than or equal to 'expectedMax'")

    if not isinstance(show_message, bool):
        raise ValidationError("'showMessage' must be True or False")

    context_text = f"when {context}" if context else ""

    if (
        not _is_number(result)
        or math.isnan(result)
        or result < expected_min
        or result > expected_max
    ):
        logger.error(
            f"Database write failed {context_text}. "
            f"Result: {result}, Expected: {expected_min}-{expected_max}"
        )
        show_alert(
            "Error",
            f"Database write failed {context_text}. Result: {result}. "
            "Please contact your application administrator.",
            kind="error"
        )
        return False

    if show_message:
        show_alert("Success", success_message, kind="success")

    logger.info(f"Database write successful {context_text}. Rows affected: {result}")
    return True
