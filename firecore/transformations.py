"""
Small DataFrame helpers used to build pick-lists and tidy tables for display
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Union

import pandas as pd

from .errors import ValidationError

logger = logging.getLogger(__name__)

FilterExpr = Union[str, Callable[[pd.DataFrame], Any]]


def _require_frame(df: Any, argument: str = "df"):
    if not isinstance(df, pd.DataFrame):
        raise ValidationError(f"'{argument}' must be a data frame")


def _require_id_column(df: pd.DataFrame):
    if "id" not in df.columns:
        raise ValidationError("'df' must contain an 'id' column")


def build_named_vector(
    df: pd.DataFrame,
    name: str,
    value: str,
    filter_expr: Optional[FilterExpr] = None
) -> Dict[Any, Any]:
    """Map one column onto another, e.g. display names to ids for a select box

    Args:
        df: Source table
        name: Column whose values become the keys
        value: Column whose values become the values
        filter_expr: Optional DataFrame.query string, or a callable returning
            a boolean mask for df

    Returns:
        dict: Ordered mapping of name -> value; empty when nothing remains
    """
    _require_frame(df)

    if df.empty:
        logger.warning("'df' is empty, returning empty named vector")
        return {}

    if filter_expr is None:
        filtered = df
    elif isinstance(filter_expr, str):
        filtered = df.query(filter_expr)
    else:
        filtered = df[filter_expr(df)]

    if filtered.empty:
        logger.warning("Filter expression resulted in empty data frame")
        return {}

    return dict(zip(filtered[name].tolist(), filtered[value].tolist()))


def id_to_string(df: pd.DataFrame, column: str, id: Any) -> List[Any]:
    """Values of column for the rows whose id matches"""
    _require_frame(df)
    _require_id_column(df)

    return df.loc[df["id"] == id, column].tolist()


def string_to_id(df: pd.DataFrame, column: str, value: Any) -> List[Any]:
    """Ids of the rows whose column equals value"""
    _require_frame(df)
    _require_id_column(df)

    return df.loc[df[column] == value, "id"].tolist()


def fix_col_names(data: pd.DataFrame, prefix: Optional[str] = None) -> pd.DataFrame:
    """Turn snake_case column names into Title Case headers

    'start_time' becomes 'Start Time'. When prefix is given it is removed
    from the tidied names, so prefix='Incident ' turns 'incident_start'
    into 'Start'.
    """
    _require_frame(data, "data")

    if prefix is not None and not isinstance(prefix, str):
        raise ValidationError("'prefix' must be None or a single character string")

    def tidy(column):
        label = str(column).replace("_", " ").title()
        if prefix:
            label = label.replace(prefix, "")
        return label

    return data.rename(columns=tidy)
