"""
User-facing alerts for Streamlit apps
"""

import logging

import streamlit as st

logger = logging.getLogger(__name__)

ALERT_ICONS = {
    "error": ":warning:",
    "success": ":white_check_mark:",
    "warning": ":warning:",
    "info": ":information_source:",
}


def show_alert(title: str, text: str, kind: str = "info"):
    """Show a titled alert box in the running Streamlit app"""
    renderers = {
        "error": st.error,
        "success": st.success,
        "warning": st.warning,
        "info": st.info,
    }
    if kind not in renderers:
        raise ValueError(f"Unknown alert kind: '{kind}'")

    logger.debug(f"Alert ({kind}): {title}")
    renderers[kind](f"{ALERT_ICONS[kind]} **{title}**: {text}")
