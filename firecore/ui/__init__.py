"""
UI helpers for Streamlit interface
"""

from .notifications import show_alert

__all__ = [
    'show_alert',
]
