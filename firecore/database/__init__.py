"""
Database helpers: validated reads, write checks and the audit trail
"""

from .queries import query_database, qualified_table
from .writes import check_write_result
from .audit import audit_log

__all__ = [
    'query_database',
    'qualified_table',
    'check_write_result',
    'audit_log',
]
