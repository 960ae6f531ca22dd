"""
Shared fixtures
"""

import pytest

from firecore.config import TimeSettings


@pytest.fixture
def settings():
    """Settings for a Denver station"""
    return TimeSettings(local_tz="America/Denver")
