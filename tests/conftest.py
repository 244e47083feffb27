"""
Shared pytest fixtures
"""

import pytest

from netvalidators.utils.config import reset_settings


@pytest.fixture
def clean_settings(monkeypatch):
    """
    Drop cached settings before and after a test so NETVALIDATORS_*
    variables set through monkeypatch take effect and do not leak.
    """
    reset_settings()
    yield monkeypatch
    reset_settings()


@pytest.fixture
def inet_rule():
    from netvalidators.rules.inet_address import InetAddressRule
    return InetAddressRule()
