"""Shared fixtures for the isovin test suite."""

import pytest

from isovin.config import reset_config
from isovin.lookup import DictResolver

from samples import WMI_TABLE


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate every test from VIN_* variables and the config singleton."""
    for key in (
        'VIN_LOG_LEVEL',
        'VIN_LOG_FILE',
        'VIN_WMI_NAMESPACE',
        'VIN_LOOKUP_PLACEHOLDER',
        'VIN_WMI_TABLE',
        'VIN_SHOW_CORRECTIONS',
    ):
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def wmi_table():
    return dict(WMI_TABLE)


@pytest.fixture
def resolver(wmi_table):
    return DictResolver(wmi_table)
