"""
Shared fixtures: every test starts from default settings.
"""
import pytest

from core.config import reset_settings

SETTINGS_ENV_VARS = [
    "APP_NAME",
    "HOST",
    "PORT",
    "LOG_LEVEL",
    "CURRENCY_SYMBOL",
    "INCOME_CATEGORIES",
    "EXPENSE_CATEGORIES",
    "SEED_DEMO_DATA",
    "REPLY_DELAY_MS",
]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Clear settings env vars and the settings singleton around each test."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
