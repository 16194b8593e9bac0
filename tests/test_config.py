"""
Unit tests for configuration module.
"""
import pytest
from pydantic import ValidationError

from core.config import get_settings, reset_settings
from core.schema import CategoryCatalog


def test_settings_defaults():
    """Test default configuration values."""
    settings = get_settings()
    assert settings.app_name == "Finance Chat"
    assert settings.host == "0.0.0.0"
    assert settings.port == 8000
    assert settings.log_level == "INFO"
    assert settings.currency_symbol == "$"
    assert settings.income_categories == ["Salary", "Freelance", "Investment", "Gift", "Other"]
    assert settings.expense_categories == [
        "Food", "Transport", "Shopping", "Bills", "Entertainment", "Health", "Other"
    ]
    assert settings.seed_demo_data is True
    assert settings.reply_delay_ms == 800


def test_settings_validation_port(monkeypatch):
    """Test port validation."""
    monkeypatch.setenv("PORT", "99999")
    with pytest.raises(ValidationError):
        get_settings()


def test_settings_validation_log_level(monkeypatch):
    """Test log level validation."""
    monkeypatch.setenv("LOG_LEVEL", "INVALID")
    with pytest.raises(ValidationError):
        get_settings()


def test_settings_log_level_is_uppercased(monkeypatch):
    """Test log level is normalized to upper case."""
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert get_settings().log_level == "DEBUG"


def test_settings_categories_from_env(monkeypatch):
    """Test catalog override through JSON env vars."""
    monkeypatch.setenv("INCOME_CATEGORIES", '["Salary", " Bonus "]')
    monkeypatch.setenv("EXPENSE_CATEGORIES", '["Rent"]')
    settings = get_settings()
    assert settings.income_categories == ["Salary", "Bonus"]
    assert settings.catalog() == CategoryCatalog(income=("Salary", "Bonus"), expense=("Rent",))


def test_settings_rejects_empty_catalog(monkeypatch):
    """Test an empty category list is rejected."""
    monkeypatch.setenv("EXPENSE_CATEGORIES", "[]")
    with pytest.raises(ValidationError):
        get_settings()


def test_settings_rejects_blank_category(monkeypatch):
    """Test blank category names are rejected."""
    monkeypatch.setenv("INCOME_CATEGORIES", '["Salary", "  "]')
    with pytest.raises(ValidationError):
        get_settings()


def test_settings_validation_reply_delay(monkeypatch):
    """Test reply delay bounds."""
    monkeypatch.setenv("REPLY_DELAY_MS", "-1")
    with pytest.raises(ValidationError):
        get_settings()


def test_settings_seed_flag(monkeypatch):
    """Test demo data can be disabled."""
    monkeypatch.setenv("SEED_DEMO_DATA", "false")
    assert get_settings().seed_demo_data is False


def test_settings_singleton():
    """Test settings singleton behavior."""
    reset_settings()
    settings1 = get_settings()
    settings2 = get_settings()
    assert settings1 is settings2
