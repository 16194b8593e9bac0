"""
Centralized configuration management.
All environment variables and settings are defined here.
"""
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.schema import DEFAULT_EXPENSE_CATEGORIES, DEFAULT_INCOME_CATEGORIES, CategoryCatalog


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )
    
    # Application
    app_name: str = Field(default="Finance Chat", alias="APP_NAME")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    
    # Money
    currency_symbol: str = Field(default="$", alias="CURRENCY_SYMBOL")
    
    # Category catalog, fixed at startup
    income_categories: List[str] = Field(
        default_factory=lambda: list(DEFAULT_INCOME_CATEGORIES), alias="INCOME_CATEGORIES"
    )
    expense_categories: List[str] = Field(
        default_factory=lambda: list(DEFAULT_EXPENSE_CATEGORIES), alias="EXPENSE_CATEGORIES"
    )
    
    # Session
    seed_demo_data: bool = Field(default=True, alias="SEED_DEMO_DATA")
    reply_delay_ms: int = Field(default=800, alias="REPLY_DELAY_MS")
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v_upper
    
    @field_validator("port")
    @classmethod
    def validate_port(cls, v):
        """Validate port is in valid range."""
        if not (1 <= v <= 65535):
            raise ValueError("Port must be between 1 and 65535")
        return v
    
    @field_validator("currency_symbol")
    @classmethod
    def validate_currency_symbol(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Currency symbol must not be empty")
        return v
    
    @field_validator("income_categories", "expense_categories")
    @classmethod
    def validate_categories(cls, v):
        """Strip category names and reject empty catalogs or blank entries."""
        cleaned = [name.strip() for name in v]
        if not cleaned:
            raise ValueError("Category list must contain at least one category")
        if any(not name for name in cleaned):
            raise ValueError("Category names must not be blank")
        return cleaned
    
    @field_validator("reply_delay_ms")
    @classmethod
    def validate_reply_delay(cls, v):
        if v < 0:
            raise ValueError("Reply delay must not be negative")
        if v > 10000:
            raise ValueError("Reply delay should not exceed 10000 ms")
        return v
    
    def catalog(self) -> CategoryCatalog:
        """Build the category catalog configured for this process."""
        return CategoryCatalog(
            income=tuple(self.income_categories),
            expense=tuple(self.expense_categories),
        )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings singleton.
    
    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
