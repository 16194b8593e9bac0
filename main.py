"""
Main entry point for the finance chat application.

This module loads configuration from the environment (and an optional .env
file), validates it, and starts the FastAPI server.
"""
import sys
from pathlib import Path

# Add project root to Python path for module imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv
from pydantic import ValidationError as SettingsValidationError

from core.config import Settings, get_settings
from core.exceptions import ConfigurationError
from core.logger import setup_logger

# Load environment variables from .env file
_env_file = PROJECT_ROOT / ".env"
if _env_file.exists():
    load_dotenv(_env_file)

logger = setup_logger(__name__)


def load_settings() -> Settings:
    """
    Load settings, turning validation failures into ConfigurationError.

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If any setting is invalid
    """
    try:
        return get_settings()
    except SettingsValidationError as e:
        raise ConfigurationError(
            "Invalid configuration",
            details={err["loc"][0] if err["loc"] else "settings": err["msg"] for err in e.errors()}
        )


def main():
    """Main application entry point."""
    try:
        settings = load_settings()

        import uvicorn
        from app.api import app

        logger.info(f"Starting {settings.app_name}")
        logger.info(f"Log Level: {settings.log_level}")
        logger.info(f"Income categories: {', '.join(settings.income_categories)}")
        logger.info(f"Expense categories: {', '.join(settings.expense_categories)}")
        logger.info(f"Demo data: {'enabled' if settings.seed_demo_data else 'disabled'}")

        logger.info(f"Starting server on {settings.host}:{settings.port}")

        uvicorn.run(
            app,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower()
        )

    except ConfigurationError as e:
        logger.error(f"Configuration error: {e.message}")
        if e.details:
            logger.error(f"Details: {e.details}")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Failed to start application: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
