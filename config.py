"""
Suite and demo-site configuration module.

This module defines configuration classes for different environments
(development, testing, production). Configuration values are loaded
from environment variables with sensible defaults. A `.env` file at the
project root (or the file named by ENV_FILE) is loaded first; variables
already exported in the environment take precedence over it.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent

ENV_FILE = Path(os.environ.get("ENV_FILE", BASE_DIR / ".env"))

# Load .env before the config classes read the environment
load_dotenv(ENV_FILE)


class Config:
    """Base configuration with default settings."""

    # Target page. When BASE_URL is unset the suite serves the bundled demo site.
    BASE_URL: str | None = os.environ.get("BASE_URL")
    UUID: str | None = os.environ.get("UUID")

    SCREENSHOT_DIR: str = os.environ.get(
        "SCREENSHOT_DIR", str(BASE_DIR / "test-results" / "screenshots")
    )
    DEFAULT_TIMEOUT_MS: int = int(os.environ.get("DEFAULT_TIMEOUT_MS", "10000"))

    LIVE_SERVER_HOST: str = os.environ.get("LIVE_SERVER_HOST", "127.0.0.1")


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG: bool = True
    TESTING: bool = True


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG: bool = False
    TESTING: bool = False


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, production).
             If None, uses FLASK_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
