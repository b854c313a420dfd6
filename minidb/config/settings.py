"""
MiniDB Configuration Settings

This module contains the configuration constants for the MiniDB shell.
Every value can be overridden through an environment variable.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Shell configuration settings."""

    # Interactive shell settings
    PROMPT: str = os.environ.get("MINIDB_PROMPT", "MiniDB> ")

    # Logging settings
    DEBUG: bool = os.environ.get("MINIDB_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("MINIDB_LOG_LEVEL", "WARNING")
    LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


# Global settings instance
settings = Settings()
