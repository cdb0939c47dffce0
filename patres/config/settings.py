"""
settings.py

Application configuration for patres.

Features:
- Centralized application configuration using Pydantic settings
- Shared Rich console for CLI output

Usage:
Import appsettings for application configuration values.
"""

from typing import Final
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.console import Console

# Console instance for rich output
console: Final[Console] = Console()


class App(BaseSettings):
    """
    Application settings model.

    Settings can be overridden through environment variables with PATRES_ prefix.

    Attributes:
        beQuiet: Suppress detailed logging output
        noComplain: Print bare results and undecorated errors from the CLI
        detailedOutput: Log every rule dispatch during resolution
    """

    beQuiet: bool = False
    noComplain: bool = False
    detailedOutput: bool = False

    model_config = SettingsConfigDict(
        env_prefix="PATRES_",  # Environment variables with this prefix override settings
        case_sensitive=False,
        extra="allow",
    )


# Create the application settings instance
appsettings: Final[App] = App()
