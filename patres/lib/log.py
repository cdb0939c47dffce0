"""
Centralized application-specific logging using Loguru.

This module provides a function-based logging mechanism (`LOG`) that dynamically
respects the `beQuiet` flag from application settings.

Features:
- A custom `LOG` function for resolver and CLI debug logging.
- Dynamic checking of the `beQuiet` flag to suppress logs when necessary.
- Consistent column format across all log lines.

Example:
    from patres.lib.log import LOG
    LOG("Resolving template")

Environment:
- Set `PATRES_BEQUIET=True` to suppress detailed logging output.
"""

from loguru import logger
from typing import Any
import sys

# Create a distinct logger instance for the app
app_logger = logger.bind(app="PATRES")

logger_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<yellow>{name: >28}</yellow>::"
    "<cyan>{function: <30}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

app_logger.remove()  # Remove any default handlers
app_logger.add(sys.stderr, format=logger_format)


def LOG(*args: Any, **kwargs: Any) -> None:
    """
    Application-specific logging function.

    Logs at debug level unless `appsettings.beQuiet` is set.

    :param args: Positional arguments for the log message.
    :param kwargs: Keyword arguments for additional log metadata.
    """
    from patres.config.settings import appsettings

    if not appsettings.beQuiet:
        app_logger.opt(depth=1).debug(*args, **kwargs)
