"""
Logging configuration module for the combat odds engine.

Provides centralized logging setup with colored output using rich. Every
logger of the package lives under the `combat_odds` namespace; the
estimators never configure logging themselves, applications call
setup_logging once at start-up.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

# Root of the package's logger hierarchy.
LOGGER_NAMESPACE = "combat_odds"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Sets up logging configuration with rich colored output.

    Args:
        level (int): The level of the combat_odds loggers. Defaults to
            logging.INFO.

    Returns:
        logging.Logger: The package root logger.

    """
    console = Console(width=120, force_terminal=True, force_jupyter=False)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_level=True,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(name)s - %(message)s", datefmt="[%X]"))

    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[rich_handler],
    )

    # Only the package follows the requested level, other libraries stay at WARNING.
    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    package_logger.setLevel(level)
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Gets a logger inside the combat_odds namespace.

    Args:
        name (str): A module name, either already qualified
            (`combat_odds.core.content`) or relative (`content`).

    Returns:
        logging.Logger: The logger for that name.

    """
    if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
