"""
Logging configuration for Yambo.

Sets up the root logger with a color-coded console handler and an optional
plain-text file handler. Library modules only ever call
``logging.getLogger(__name__)``; applications call ``setup_logging`` once.
"""

import logging
import sys
from typing import Optional, TYPE_CHECKING
from colorama import Fore, Back, Style, init

if TYPE_CHECKING:
    from .config import Config

# Initialize colorama for cross-platform color support
init(autoreset=True)

DEFAULT_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'


class ColoredFormatter(logging.Formatter):
    """
    Formatter that colors the level name of each record.

    Colors:
    - DEBUG: Cyan
    - INFO: Green
    - WARNING: Yellow
    - ERROR: Red
    - CRITICAL: Red on white background

    Dice events are logged under the ``yambo.modules.dice`` hierarchy; their
    logger name is dimmed so the roll values stand out.
    """

    COLORS = {
        'DEBUG': Fore.CYAN,
        'INFO': Fore.GREEN,
        'WARNING': Fore.YELLOW,
        'ERROR': Fore.RED,
        'CRITICAL': Fore.RED + Back.WHITE + Style.BRIGHT,
    }

    def format(self, record):
        color = self.COLORS.get(record.levelname, '')

        original_levelname = record.levelname
        original_name = record.name

        record.levelname = f"{color}{record.levelname}{Style.RESET_ALL}"
        if record.name.startswith('yambo.modules.dice'):
            record.name = f"{Style.DIM}{record.name}{Style.RESET_ALL}"

        try:
            return super().format(record)
        finally:
            # Other handlers (the file handler) must see the plain record
            record.levelname = original_levelname
            record.name = original_name


def setup_logging(
    level: str = 'INFO',
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
    use_colors: bool = True
) -> logging.Logger:
    """
    Configure logging for Yambo with color-coded output.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
        format_string: Optional custom format string
        use_colors: Whether to use colored console output (default: True)

    Returns:
        Configured root logger

    Example:
        logger = setup_logging(level='DEBUG', log_file='yambo.log')
        logger.debug("Rolling dice [0, 2, 4]")
    """
    if format_string is None:
        format_string = DEFAULT_FORMAT

    numeric_level = getattr(logging, level.upper())

    logger = logging.getLogger()
    logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    if use_colors:
        console_handler.setFormatter(ColoredFormatter(format_string))
    else:
        console_handler.setFormatter(logging.Formatter(format_string))
    logger.addHandler(console_handler)

    # File output never carries ANSI codes and always keeps DEBUG roll traces
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(format_string))
        logger.addHandler(file_handler)

    return logger


def setup_logging_from_config(config: 'Config') -> logging.Logger:
    """Configure logging from a Config instance (LOG_LEVEL, LOG_FILE, LOG_COLORS)."""
    return setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        use_colors=config.log_colors
    )


__all__ = ['ColoredFormatter', 'setup_logging', 'setup_logging_from_config']
