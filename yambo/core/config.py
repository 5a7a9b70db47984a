"""
Configuration management for Yambo.

Provides centralized configuration loading from environment variables
with sensible defaults for all settings.
"""

import os
from pathlib import Path
from typing import Optional
import logging

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def _parse_bool(value: str) -> bool:
    return value.lower() in ('true', '1', 'yes')


def _parse_optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == '':
        return None
    return int(value)


class Config:
    """
    Centralized configuration management for Yambo.

    Loads configuration from environment variables with fallback defaults.
    Supports .env files via python-dotenv.

    Example:
        config = Config()
        print(config.juggle_time)  # 1.2
        print(config.dice_style)   # white
    """

    def __init__(self, env_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            env_file: Optional path to .env file. If None, auto-discovers .env
                     in project root or skips if not found.
        """
        if env_file:
            load_dotenv(env_file)
            logger.info(f"Loaded configuration from {env_file}")
        else:
            # Auto-discover .env in project root
            project_root = Path(__file__).parent.parent.parent
            env_path = project_root / '.env'
            if env_path.exists():
                load_dotenv(env_path)
                logger.info(f"Loaded configuration from {env_path}")
            else:
                logger.debug("No .env file found, using environment variables and defaults")

        # === Logging ===
        self.log_level = os.getenv('LOG_LEVEL', 'INFO').upper()
        self.log_file = os.getenv('LOG_FILE', None)
        self.log_colors = _parse_bool(os.getenv('LOG_COLORS', 'True'))

        # === Dice ===
        self.seed = _parse_optional_int(os.getenv('YAMBO_SEED'))
        self.dice_style = os.getenv('YAMBO_DICE_STYLE', 'white')

        # Seconds a released roll keeps rattling before the dice settle
        self.juggle_time = float(os.getenv('YAMBO_JUGGLE_TIME', '1.2'))
        # Seconds between two rattle faces while the roll button is held
        self.juggle_tick = float(os.getenv('YAMBO_JUGGLE_TICK', '0.08'))

    def validate(self) -> bool:
        """
        Validate configuration and log warnings for unusable values.

        Returns:
            True if config is valid, False if critical values are wrong
        """
        valid = True

        if self.log_level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            logger.error(f"Invalid LOG_LEVEL: {self.log_level}")
            valid = False

        if self.juggle_time < 0:
            logger.error(f"Invalid YAMBO_JUGGLE_TIME: {self.juggle_time}. Must be >= 0")
            valid = False

        if self.juggle_tick <= 0:
            logger.error(f"Invalid YAMBO_JUGGLE_TICK: {self.juggle_tick}. Must be > 0")
            valid = False
        elif self.juggle_tick > self.juggle_time > 0:
            logger.warning("YAMBO_JUGGLE_TICK is longer than YAMBO_JUGGLE_TIME; dice will settle without rattling")

        return valid

    def __repr__(self) -> str:
        return (
            f"Config("
            f"log_level={self.log_level}, "
            f"seed={self.seed}, "
            f"dice_style={self.dice_style}, "
            f"juggle_time={self.juggle_time}, "
            f"juggle_tick={self.juggle_tick})"
        )


# Global config instance (lazy-loaded)
_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global config instance (singleton pattern).

    Returns:
        Global Config instance

    Example:
        from yambo.core.config import get_config
        config = get_config()
        print(config.juggle_time)
    """
    global _config
    if _config is None:
        _config = Config()
        _config.validate()
    return _config


def reset_config() -> None:
    """Drop the cached global config so the next get_config() re-reads the environment."""
    global _config
    _config = None


__all__ = ['Config', 'get_config', 'reset_config']
