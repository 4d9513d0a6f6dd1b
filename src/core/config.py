"""
Engine settings from the environment.

Variables (a .env file is read first when present):
    LOG_LEVEL           Console log level (INFO)
    LOG_FILE            Also log to this file (unset)
    LOG_COLORS          Color console level names (true)
    D100_RNG_SEED       Seed for the dice roller; unset rolls unseeded
    D100_MODIFIER_CAP   Clamp the net modifier to +/- this value; unset means no cap

Nothing in the engine reads these by itself. Hosts build what they need:

    config = Config()
    setup_logging_from_config(config)
    resolver = CheckResolver.from_config(config)
"""

import os
from pathlib import Path
from typing import Optional
import logging

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

# Repository root, where a development .env lives
PROJECT_ROOT = Path(__file__).parent.parent.parent


def _load_env_file(env_file: Optional[str]) -> None:
    path = Path(env_file) if env_file else PROJECT_ROOT / '.env'
    if env_file or path.exists():
        load_dotenv(path)
        logger.info(f"Loaded configuration from {path}")
    else:
        logger.debug("No .env file, reading settings from the environment only")


def _flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ('true', '1', 'yes')


def _optional_int(name: str) -> Optional[int]:
    """Blank or unset is None; a non-integer is logged and treated as unset."""
    raw = os.getenv(name, '').strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.error(f"{name} must be an integer, got '{raw}'. Ignoring it.")
        return None


class Config:
    """
    Snapshot of the engine settings, taken when the Config is created.

    Attributes:
        log_level: Upper-cased level name
        log_file: Log file path or None
        log_colors: Whether console output is colored
        rng_seed: Dice roller seed or None
        modifier_cap: Net modifier cap or None
    """

    def __init__(self, env_file: Optional[str] = None):
        """
        Args:
            env_file: .env file to load; defaults to the repository root's
                     .env when one exists
        """
        _load_env_file(env_file)

        self.log_level = os.getenv('LOG_LEVEL', 'INFO').strip().upper()
        self.log_file = os.getenv('LOG_FILE') or None
        self.log_colors = _flag('LOG_COLORS', True)

        self.rng_seed = _optional_int('D100_RNG_SEED')
        self.modifier_cap = _optional_int('D100_MODIFIER_CAP')

    def validate(self) -> bool:
        """Log every invalid setting; True only if there were none."""
        problems = []

        if self.log_level not in LOG_LEVELS:
            problems.append(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{self.log_level}'")

        if self.modifier_cap is not None and self.modifier_cap < 0:
            problems.append(f"D100_MODIFIER_CAP cannot be negative, got {self.modifier_cap}")

        for problem in problems:
            logger.error(problem)
        return not problems

    def __repr__(self) -> str:
        return (
            f"Config(log_level={self.log_level}, rng_seed={self.rng_seed}, "
            f"modifier_cap={self.modifier_cap})"
        )


_config: Optional[Config] = None


def get_config() -> Config:
    """Shared Config, created and validated on first use."""
    global _config
    if _config is None:
        _config = Config()
        _config.validate()
    return _config


__all__ = ['Config', 'get_config']
