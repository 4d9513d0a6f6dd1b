"""
Logging setup for the percentile engine.

Engine modules only ever call logging.getLogger(__name__); handlers are
attached once, by the host, through setup_logging() or
setup_logging_from_config().

Levels used across the engine:
- DEBUG: check resolution traces, synthesized modifier counts
- INFO: hazard narrative, configuration loading
- WARNING: unknown or invalid rule elements, characters dropping to 0 wounds
- ERROR: configuration problems, failed actor updates
"""

import logging
import sys
from typing import Optional
from colorama import Fore, Back, Style, init

init(autoreset=True)

DEFAULT_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'

LEVEL_COLORS = {
    'DEBUG': Fore.CYAN,
    'INFO': Fore.GREEN,
    'WARNING': Fore.YELLOW,
    'ERROR': Fore.RED,
    'CRITICAL': Fore.RED + Back.WHITE + Style.BRIGHT,
}


class ColoredFormatter(logging.Formatter):
    """Console formatter that wraps the level name in its color."""

    def format(self, record):
        plain = record.levelname
        record.levelname = f"{LEVEL_COLORS.get(plain, '')}{plain}{Style.RESET_ALL}"
        try:
            return super().format(record)
        finally:
            # Other handlers share the record
            record.levelname = plain


def _level(name: str) -> int:
    return getattr(logging, name.upper())


def _console_handler(level: int, format_string: str, use_colors: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    formatter_class = ColoredFormatter if use_colors else logging.Formatter
    handler.setFormatter(formatter_class(format_string))
    return handler


def _file_handler(path: str, format_string: str) -> logging.Handler:
    handler = logging.FileHandler(path)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(format_string))
    return handler


def setup_logging(
    level: str = 'INFO',
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
    use_colors: bool = True
) -> logging.Logger:
    """
    Attach console (and optionally file) handlers to the root logger.

    Any handlers already on the root logger are replaced. The file handler
    records everything down to DEBUG in plain text, whatever the console
    level.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path of a log file to write as well
        format_string: Record format (DEFAULT_FORMAT if omitted)
        use_colors: Color the console level names

    Returns:
        The root logger

    Example:
        setup_logging(level='DEBUG', log_file='checks.log')
    """
    format_string = format_string or DEFAULT_FORMAT
    console_level = _level(level)

    root = logging.getLogger()
    root.setLevel(console_level)
    root.handlers.clear()

    root.addHandler(_console_handler(console_level, format_string, use_colors))
    if log_file:
        root.addHandler(_file_handler(log_file, format_string))

    return root


def setup_logging_from_config(config) -> logging.Logger:
    """Apply the LOG_LEVEL, LOG_FILE and LOG_COLORS settings of a Config."""
    return setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        use_colors=config.log_colors
    )


def get_logger(name: str) -> logging.Logger:
    """Same as logging.getLogger; kept so hosts have one import for logging."""
    return logging.getLogger(name)


logger = get_logger('percentile_engine')


__all__ = ['setup_logging', 'setup_logging_from_config', 'get_logger', 'ColoredFormatter', 'logger']
