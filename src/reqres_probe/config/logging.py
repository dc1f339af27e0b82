"""
Centralized logging configuration.

This module provides a bootstrap_logging function that can be imported from any entry point
to configure logging consistently using Python's native INI format.
"""

import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Optional

VALID_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
LOGGING_CONFIG_ENV_VAR = 'PROBE_LOGGING_CONFIG'

_bootstrapped = False


def _find_logging_config() -> Optional[Path]:
    """
    Find the logging configuration file.

    Looks for the file named by PROBE_LOGGING_CONFIG, then logging.ini in the
    current working directory.

    Returns:
        Path to logging configuration file, or None if not found.
    """
    explicit = os.environ.get(LOGGING_CONFIG_ENV_VAR)
    if explicit and Path(explicit).exists():
        return Path(explicit)

    current_dir_config = Path('logging.ini')
    if current_dir_config.exists():
        return current_dir_config

    return None


def _resolve_log_level() -> str:
    """
    Resolve LOG_LEVEL, defaulting to INFO.

    Sets LOG_LEVEL in the environment so the INI file can interpolate it.
    """
    log_level = os.environ.get('LOG_LEVEL', 'INFO').strip().upper()
    if log_level not in VALID_LEVELS:
        print(f"Warning: Invalid LOG_LEVEL '{log_level}', using INFO", file=sys.stderr)
        log_level = 'INFO'
    os.environ['LOG_LEVEL'] = log_level
    return log_level


def _basic_config(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr
    )


def bootstrap_logging(name: Optional[str] = None, force: bool = False) -> None:
    """
    Bootstrap logging configuration using Python's native INI format.

    This function:
    1. Resolves LOG_LEVEL (default INFO) for INI file substitution
    2. Loads logging configuration from logging.ini using logging.config.fileConfig()
    3. Applies the LOG_LEVEL override to the root logger and its stream handlers
    4. Falls back to basicConfig when no usable INI file exists

    Runs once per process unless force is True.

    Args:
        name: Optional name for the logger that reports the bootstrap
        force: Reconfigure even if logging was already bootstrapped
    """
    global _bootstrapped
    if _bootstrapped and not force:
        return
    _bootstrapped = True

    level = _resolve_log_level()
    config_path = _find_logging_config()

    if config_path is None:
        _basic_config(level)
        return

    try:
        logging.config.fileConfig(
            str(config_path),
            defaults={'LOG_LEVEL': level},
            disable_existing_loggers=False
        )
    except Exception as e:
        # Fallback to basic configuration if INI file is invalid
        print(f"Warning: Failed to load logging config from {config_path}: {e}", file=sys.stderr)
        print("Using basic logging configuration", file=sys.stderr)
        _basic_config(level)
        return

    # Override root logger and console handler levels
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level))
    for handler in root_logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            handler.setLevel(getattr(logging, level))

    logger = logging.getLogger(name) if name else logging.getLogger()
    logger.debug(f"Logging configured from {config_path}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name, ensuring logging is bootstrapped.

    Args:
        name: Name for the logger

    Returns:
        Configured logger instance
    """
    bootstrap_logging()
    return logging.getLogger(name)


def reset_logging_bootstrap() -> None:
    """Allow the next bootstrap_logging() call to configure logging again."""
    global _bootstrapped
    _bootstrapped = False
