"""
Configuration for reqres-probe: settings, logging and configuration errors.
"""

from .exceptions import (
    ConfigException,
    ConfigFileException,
    InMemoryAppNotConfiguredException,
    InvalidSettingException,
)
from .logging import bootstrap_logging, get_logger
from .settings import ProbeSettings, describe_settings, load_settings

__all__ = [
    'ConfigException',
    'ConfigFileException',
    'InMemoryAppNotConfiguredException',
    'InvalidSettingException',
    'ProbeSettings',
    'bootstrap_logging',
    'describe_settings',
    'get_logger',
    'load_settings',
]
