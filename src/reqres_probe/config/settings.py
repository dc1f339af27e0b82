"""
Probe settings.

Settings are layered, lowest precedence first:

1. Model defaults
2. probe.yaml in the working directory (or the file named by PROBE_CONFIG)
3. Environment variables (TEST_API_URL, TEST_API_TIMEOUT, ...)
4. Explicit overrides, e.g. pytest command-line options

The timeout is always explicit. Every request made by the remote client is
bounded by it, so a hung connection fails the scenario instead of blocking it.
"""
import logging
import math
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlparse

import yaml
from pydantic import BaseModel, ConfigDict, PrivateAttr, ValidationError, field_validator

from .exceptions import ConfigFileException, InMemoryAppNotConfiguredException, InvalidSettingException

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://reqres.in/api"
DEFAULT_TIMEOUT = 30.0
DEFAULT_CONFIG_FILE = "probe.yaml"
CONFIG_FILE_ENV_VAR = "PROBE_CONFIG"

API_MODES = ('REMOTE', 'IN_MEMORY')

# Setting name -> environment variable that overrides it
ENV_VARS = {
    'base_url': 'TEST_API_URL',
    'timeout': 'TEST_API_TIMEOUT',
    'api_key': 'TEST_API_KEY',
    'api_mode': 'TEST_API_MODE',
    'app_module': 'TEST_API_APP',
}


class ProbeSettings(BaseModel):
    """Resolved settings for one test run."""
    model_config = ConfigDict(frozen=True, extra='forbid')

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    api_key: Optional[str] = None
    api_mode: str = 'REMOTE'
    app_module: Optional[str] = None

    _sources: Dict[str, str] = PrivateAttr(default_factory=dict)

    @field_validator('base_url')
    @classmethod
    def _validate_base_url(cls, value: str) -> str:
        parsed = urlparse(value.strip())
        if parsed.scheme not in ('http', 'https') or not parsed.netloc:
            raise ValueError(f"base URL must be an absolute http(s) URL, got '{value}'")
        return value.strip().rstrip('/')

    @field_validator('timeout')
    @classmethod
    def _validate_timeout(cls, value: float) -> float:
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"timeout must be a finite positive number of seconds, got {value}")
        return value

    @field_validator('api_key')
    @classmethod
    def _validate_api_key(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value.strip()

    @field_validator('api_mode')
    @classmethod
    def _validate_api_mode(cls, value: str) -> str:
        mode = value.strip().upper().replace('-', '_')
        if mode not in API_MODES:
            raise ValueError(f"api mode must be one of {', '.join(API_MODES)}, got '{value}'")
        return mode

    @field_validator('app_module')
    @classmethod
    def _validate_app_module(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        module_path, sep, attribute = value.strip().partition(':')
        if not sep or not module_path or not attribute:
            raise ValueError(f"app module must look like 'package.module:app', got '{value}'")
        return value.strip()

    @property
    def sources(self) -> Dict[str, str]:
        """Where each setting's value came from."""
        return dict(self._sources)

    @property
    def is_in_memory(self) -> bool:
        return self.api_mode == 'IN_MEMORY'


def _config_file_path(config_path: Optional[str] = None) -> Optional[Path]:
    """Find the YAML settings file, if any."""
    if config_path:
        return Path(config_path)
    env_path = os.environ.get(CONFIG_FILE_ENV_VAR)
    if env_path:
        return Path(env_path)
    default_path = Path.cwd() / DEFAULT_CONFIG_FILE
    if default_path.exists():
        return default_path
    return None


def _load_config_file(path: Path) -> Dict[str, Any]:
    """Load settings from a YAML file."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigFileException(f"cannot read file: {e}", str(path)) from e
    except yaml.YAMLError as e:
        raise ConfigFileException(f"invalid YAML: {e}", str(path)) from e

    if not isinstance(data, dict):
        raise ConfigFileException("top level must be a mapping of setting names to values", str(path))
    return data


def load_settings(overrides: Optional[Dict[str, Any]] = None,
                  config_path: Optional[str] = None) -> ProbeSettings:
    """
    Build validated settings from defaults, the YAML file, environment and overrides.

    Args:
        overrides: Highest-precedence values; None entries are ignored
        config_path: Explicit YAML file, instead of PROBE_CONFIG or ./probe.yaml

    Returns:
        ProbeSettings instance

    Raises:
        ConfigFileException: If the YAML file cannot be read or parsed
        InvalidSettingException: If any value fails validation
        InMemoryAppNotConfiguredException: If IN_MEMORY mode has no app module
    """
    values: Dict[str, Any] = {}
    sources: Dict[str, str] = {name: 'default' for name in ProbeSettings.model_fields}

    path = _config_file_path(config_path)
    if path is not None:
        for name, value in _load_config_file(path).items():
            values[name] = value
            sources[name] = str(path)
        logger.debug(f"Loaded settings file {path}")

    for name, env_var in ENV_VARS.items():
        env_value = os.environ.get(env_var)
        if env_value is not None and env_value.strip():
            values[name] = env_value
            sources[name] = f"env:{env_var}"

    for name, value in (overrides or {}).items():
        if value is not None:
            values[name] = value
            sources[name] = 'command line'

    try:
        settings = ProbeSettings(**values)
    except ValidationError as e:
        error = e.errors()[0]
        name = str(error['loc'][0]) if error['loc'] else 'settings'
        if error['type'] == 'extra_forbidden':
            message = f"unknown setting (known: {', '.join(ProbeSettings.model_fields)})"
        else:
            message = error['msg']
        raise InvalidSettingException(
            message,
            setting_name=name,
            source=sources.get(name),
            env_var=ENV_VARS.get(name),
        ) from e

    if settings.is_in_memory and not settings.app_module:
        raise InMemoryAppNotConfiguredException("api_mode is IN_MEMORY but app_module is not set")

    settings._sources = sources
    logger.debug(f"Probe settings: base_url={settings.base_url} mode={settings.api_mode} "
                 f"timeout={settings.timeout}s")
    return settings


def _mask(value: str) -> str:
    """Show only the first few characters of a secret value."""
    if len(value) <= 8:
        return value[:3] + "..."
    return value[:max(3, len(value) // 4)] + "..."


def describe_settings(settings: ProbeSettings) -> List[Tuple[str, str, str]]:
    """
    Describe settings for display.

    Returns:
        list: List of (setting_name, display_value, source) tuples
    """
    sources = settings.sources
    rows = []
    for name in ProbeSettings.model_fields:
        value = getattr(settings, name)
        if value is None:
            display = "(not set)"
        elif name == 'api_key':
            display = _mask(value)
        elif name == 'timeout':
            display = f"{value:g}s"
        else:
            display = str(value)
        rows.append((name, display, sources.get(name, 'default')))
    return rows
