"""
Client construction from settings.
"""
import importlib
import logging
from urllib.parse import urlparse

from reqres_probe.config.exceptions import InMemoryAppNotConfiguredException, InvalidSettingException
from reqres_probe.config.settings import ProbeSettings
from .base_client import APITestClient
from .in_memory_client import InMemoryAPITestClient
from .remote_client import RemoteAPITestClient

logger = logging.getLogger(__name__)


def load_app(app_module: str):
    """Import the ASGI app named by a 'package.module:attribute' string."""
    module_path, _, app_name = app_module.partition(':')
    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        raise InvalidSettingException(
            f"cannot import module '{module_path}': {e}", setting_name='app_module', env_var='TEST_API_APP'
        ) from e
    try:
        return getattr(module, app_name)
    except AttributeError as e:
        raise InvalidSettingException(
            f"module '{module_path}' has no attribute '{app_name}'", setting_name='app_module',
            env_var='TEST_API_APP'
        ) from e


def create_client(settings: ProbeSettings) -> APITestClient:
    """
    Create a new client for one scenario, chosen by settings.api_mode.

    - REMOTE: RemoteAPITestClient against settings.base_url
    - IN_MEMORY: InMemoryAPITestClient over the app named by settings.app_module,
      with the base URL's path (e.g. /api) as the path prefix
    """
    if settings.is_in_memory:
        if not settings.app_module:
            raise InMemoryAppNotConfiguredException("api_mode is IN_MEMORY but app_module is not set")
        from fastapi.testclient import TestClient

        app = load_app(settings.app_module)
        prefix = urlparse(settings.base_url).path
        logger.debug(f"Creating in-memory client for {settings.app_module} (prefix '{prefix}')")
        return InMemoryAPITestClient(TestClient(app), path_prefix=prefix)

    logger.debug(f"Creating HTTP client for {settings.base_url}")
    return RemoteAPITestClient(settings.base_url, timeout=settings.timeout, api_key=settings.api_key)
