"""
In-memory API client using FastAPI TestClient.

Runs the scenario suite against a substitute ASGI app instead of the live
service. The client only wraps a TestClient it is handed; it knows nothing
about the app behind it.
"""
import logging
import time

from reqres_probe.config.providers import simple_provider_name
from .base_client import APITestClient
from .response import APIResponse

logger = logging.getLogger(__name__)


@simple_provider_name("In Memory")
class InMemoryAPITestClient(APITestClient):
    """In-memory API client using FastAPI TestClient."""

    def __init__(self, fastapi_client, default_headers=None, path_prefix=''):
        """Initialize with FastAPI TestClient instance.

        Args:
            fastapi_client: FastAPI TestClient instance
            default_headers: Optional default headers to include in all requests
            path_prefix: Prefix added to every path (e.g. '/api' to mirror the live base URL)
        """
        super().__init__(default_headers=default_headers)
        self.client = fastapi_client
        self.path_prefix = path_prefix.rstrip('/')

    def _send(self, method, path, json, params, headers) -> APIResponse:
        if not path.startswith('/'):
            path = f'/{path}'
        path = f"{self.path_prefix}{path}"

        started = time.monotonic()
        response = self.client.request(method, path, json=json, params=params, headers=headers)
        elapsed = time.monotonic() - started
        logger.debug(f"{method} {path} -> {response.status_code} (in memory)")

        return APIResponse(
            status_code=response.status_code,
            text=response.text,
            headers=dict(response.headers),
            elapsed=elapsed,
        )

    def _release(self) -> None:
        self.client.close()
