"""
Remote HTTP API client using requests library.

Used by API test suite for real network interface testing.
"""
import logging
from typing import Dict, Optional

import requests
from requests.adapters import HTTPAdapter

from reqres_probe.config.providers import simple_provider_name
from .base_client import APITestClient
from .response import APIResponse

logger = logging.getLogger(__name__)


@simple_provider_name("HTTP")
class RemoteAPITestClient(APITestClient):
    """Remote HTTP API client using requests library.

    Owns a private requests.Session, so connections are never shared between
    scenarios. Requests are never retried: a transport failure or an
    unexpected status surfaces on the first attempt.
    """

    def __init__(self, base_url: str, timeout: float, api_key: Optional[str] = None,
                 default_headers: Optional[Dict[str, str]] = None):
        """Initialize with base URL for remote API.

        Args:
            base_url: Base URL for the remote API (e.g., https://reqres.in/api)
            timeout: Seconds to wait for connect and for each read before giving up
            api_key: Optional key sent as the x-api-key header
            default_headers: Optional default headers to include in all requests
        """
        headers = {'Accept': 'application/json'}
        if api_key:
            headers['x-api-key'] = api_key
        headers.update(default_headers or {})
        super().__init__(default_headers=headers)

        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

        self.session = requests.Session()
        no_retries = HTTPAdapter(max_retries=0)
        self.session.mount('http://', no_retries)
        self.session.mount('https://', no_retries)

    def url_for(self, path: str) -> str:
        """Join a relative path (query string included) onto the base URL."""
        if not path.startswith('/'):
            path = f'/{path}'
        return f"{self.base_url}{path}"

    def _send(self, method, path, json, params, headers) -> APIResponse:
        url = self.url_for(path)
        logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method,
                url,
                json=json,
                params=params,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise

        elapsed = response.elapsed.total_seconds()
        logger.debug(f"{method} {url} -> {response.status_code} in {elapsed:.3f}s")

        return APIResponse(
            status_code=response.status_code,
            text=response.text,
            headers=dict(response.headers),
            elapsed=elapsed,
        )

    def _release(self) -> None:
        self.session.close()
        logger.debug(f"Closed HTTP session for {self.base_url}")
