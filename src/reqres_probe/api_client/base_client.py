"""
Base API client abstract class for testing.

Provides consistent interface regardless of whether tests run in-memory or over HTTP.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from .exceptions import ClientClosedError
from .response import APIResponse

SUPPORTED_METHODS = ('GET', 'POST', 'PUT', 'PATCH', 'DELETE')


class APITestClient(ABC):
    """Abstract base class for API testing clients.

    Provides consistent interface regardless of whether tests run in-memory or over HTTP.
    A client is meant to live for exactly one scenario: use it as a context
    manager, or call close() when the scenario ends.
    """

    def __init__(self, default_headers: Optional[Dict[str, str]] = None):
        self.default_headers = dict(default_headers or {})
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def request(self, method: str, path: str, json: Any = None,
                params: Optional[Dict[str, Any]] = None,
                headers: Optional[Dict[str, str]] = None) -> APIResponse:
        """Send one request and wait for the complete response."""
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(
                f"Unsupported HTTP method '{method}'. Supported: {', '.join(SUPPORTED_METHODS)}"
            )
        if self._closed:
            raise ClientClosedError(f"{type(self).__name__} is closed; create a new client per scenario")

        # Merge default headers with request-specific headers
        merged_headers = {**self.default_headers}
        if headers:
            merged_headers.update(headers)

        return self._send(method, path, json=json, params=params, headers=merged_headers)

    @abstractmethod
    def _send(self, method: str, path: str, json: Any, params: Optional[Dict[str, Any]],
              headers: Dict[str, str]) -> APIResponse:
        """Transport-specific request execution."""
        pass

    def _release(self) -> None:
        """Release transport resources. Subclasses override when they own any."""
        pass

    def get(self, path, params=None, headers=None):
        """Make GET request to API endpoint."""
        return self.request('GET', path, params=params, headers=headers)

    def post(self, path, json=None, headers=None):
        """Make POST request to API endpoint."""
        return self.request('POST', path, json=json, headers=headers)

    def put(self, path, json=None, headers=None):
        """Make PUT request to API endpoint."""
        return self.request('PUT', path, json=json, headers=headers)

    def patch(self, path, json=None, headers=None):
        """Make PATCH request to API endpoint."""
        return self.request('PATCH', path, json=json, headers=headers)

    def delete(self, path, headers=None):
        """Make DELETE request to API endpoint."""
        return self.request('DELETE', path, headers=headers)

    def close(self) -> None:
        """Release the client's resources. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._release()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
