"""
API Client package for testing.

Provides consistent interface across the live and in-memory runs of the scenario suite.
"""

from .base_client import APITestClient
from .exceptions import ClientClosedError, ResponseBodyError, ResponseFieldError
from .factory import create_client
from .in_memory_client import InMemoryAPITestClient
from .remote_client import RemoteAPITestClient
from .response import APIResponse, JsonTree

__all__ = [
    'APITestClient',
    'InMemoryAPITestClient',
    'RemoteAPITestClient',
    'APIResponse',
    'JsonTree',
    'ClientClosedError',
    'ResponseBodyError',
    'ResponseFieldError',
    'create_client',
]
