"""
Unit test configuration for reqres-probe.

Unit tests never reach the network: settings come from a clean environment
and the in-memory client talks to the substitute app.
"""

import pytest
from fastapi.testclient import TestClient

from reqres_probe.api_client import InMemoryAPITestClient
from reqres_probe.config.settings import CONFIG_FILE_ENV_VAR, ENV_VARS

from .fake_reqres import app


@pytest.fixture(autouse=True)
def clean_probe_env(monkeypatch, tmp_path):
    """Isolate tests from probe settings in the developer's environment and working directory."""
    for env_var in ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.delenv(CONFIG_FILE_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def substitute_client():
    """In-memory client over the substitute ReqRes app, mounted like the live /api root."""
    with InMemoryAPITestClient(TestClient(app), path_prefix='/api') as client:
        yield client
