"""
Pytest plugin that provides a fresh API client to every scenario.

The plugin resolves settings once per session (defaults, probe.yaml,
environment, command line) and hands each test its own client, which is
closed when the test finishes whether it passed or not.
"""

import logging

import pytest
import requests

from reqres_probe.api_client import create_client
from reqres_probe.config.exceptions import ConfigException
from reqres_probe.config.logging import bootstrap_logging
from reqres_probe.config.providers import get_provider_friendly_name
from reqres_probe.config.settings import load_settings

logger = logging.getLogger(__name__)

_settings_key = pytest.StashKey()
_TRANSPORT_ERROR = 'transport_error'


def pytest_addoption(parser):
    """Add custom command line options for pytest."""
    group = parser.getgroup('reqres-probe')
    group.addoption(
        "--api-base-url",
        action="store",
        default=None,
        help="Base URL of the API under test (overrides TEST_API_URL and probe.yaml)"
    )
    group.addoption(
        "--api-timeout",
        action="store",
        default=None,
        help="Per-request timeout in seconds (overrides TEST_API_TIMEOUT and probe.yaml)"
    )
    group.addoption(
        "--api-mode",
        action="store",
        default=None,
        help="REMOTE to call the live service, IN_MEMORY to use the configured ASGI app"
    )


def pytest_configure(config):
    """Register markers and bootstrap logging."""
    config.addinivalue_line("markers", "live: scenario that calls the configured ReqRes endpoint")
    bootstrap_logging()


def get_settings(config):
    """Resolve settings once per session from the pytest config."""
    settings = config.stash.get(_settings_key, None)
    if settings is None:
        settings = load_settings(overrides={
            'base_url': config.getoption("--api-base-url"),
            'timeout': config.getoption("--api-timeout"),
            'api_mode': config.getoption("--api-mode"),
        })
        config.stash[_settings_key] = settings
    return settings


def pytest_report_header(config):
    """Show which endpoint the scenarios will hit."""
    try:
        settings = get_settings(config)
    except ConfigException as e:
        return [f"reqres-probe: configuration error: {e}"]
    target = settings.app_module if settings.is_in_memory else settings.base_url
    return [f"reqres-probe: {settings.api_mode} {target} (timeout {settings.timeout:g}s)"]


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Tag reports whose failure came from the transport rather than an assertion."""
    outcome = yield
    report = outcome.get_result()
    if call.excinfo is not None and call.excinfo.errisinstance(requests.RequestException):
        report.user_properties.append((_TRANSPORT_ERROR, call.excinfo.typename))


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    """Point at the endpoint when scenarios failed to reach it."""
    failed = terminalreporter.stats.get('failed', []) + terminalreporter.stats.get('error', [])
    transport_failures = [
        report for report in failed
        if any(name == _TRANSPORT_ERROR for name, _ in getattr(report, 'user_properties', []))
    ]
    if not transport_failures:
        return

    settings = config.stash.get(_settings_key, None)
    target = settings.base_url if settings is not None else 'the configured endpoint'
    terminalreporter.write_sep("=", "TRANSPORT FAILURES")
    terminalreporter.write_line(f"❌ {len(transport_failures)} scenario(s) could not complete a request to {target}:")
    for report in transport_failures:
        reason = dict(report.user_properties)[_TRANSPORT_ERROR]
        terminalreporter.write_line(f"   {report.nodeid} ({reason})")
    terminalreporter.write_line("💡 Check network access to the service, or raise --api-timeout for slow links")


@pytest.fixture(scope="session")
def probe_settings(pytestconfig):
    """Settings for this run. Invalid configuration stops the session with guidance."""
    try:
        return get_settings(pytestconfig)
    except ConfigException as e:
        pytest.exit(e.guidance, returncode=pytest.ExitCode.USAGE_ERROR)


@pytest.fixture(scope="function")
def api_client(probe_settings):
    """
    A new API client for a single scenario.

    - api_mode REMOTE: RemoteAPITestClient with its own HTTP session
    - api_mode IN_MEMORY: InMemoryAPITestClient over the configured app
    """
    try:
        client = create_client(probe_settings)
    except ConfigException as e:
        pytest.exit(e.guidance, returncode=pytest.ExitCode.USAGE_ERROR)
    with client:
        logger.debug(f"Scenario client: {get_provider_friendly_name(type(client))}")
        yield client
