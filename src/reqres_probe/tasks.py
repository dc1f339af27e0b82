"""
Test runner tasks for reqres-probe.

Examples:
    reqres-probe test api                          # scenarios against the live service
    reqres-probe test api --mode=in-memory         # scenarios against the substitute app
    reqres-probe test unit --verbose
    reqres-probe test api --test-name="login"      # only login scenarios
    reqres-probe config-show
"""

import logging
import os
import subprocess
import sys
from pathlib import Path

import yaml
from invoke import task

from reqres_probe.config.exceptions import ConfigException
from reqres_probe.config.logging import bootstrap_logging
from reqres_probe.config.settings import describe_settings, load_settings

bootstrap_logging()
logger = logging.getLogger(__name__)

TESTS_CONFIG_FILE = 'tests.yaml'
SUBSTITUTE_APP = 'tests.unit.fake_reqres:app'


def _load_tests_config() -> dict:
    """Load suite definitions from tests.yaml in the working directory."""
    config_path = Path.cwd() / TESTS_CONFIG_FILE
    if not config_path.exists():
        return {}
    with open(config_path, 'r') as f:
        return yaml.safe_load(f) or {}


def get_test_paths(suite: str) -> list:
    """Get the existing test paths configured for a suite."""
    suite_config = _load_tests_config().get('suites', {}).get(suite, {})
    paths = []
    for path in suite_config.get('tests', []):
        if (Path.cwd() / path).exists():
            paths.append(path)
        else:
            logger.debug(f"Test path not found, skipping: {path}")
    return paths


def build_pytest_command(test_paths, base_url=None, timeout=None, mode=None,
                         verbose=False, test_name=None) -> list:
    """Build the pytest command line for a suite run."""
    cmd = [sys.executable, "-m", "pytest", "--tb=short", "--strict-markers"]
    if base_url:
        cmd.extend(["--api-base-url", base_url])
    if timeout:
        cmd.extend(["--api-timeout", str(timeout)])
    if mode:
        cmd.extend(["--api-mode", mode])
    if verbose:
        cmd.append("-v")
    if test_name:
        cmd.extend(["-k", test_name])
    cmd.extend(test_paths)
    return cmd


@task(help={
    'suite': 'Test suite to run (unit, api)',
    'base_url': 'Base URL of the API under test',
    'timeout': 'Per-request timeout in seconds',
    'mode': 'remote (live service) or in-memory (substitute app)',
    'verbose': 'Enable verbose output',
    'test_name': 'Filter to matching tests (pytest -k expression)',
})
def test(ctx, suite, base_url=None, timeout=None, mode=None, verbose=False, test_name=None):
    """
    Run a test suite in a pytest subprocess and return its exit code.
    """
    test_paths = get_test_paths(suite)
    if not test_paths:
        print(f"❌ No test paths configured for suite '{suite}' in {TESTS_CONFIG_FILE}")
        sys.exit(1)

    env = dict(os.environ)
    if mode and mode.strip().lower().replace('_', '-') == 'in-memory' and not env.get('TEST_API_APP'):
        env['TEST_API_APP'] = SUBSTITUTE_APP

    cmd = build_pytest_command(test_paths, base_url, timeout, mode, verbose, test_name)
    logger.debug(f"Running: {' '.join(cmd)}")

    result = subprocess.run(cmd, cwd=Path.cwd(), env=env)
    if result.returncode == 0:
        print("✅ All tests passed!")
    else:
        print(f"❌ Tests failed with exit code {result.returncode}")
    sys.exit(result.returncode)


@task(name='config-show', help={'base_url': 'Base URL to show instead of the configured one'})
def config_show(ctx, base_url=None):
    """
    Show the resolved settings and where each value came from.
    """
    try:
        settings = load_settings(overrides={'base_url': base_url})
    except ConfigException as e:
        print(e.guidance)
        sys.exit(1)

    print(f"{'SETTING':<12} {'VALUE':<40} {'SOURCE':<25}")
    print("-" * 79)
    for name, value, source in describe_settings(settings):
        print(f"{name:<12} {value:<40} {source:<25}")
