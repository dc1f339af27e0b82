"""Tests for the invoke tasks."""

import subprocess
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

import pytest
from invoke import Context

from reqres_probe import build_namespace, tasks

TESTS_YAML = """
suites:
  unit:
    tests:
      - tests/unit
  api:
    tests:
      - tests/api
      - tests/missing
"""


@pytest.fixture
def suite_layout(tmp_path):
    (tmp_path / 'tests.yaml').write_text(TESTS_YAML)
    (tmp_path / 'tests' / 'unit').mkdir(parents=True)
    (tmp_path / 'tests' / 'api').mkdir(parents=True)
    return tmp_path


def test_get_test_paths_skips_missing(suite_layout):
    assert tasks.get_test_paths('api') == ['tests/api']
    assert tasks.get_test_paths('unit') == ['tests/unit']
    assert tasks.get_test_paths('load') == []


def test_get_test_paths_without_tests_yaml():
    assert tasks.get_test_paths('api') == []


def test_build_pytest_command():
    cmd = tasks.build_pytest_command(
        ['tests/api'], base_url='http://localhost:8000/api', timeout=5, mode='in-memory',
        verbose=True, test_name='login',
    )

    assert cmd[:3] == [sys.executable, '-m', 'pytest']
    assert cmd[cmd.index('--api-base-url') + 1] == 'http://localhost:8000/api'
    assert cmd[cmd.index('--api-timeout') + 1] == '5'
    assert cmd[cmd.index('--api-mode') + 1] == 'in-memory'
    assert cmd[cmd.index('-k') + 1] == 'login'
    assert '-v' in cmd
    assert cmd[-1] == 'tests/api'


def test_build_pytest_command_minimal():
    cmd = tasks.build_pytest_command(['tests/unit'])

    assert '--api-base-url' not in cmd
    assert '-v' not in cmd
    assert cmd[-1] == 'tests/unit'


def test_test_task_runs_pytest_and_exits_with_its_code(suite_layout):
    with patch.object(subprocess, 'run', return_value=subprocess.CompletedProcess([], 1)) as run:
        with pytest.raises(SystemExit) as excinfo:
            tasks.test(Context(), 'api', timeout=10)

    assert excinfo.value.code == 1
    cmd = run.call_args[0][0]
    assert cmd[-1] == 'tests/api'
    assert 'TEST_API_APP' not in run.call_args[1]['env']


def test_test_task_points_in_memory_runs_at_substitute(suite_layout):
    with patch.object(subprocess, 'run', return_value=subprocess.CompletedProcess([], 0)) as run:
        with pytest.raises(SystemExit) as excinfo:
            tasks.test(Context(), 'api', mode='in-memory')

    assert excinfo.value.code == 0
    assert run.call_args[1]['env']['TEST_API_APP'] == tasks.SUBSTITUTE_APP


def test_test_task_unknown_suite(suite_layout, capsys):
    with patch.object(subprocess, 'run') as run:
        with pytest.raises(SystemExit) as excinfo:
            tasks.test(Context(), 'load')

    assert excinfo.value.code == 1
    run.assert_not_called()
    assert "No test paths configured for suite 'load'" in capsys.readouterr().out


def test_config_show_prints_sources(monkeypatch, capsys):
    monkeypatch.setenv('TEST_API_TIMEOUT', '12')

    tasks.config_show(Context(), base_url='http://localhost:8000/api')

    out = capsys.readouterr().out
    assert 'http://localhost:8000/api' in out
    assert 'command line' in out
    assert 'env:TEST_API_TIMEOUT' in out


def test_config_show_reports_invalid_settings(monkeypatch, capsys):
    monkeypatch.setenv('TEST_API_MODE', 'mocked')

    with pytest.raises(SystemExit):
        tasks.config_show(Context())

    assert "Invalid value for setting 'api_mode'" in capsys.readouterr().out


class TestNamespace(unittest.TestCase):

    def test_namespace_exposes_tasks(self):
        namespace = build_namespace()
        self.assertIn('test', namespace.task_names)
        self.assertIn('config-show', namespace.task_names)

    def test_tests_yaml_matches_suites(self):
        import yaml
        config = yaml.safe_load((Path(__file__).resolve().parents[2] / 'tests.yaml').read_text())
        self.assertEqual(set(config['suites']), {'unit', 'api'})

    def test_cli_program_uses_namespace(self):
        from reqres_probe.cli import program
        self.assertEqual(program.name, 'reqres-probe')
        self.assertIn('test', program.namespace.task_names)
