"""
Shared pytest fixtures for the se test suite.

Usage in tests:
    def test_something(runner_factory):
        runner_factory.add_command("hello", "echo hello")
        runner = runner_factory.create_runner()

    def test_with_data(runner_env):
        # runner_env comes with commands A, B, C saved
        runner = runner_env.create_runner()
"""

import pytest
from tests.factories import RunnerTestFactory


@pytest.fixture
def runner_factory(tmp_path):
    """Empty environment: no saved commands."""
    return RunnerTestFactory(tmp_path)


@pytest.fixture
def runner_env(tmp_path):
    """Environment pre-populated with commands A, B, C (in that order)."""
    factory = RunnerTestFactory(tmp_path)
    factory.create_sample_commands()
    return factory


@pytest.fixture
def runner(runner_env):
    """Runner over the sample commands."""
    return runner_env.create_runner()
