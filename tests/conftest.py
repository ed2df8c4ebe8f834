"""Test configuration and fixtures for metatron."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the user config at a temporary location for every test."""
    config_path = tmp_path / "user-config" / "metatron" / "config.json"
    monkeypatch.setattr("metatron.config.get_config_path", lambda: config_path)
    return config_path
