"""Pytest configuration and fixtures for allrecipes-finder tests."""

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "e2e: End-to-end tests requiring a real API key, npx and Chrome")


@pytest.fixture
def no_chrome_path(monkeypatch):
    """Run with CHROME_PATH unset."""
    monkeypatch.delenv("CHROME_PATH", raising=False)


@pytest.fixture
def container_env(monkeypatch):
    """Run as if inside the container image."""
    monkeypatch.setenv("CHROME_PATH", "/usr/bin/chromium")
