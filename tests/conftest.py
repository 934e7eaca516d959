"""Pytest hooks and fixtures."""

import os

import pytest


def pytest_configure(config):
    """Register custom markers (also in pyproject.toml)."""
    config.addinivalue_line(
        "markers",
        "live: calls the real Ankr endpoint (skipped unless ANKR_API_KEY is set)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip live tests when no API key is available."""
    if os.environ.get("ANKR_API_KEY"):
        return
    skip = pytest.mark.skip(reason="Requires ANKR_API_KEY")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip)
