"""Shared pytest configuration and fixtures for all tests."""

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external processes")
    config.addinivalue_line("markers", "integration: tests that spawn real processes")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def tdiff_home(tmp_path, monkeypatch):
    """Point TDIFF_HOME at a per-test directory so config and logs stay isolated."""
    home = tmp_path / ".tdiff"
    home.mkdir()
    monkeypatch.setenv("TDIFF_HOME", str(home))
    return home


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
