"""Shared pytest configuration and fixtures for all tests."""

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without I/O beyond tmp_path")
    config.addinivalue_line("markers", "integration: tests that drive the CLI end to end")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def htmllinks_home(tmp_path, monkeypatch):
    """Isolate every test from the user's ~/.htmllinks."""
    home = tmp_path / ".htmllinks"
    monkeypatch.setenv("HTMLLINKS_HOME", str(home))
    return home


@pytest.fixture
def run_cmd():
    """Execute a cmd function and return the result with progress_callback executed."""

    def _run(cmd_func, *args, **kwargs):
        result = cmd_func(*args, **kwargs)
        list(result.progress_callback(result))
        return result

    return _run
