"""
Pytest configuration and shared fixtures for vctoolkit tests.
"""

from pathlib import Path

import pytest

# Import test fixtures to make them available to all tests
# These imports register the fixtures with pytest's fixture discovery system
# ruff: noqa: F401
from tests.fixtures.toolchains import (
    windows_platform,
    linux_platform,
    mock_visual_studio,
    mock_windows_sdk,
    mock_path_tools,
    isolated_locator,
    sdkless_locator,
)
from vctoolkit.core.platform import clear_platform_cache


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def empty_path(tmp_path, monkeypatch) -> Path:
    """Point PATH at an empty directory so host tools are never found."""
    empty_dir = tmp_path / "empty-path"
    empty_dir.mkdir()
    monkeypatch.setenv("PATH", str(empty_dir))
    return empty_dir


@pytest.fixture
def tools_on_path(mock_path_tools, monkeypatch) -> Path:
    """Put the stub Visual C++ tools on PATH."""
    monkeypatch.setenv("PATH", str(mock_path_tools))
    return mock_path_tools


@pytest.fixture(autouse=True)
def reset_platform_cache():
    """Ensure host platform detection is not shared between tests."""
    clear_platform_cache()
    yield
    clear_platform_cache()
