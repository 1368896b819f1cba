"""Test fixtures for vctoolkit tests.

This package provides reusable pytest fixtures for testing vctoolkit components:

- toolchains: Mock Visual Studio installations, Windows SDKs and tools on PATH

Import fixtures in your tests using:
    from tests.fixtures.toolchains import mock_visual_studio
"""

__all__ = [
    "toolchains",
]
