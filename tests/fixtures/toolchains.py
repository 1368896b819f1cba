"""Reusable tool chain fixtures for testing.

This module provides pytest fixtures that create mock Visual Studio and Windows
SDK directory structures, so tool chain discovery can be tested on any OS
without a real installation.
"""

from pathlib import Path

import pytest

from vctoolkit.core.platform import PlatformInfo
from vctoolkit.toolchain.locator import VisualStudioLocator

VISUAL_CPP_TOOLS = ["cl.exe", "ml.exe", "link.exe", "lib.exe"]

VC_BIN_DIRS = ["VC/bin", "VC/bin/x86_amd64", "VC/bin/x86_ia64", "VC/bin/x86_arm"]

VC_LIB_DIRS = ["VC/lib", "VC/lib/amd64", "VC/lib/ia64", "VC/lib/arm"]


def make_executable(path: Path) -> Path:
    """Create an executable stub file, including parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"#!/bin/sh\necho {path.name} mock\n")
    path.chmod(0o755)
    return path


@pytest.fixture
def windows_platform() -> PlatformInfo:
    """Windows host platform info."""
    return PlatformInfo("windows", "x64", "10.0.19041")


@pytest.fixture
def linux_platform() -> PlatformInfo:
    """Linux host platform info."""
    return PlatformInfo("linux", "x64", "5.15.0")


@pytest.fixture
def mock_visual_studio(tmp_path) -> Path:
    """
    Create mock Visual Studio installation directory structure.

    Creates:
    - VC/bin/{cl,ml,link,lib}.exe and the same tools under each
      cross-compiler directory (x86_amd64, x86_ia64, x86_arm)
    - VC/include and VC/lib/<arch>
    - Common7/IDE

    Returns:
        Path to installation root directory

    Example:
        def test_detection(mock_visual_studio):
            assert (mock_visual_studio / "VC" / "bin" / "cl.exe").exists()
    """
    install_root = tmp_path / "Microsoft Visual Studio 10.0"

    for bin_dir in VC_BIN_DIRS:
        for tool in VISUAL_CPP_TOOLS:
            make_executable(install_root / bin_dir / tool)

    for lib_dir in VC_LIB_DIRS:
        (install_root / lib_dir).mkdir(parents=True)
        (install_root / lib_dir / "msvcrt.lib").write_bytes(b"mock library")

    (install_root / "VC" / "include").mkdir(parents=True)
    (install_root / "VC" / "include" / "stdio.h").write_text("/* mock */\n")
    (install_root / "Common7" / "IDE").mkdir(parents=True)

    return install_root


@pytest.fixture
def mock_windows_sdk(tmp_path) -> Path:
    """
    Create mock Windows SDK directory structure.

    Returns:
        Path to SDK root directory (contains Include/windows.h)
    """
    sdk_root = tmp_path / "Microsoft SDKs" / "Windows" / "v7.1"

    (sdk_root / "Include").mkdir(parents=True)
    (sdk_root / "Include" / "windows.h").write_text("/* mock windows.h */\n")

    for lib_dir in ["Lib", "Lib/x64", "Lib/IA64", "Lib/arm"]:
        (sdk_root / lib_dir).mkdir(parents=True)
        (sdk_root / lib_dir / "kernel32.lib").write_bytes(b"mock library")

    for bin_dir in ["Bin", "Bin/x64", "Bin/arm"]:
        make_executable(sdk_root / bin_dir / "rc.exe")

    return sdk_root


@pytest.fixture
def mock_path_tools(tmp_path) -> Path:
    """
    Create a directory with stub Visual C++ tools, as found on PATH.

    Returns:
        Path to the directory containing the tools
    """
    tools_dir = tmp_path / "path-tools"
    for tool in VISUAL_CPP_TOOLS:
        make_executable(tools_dir / tool)
    return tools_dir


@pytest.fixture
def isolated_locator(mock_windows_sdk) -> VisualStudioLocator:
    """Locator that only sees the mock SDK, never the host environment."""
    return VisualStudioLocator(
        windows_sdk_dir=mock_windows_sdk,
        sdk_locations=[],
        environ={},
        use_registry=False,
    )


@pytest.fixture
def sdkless_locator() -> VisualStudioLocator:
    """Locator that can never find a Windows SDK."""
    return VisualStudioLocator(sdk_locations=[], environ={}, use_registry=False)
