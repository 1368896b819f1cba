"""
Platform detection and target platform description for vctoolkit.

This module describes two different things:
- the host the tool chain runs on (PlatformInfo, detected once per process)
- the platform a build targets (TargetPlatform, chosen by the caller)

Usage:
    from vctoolkit.core.platform import detect_platform, TargetPlatform, Architecture

    host = detect_platform()
    if host.is_windows():
        target = TargetPlatform.parse("x64")
"""

import functools
import platform
from dataclasses import dataclass
from enum import Enum


class Architecture(Enum):
    """Target instruction set / ABI variants understood by the tool chain."""

    TOOL_CHAIN_DEFAULT = "default"
    X86 = "x86"
    X64 = "x64"
    IA64 = "ia64"
    ARM = "arm"
    ARM64 = "arm64"

    @classmethod
    def parse(cls, value: str) -> "Architecture":
        """
        Parse an architecture name or one of its common aliases.

        Args:
            value: Architecture name (e.g., 'x64', 'amd64', 'i386', 'default')

        Returns:
            Matching Architecture member

        Raises:
            ValueError: If the name is not recognized

        Example:
            >>> Architecture.parse("amd64")
            <Architecture.X64: 'x64'>
        """
        key = value.strip().lower()
        aliases = {
            "default": cls.TOOL_CHAIN_DEFAULT,
            "tool_chain_default": cls.TOOL_CHAIN_DEFAULT,
            "x86": cls.X86,
            "i386": cls.X86,
            "i686": cls.X86,
            "x64": cls.X64,
            "amd64": cls.X64,
            "x86_64": cls.X64,
            "ia64": cls.IA64,
            "itanium": cls.IA64,
            "arm": cls.ARM,
            "arm64": cls.ARM64,
            "aarch64": cls.ARM64,
        }
        if key not in aliases:
            raise ValueError(
                f"Unknown architecture: {value}. "
                f"Supported: {', '.join(member.value for member in cls)}"
            )
        return aliases[key]


@dataclass(frozen=True)
class TargetPlatform:
    """
    Platform a build targets.

    Only the architecture matters to tool chain discovery; the name is carried
    along for messages and output types.

    Attributes:
        architecture: Target architecture (TOOL_CHAIN_DEFAULT uses the ambient default)
        name: Display name for the platform
    """

    architecture: Architecture = Architecture.TOOL_CHAIN_DEFAULT
    name: str = "current"

    @classmethod
    def parse(cls, value: str) -> "TargetPlatform":
        """Create a target platform from an architecture name."""
        architecture = Architecture.parse(value)
        return cls(architecture=architecture, name=architecture.value)

    def __str__(self) -> str:
        return f"{self.name} ({self.architecture.name})"


@dataclass
class PlatformInfo:
    """
    Host platform information.

    Attributes:
        os: Operating system ('windows', 'linux', 'macos')
        arch: CPU architecture ('x64', 'arm64', 'x86', 'arm')
        os_version: OS version string (e.g., '10.0.19041', '22.04', '14.1')
    """

    os: str
    arch: str
    os_version: str = ""

    def is_windows(self) -> bool:
        """Whether the host runs Windows."""
        return self.os == "windows"

    def platform_string(self) -> str:
        """
        Get canonical platform string (e.g., 'windows-x64').

        Example:
            >>> PlatformInfo('windows', 'x64', '10.0').platform_string()
            'windows-x64'
        """
        return f"{self.os}-{self.arch}"

    def __str__(self) -> str:
        """String representation of platform info."""
        if self.os_version:
            return f"{self.os}-{self.arch} v{self.os_version}"
        return f"{self.os}-{self.arch}"


@functools.lru_cache(maxsize=1)
def detect_platform() -> PlatformInfo:
    """
    Detect current host platform information.

    This function is cached - it only runs detection once per process.

    Returns:
        PlatformInfo instance with detected platform information
    """
    return PlatformInfo(
        os=_detect_os(), arch=_detect_architecture(), os_version=_detect_os_version()
    )


def _detect_os() -> str:
    """
    Detect operating system.

    Returns:
        Normalized OS name: 'windows', 'linux', 'macos' or the raw lowercase name
    """
    system = platform.system().lower()

    if system == "windows" or system.startswith("cygwin"):
        return "windows"
    elif system == "darwin":
        return "macos"
    return system


def _detect_architecture() -> str:
    """
    Detect CPU architecture.

    Returns:
        Normalized architecture: 'x64', 'arm64', 'x86', 'arm'
    """
    machine = platform.machine().lower()

    if machine in ("x86_64", "amd64", "x64"):
        return "x64"
    elif machine in ("aarch64", "arm64"):
        return "arm64"
    elif machine in ("i386", "i686", "x86"):
        return "x86"
    elif machine.startswith("arm"):
        return "arm"
    # Return original for unknown architectures
    return machine


def _detect_os_version() -> str:
    system = platform.system().lower()

    if system == "darwin":
        version = platform.mac_ver()[0]
        return version if version else "unknown"
    elif system == "linux":
        return platform.release()
    return platform.version()


def clear_platform_cache():
    """
    Clear the platform detection cache.

    This forces the next call to detect_platform() to re-detect.
    Useful for testing or when platform information changes.
    """
    detect_platform.cache_clear()


__all__ = [
    "Architecture",
    "TargetPlatform",
    "PlatformInfo",
    "detect_platform",
    "clear_platform_cache",
]
