"""
Core functionality for vctoolkit.

This package contains the foundational modules that other components depend on.
"""

from .platform import (
    Architecture,
    TargetPlatform,
    PlatformInfo,
    detect_platform,
    clear_platform_cache,
)

from .exceptions import (
    VCToolkitError,
    ConfigError,
    ToolChainError,
    ToolChainUnavailableError,
    InvalidInstallDirError,
    ToolExecutionError,
    TargetingError,
    InstallNotFoundError,
    SdkNotFoundError,
    UnsupportedArchitectureError,
)

__all__ = [
    "Architecture",
    "TargetPlatform",
    "PlatformInfo",
    "detect_platform",
    "clear_platform_cache",
    "VCToolkitError",
    "ConfigError",
    "ToolChainError",
    "ToolChainUnavailableError",
    "InvalidInstallDirError",
    "ToolExecutionError",
    "TargetingError",
    "InstallNotFoundError",
    "SdkNotFoundError",
    "UnsupportedArchitectureError",
]
