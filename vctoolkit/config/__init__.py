"""
Configuration module for vctoolkit.

Parses vctoolkit.yaml and builds tool chains from it.
"""

from vctoolkit.config.parser import (
    ToolchainConfig,
    VCToolkitConfig,
    create_toolchain,
    parse_config,
)
from vctoolkit.core.exceptions import ConfigError

__all__ = [
    "ConfigError",
    "ToolchainConfig",
    "VCToolkitConfig",
    "create_toolchain",
    "parse_config",
]
