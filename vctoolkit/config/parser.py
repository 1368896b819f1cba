"""YAML configuration parser for vctoolkit.

This module provides parsing and validation for vctoolkit.yaml configuration files.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from vctoolkit.core.exceptions import ConfigError
from vctoolkit.core.platform import Architecture, PlatformInfo
from vctoolkit.toolchain.install import ARCHITECTURE_LAYOUTS, ArchitectureLayout
from vctoolkit.toolchain.locator import VisualStudioLocator
from vctoolkit.toolchain.tools import ToolType
from vctoolkit.toolchain.visualcpp import VisualCppToolChain

logger = logging.getLogger(__name__)

SUPPORTED_VERSIONS = (1,)

LAYOUT_FIELDS = ("vc_bin", "vc_lib", "sdk_bin", "sdk_lib")


@dataclass
class ToolchainConfig:
    """Configuration for the Visual C++ tool chain."""

    name: str = VisualCppToolChain.DEFAULT_NAME
    install_dir: Optional[Path] = None
    windows_sdk_dir: Optional[Path] = None
    executables: Dict[ToolType, str] = field(default_factory=dict)


@dataclass
class VCToolkitConfig:
    """Complete vctoolkit configuration."""

    version: int
    toolchain: ToolchainConfig = field(default_factory=ToolchainConfig)
    layouts: Dict[Architecture, ArchitectureLayout] = field(default_factory=dict)

    def all_layouts(self) -> Dict[Architecture, ArchitectureLayout]:
        """Built-in layouts with the configured ones applied on top."""
        merged = dict(ARCHITECTURE_LAYOUTS)
        merged.update(self.layouts)
        return merged


def parse_config(config_path: Path) -> VCToolkitConfig:
    """
    Parse vctoolkit.yaml configuration file.

    Relative paths in the file are resolved against the file's directory.

    Args:
        config_path: Path to vctoolkit.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        raise ConfigError("Configuration file is empty")

    logger.debug(f"Loaded configuration from {config_path}")
    return _parse_and_validate(data, config_path.parent)


def _parse_and_validate(data: Any, base_dir: Path) -> VCToolkitConfig:
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    version = data.get("version")
    if version is None:
        raise ConfigError("Missing required field: version")
    if version not in SUPPORTED_VERSIONS:
        raise ConfigError(
            f"Unsupported configuration version: {version}. "
            f"Supported: {', '.join(str(v) for v in SUPPORTED_VERSIONS)}"
        )

    return VCToolkitConfig(
        version=version,
        toolchain=_parse_toolchain(data.get("toolchain") or {}, base_dir),
        layouts=_parse_layouts(data.get("layouts") or {}),
    )


def _parse_toolchain(data: Any, base_dir: Path) -> ToolchainConfig:
    if not isinstance(data, dict):
        raise ConfigError("'toolchain' must be a mapping")

    executables_data = data.get("executables") or {}
    if not isinstance(executables_data, dict):
        raise ConfigError("'executables' must be a mapping")

    executables: Dict[ToolType, str] = {}
    for key, exe_name in executables_data.items():
        try:
            tool_type = ToolType[str(key).upper()]
        except KeyError:
            valid = ", ".join(t.name.lower() for t in ToolType)
            raise ConfigError(f"Unknown tool '{key}' in executables. Valid tools: {valid}")
        executables[tool_type] = str(exe_name)

    return ToolchainConfig(
        name=str(data.get("name", VisualCppToolChain.DEFAULT_NAME)),
        install_dir=_resolve_path(data.get("install_dir"), base_dir),
        windows_sdk_dir=_resolve_path(data.get("windows_sdk_dir"), base_dir),
        executables=executables,
    )


def _parse_layouts(data: Any) -> Dict[Architecture, ArchitectureLayout]:
    if not isinstance(data, dict):
        raise ConfigError("'layouts' must be a mapping")

    layouts = {}
    for arch_name, fields in data.items():
        try:
            architecture = Architecture.parse(str(arch_name))
        except ValueError as e:
            raise ConfigError(str(e))

        if not isinstance(fields, dict):
            raise ConfigError(f"Layout for '{arch_name}' must be a mapping")
        missing = [name for name in LAYOUT_FIELDS if name not in fields]
        if missing:
            raise ConfigError(
                f"Layout for '{arch_name}' is missing: {', '.join(missing)}"
            )

        layouts[architecture] = ArchitectureLayout(
            **{name: str(fields[name]) for name in LAYOUT_FIELDS}
        )
    return layouts


def _resolve_path(value: Optional[str], base_dir: Path) -> Optional[Path]:
    if not value:
        return None
    path = Path(value)
    if not path.is_absolute():
        path = base_dir / path
    return path


def create_toolchain(
    config: VCToolkitConfig, operating_system: Optional[PlatformInfo] = None
) -> VisualCppToolChain:
    """
    Create a tool chain from configuration.

    Args:
        config: Parsed configuration
        operating_system: Host platform (default: detected)

    Returns:
        Configured VisualCppToolChain
    """
    toolchain_config = config.toolchain
    toolchain = VisualCppToolChain(
        name=toolchain_config.name,
        operating_system=operating_system,
        locator=VisualStudioLocator(windows_sdk_dir=toolchain_config.windows_sdk_dir),
        layouts=config.all_layouts(),
    )
    for tool_type, exe_name in toolchain_config.executables.items():
        toolchain.tools.set_exe_name(tool_type, exe_name)
    toolchain.set_install_dir(toolchain_config.install_dir)
    return toolchain
