"""
Per-architecture configuration of a Visual Studio installation.

Each architecture keeps its compilers and libraries in its own subdirectory
of the installation and the Windows SDK. The layouts live in a lookup table so
supporting a new architecture only needs a new table entry.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from vctoolkit.core.exceptions import UnsupportedArchitectureError
from vctoolkit.core.platform import Architecture, TargetPlatform
from vctoolkit.toolchain.tools import ToolRegistry

logger = logging.getLogger(__name__)

# Separator used by cl.exe and link.exe for INCLUDE and LIB
ENVIRONMENT_PATH_SEPARATOR = ";"


@dataclass(frozen=True)
class ArchitectureLayout:
    """
    Relative directories for one architecture.

    Attributes:
        vc_bin: Compiler binaries, relative to the installation root
        vc_lib: Visual C++ libraries, relative to the installation root
        sdk_bin: SDK tools, relative to the SDK root
        sdk_lib: SDK import libraries, relative to the SDK root
    """

    vc_bin: str
    vc_lib: str
    sdk_bin: str
    sdk_lib: str


_X86_LAYOUT = ArchitectureLayout(
    vc_bin="VC/bin", vc_lib="VC/lib", sdk_bin="Bin", sdk_lib="Lib"
)

ARCHITECTURE_LAYOUTS: Dict[Architecture, ArchitectureLayout] = {
    # The plain VC/bin compilers target x86
    Architecture.TOOL_CHAIN_DEFAULT: _X86_LAYOUT,
    Architecture.X86: _X86_LAYOUT,
    Architecture.X64: ArchitectureLayout(
        vc_bin="VC/bin/x86_amd64",
        vc_lib="VC/lib/amd64",
        sdk_bin="Bin/x64",
        sdk_lib="Lib/x64",
    ),
    Architecture.IA64: ArchitectureLayout(
        vc_bin="VC/bin/x86_ia64",
        vc_lib="VC/lib/ia64",
        sdk_bin="Bin",
        sdk_lib="Lib/IA64",
    ),
    Architecture.ARM: ArchitectureLayout(
        vc_bin="VC/bin/x86_arm",
        vc_lib="VC/lib/arm",
        sdk_bin="Bin/arm",
        sdk_lib="Lib/arm",
    ),
}


class WindowsSdk:
    """A located Windows SDK."""

    def __init__(self, base_dir: Path):
        self.base_dir = Path(base_dir)

    def get_include_dirs(self) -> List[Path]:
        return [self.base_dir / "Include"]

    def get_bin_dir(self, layout: ArchitectureLayout) -> Path:
        return self.base_dir / layout.sdk_bin

    def get_lib_dir(self, layout: ArchitectureLayout) -> Path:
        return self.base_dir / layout.sdk_lib


class VisualStudioInstall:
    """
    A located Visual Studio installation paired with a Windows SDK.

    configure_tools() rewrites a ToolRegistry so that every tool points at the
    binaries, headers and libraries for one architecture.
    """

    def __init__(
        self,
        install_dir: Path,
        windows_sdk: WindowsSdk,
        layouts: Optional[Mapping[Architecture, ArchitectureLayout]] = None,
    ):
        """
        Initialize installation.

        Args:
            install_dir: Visual Studio installation root
            windows_sdk: Windows SDK to pair with the installation
            layouts: Architecture layout table (default: ARCHITECTURE_LAYOUTS)
        """
        self.install_dir = Path(install_dir)
        self.windows_sdk = windows_sdk
        self.layouts = dict(ARCHITECTURE_LAYOUTS if layouts is None else layouts)

    @property
    def visual_cpp_dir(self) -> Path:
        return self.install_dir / "VC"

    @property
    def common_tools_dir(self) -> Path:
        return self.install_dir / "Common7" / "IDE"

    def get_layout(self, architecture: Architecture) -> ArchitectureLayout:
        """
        Get the layout for an architecture.

        Raises:
            UnsupportedArchitectureError: If no layout is known
        """
        layout = self.layouts.get(architecture)
        if layout is None:
            raise UnsupportedArchitectureError(architecture)
        return layout

    def get_path(self, layout: ArchitectureLayout) -> List[Path]:
        return [
            self.install_dir / layout.vc_bin,
            self.common_tools_dir,
            self.windows_sdk.get_bin_dir(layout),
        ]

    def get_environment(self, layout: ArchitectureLayout) -> Dict[str, str]:
        include_dirs = [self.visual_cpp_dir / "include"]
        include_dirs.extend(self.windows_sdk.get_include_dirs())
        lib_dirs = [
            self.install_dir / layout.vc_lib,
            self.windows_sdk.get_lib_dir(layout),
        ]
        return {
            "INCLUDE": ENVIRONMENT_PATH_SEPARATOR.join(str(d) for d in include_dirs),
            "LIB": ENVIRONMENT_PATH_SEPARATOR.join(str(d) for d in lib_dirs),
        }

    def configure_tools(self, tools: ToolRegistry, target_platform: TargetPlatform):
        """
        Point every tool at the directories for the target architecture.

        Search paths and environments are overwritten, not merged. The
        registry is left untouched when the architecture is unsupported.

        Args:
            tools: Registry to rewrite
            target_platform: Platform whose architecture selects the layout

        Raises:
            UnsupportedArchitectureError: If the architecture has no known layout
        """
        layout = self.get_layout(target_platform.architecture)
        path = self.get_path(layout)
        environment = self.get_environment(layout)

        bin_dir = path[0]
        if not bin_dir.is_dir():
            logger.warning(
                f"Binary directory for {target_platform.architecture.name} "
                f"does not exist: {bin_dir}"
            )

        tools.set_path(path)
        tools.set_environment(environment)
        for slot in tools.slots():
            candidate = bin_dir / slot.exe_name
            slot.resolved_path = candidate if candidate.is_file() else None

        logger.info(
            f"Configured Visual C++ tools for {target_platform.architecture.name} "
            f"from {bin_dir}"
        )

    def __repr__(self) -> str:
        return (
            f"VisualStudioInstall(install_dir={self.install_dir!r}, "
            f"windows_sdk={self.windows_sdk.base_dir!r})"
        )
