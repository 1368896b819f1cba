"""
Visual C++ tool chain.

The tool chain runs in one of two modes:
- ambient mode: tools are found on the process PATH
- install mode: tools come from an explicit Visual Studio installation

Example:
    ```python
    from vctoolkit.core.platform import TargetPlatform
    from vctoolkit.toolchain.visualcpp import VisualCppToolChain

    toolchain = VisualCppToolChain()
    toolchain.set_install_dir("C:/Program Files (x86)/Microsoft Visual Studio 10.0")

    availability = toolchain.check_available()
    if availability.is_available:
        platform_toolchain = toolchain.target(TargetPlatform.parse("x64"))
        linker = platform_toolchain.create_linker()
    ```
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from vctoolkit.core.exceptions import (
    InstallNotFoundError,
    InvalidInstallDirError,
    SdkNotFoundError,
    ToolChainUnavailableError,
)
from vctoolkit.core.platform import (
    Architecture,
    PlatformInfo,
    TargetPlatform,
    detect_platform,
)
from vctoolkit.toolchain.availability import ToolChainAvailability
from vctoolkit.toolchain.compilers import (
    Assembler,
    CCompiler,
    CommandLineTool,
    CppCompiler,
    LibExeStaticLibraryArchiver,
    LinkExeLinker,
)
from vctoolkit.toolchain.install import (
    ArchitectureLayout,
    VisualStudioInstall,
    WindowsSdk,
)
from vctoolkit.toolchain.locator import VisualStudioLocator
from vctoolkit.toolchain.tools import ToolRegistry, ToolType

logger = logging.getLogger(__name__)

INSTALL_CHECK = "Visual Studio installation"
SDK_CHECK = "Windows SDK"

DEFAULT_EXE_NAMES: Dict[ToolType, str] = {
    ToolType.C_COMPILER: "cl.exe",
    ToolType.CPP_COMPILER: "cl.exe",
    ToolType.ASSEMBLER: "ml.exe",
    ToolType.LINKER: "link.exe",
    ToolType.STATIC_LIB_ARCHIVER: "lib.exe",
}


@dataclass(frozen=True)
class AmbientMode:
    """Tools are taken from the process PATH."""


@dataclass(frozen=True)
class InstallMode:
    """Tools are taken from an explicit installation directory."""

    install_dir: Path


ToolChainMode = Union[AmbientMode, InstallMode]


class VisualCppToolChain:
    """
    Discovers, validates and configures the Visual C++ tool chain.

    Each target() call configures a private copy of the tool registry, so
    platform tool chains issued for different architectures never share state.
    """

    DEFAULT_NAME = "visualCpp"

    def __init__(
        self,
        name: str = DEFAULT_NAME,
        operating_system: Optional[PlatformInfo] = None,
        locator: Optional[VisualStudioLocator] = None,
        layouts: Optional[Mapping[Architecture, ArchitectureLayout]] = None,
    ):
        """
        Initialize tool chain.

        Args:
            name: Tool chain name
            operating_system: Host platform (default: detected)
            locator: Installation and SDK locator
            layouts: Architecture layouts (default: the built-in table)
        """
        self.name = name
        self.operating_system = operating_system or detect_platform()
        self.locator = locator or VisualStudioLocator()
        self.layouts = layouts
        self.tools = ToolRegistry(DEFAULT_EXE_NAMES)
        self._mode: ToolChainMode = AmbientMode()

    @property
    def type_name(self) -> str:
        return "Visual C++"

    @property
    def mode(self) -> ToolChainMode:
        return self._mode

    @property
    def install_dir(self) -> Optional[Path]:
        if isinstance(self._mode, InstallMode):
            return self._mode.install_dir
        return None

    def set_install_dir(self, install_dir: Optional[Union[str, Path]]):
        """
        Select install mode for a directory, or ambient mode for None.

        Args:
            install_dir: Visual Studio installation directory

        Raises:
            InvalidInstallDirError: If the path exists but is not a directory
        """
        if install_dir is None:
            self._mode = AmbientMode()
            return

        path = Path(install_dir).resolve()
        if path.exists() and not path.is_dir():
            raise InvalidInstallDirError(path)
        self._mode = InstallMode(path)
        logger.debug(f"{self.name}: using install directory {path}")

    def check_available(self) -> ToolChainAvailability:
        """
        Check whether the tool chain can be used.

        Returns:
            Availability with the ordered probe results
        """
        availability = ToolChainAvailability()

        if not self.operating_system.is_windows():
            availability.unavailable(
                "Not available on this operating system.", name="operating system"
            )
            return availability

        if isinstance(self._mode, InstallMode):
            install = self.locator.locate_visual_studio(self._mode.install_dir)
            availability.must_exist(INSTALL_CHECK, install.path)
            if availability.is_available:
                sdk = self.locator.locate_windows_sdk()
                availability.must_exist(SDK_CHECK, sdk.path)
        else:
            for tool_type in ToolType:
                availability.must_exist(
                    tool_type.tool_name, self.tools.locate(tool_type)
                )

        return availability

    def target(self, target_platform: TargetPlatform) -> "VisualCppPlatformToolChain":
        """
        Configure the tool chain for a target platform.

        Args:
            target_platform: Platform to target

        Returns:
            Platform tool chain bound to its own configured registry

        Raises:
            ToolChainUnavailableError: If the availability check fails for
                any other reason
            InstallNotFoundError: If no Visual Studio installation is found
            SdkNotFoundError: If no Windows SDK is found
            UnsupportedArchitectureError: If the architecture has no known layout
        """
        architecture = target_platform.architecture
        availability = self.check_available()
        failure = availability.failure
        if failure is not None:
            if failure.name == INSTALL_CHECK:
                raise InstallNotFoundError(architecture)
            if failure.name == SDK_CHECK:
                raise SdkNotFoundError(architecture)
            raise ToolChainUnavailableError(self.name, failure.message, architecture)

        tools = self.tools.copy()

        if (
            isinstance(self._mode, AmbientMode)
            and architecture == Architecture.TOOL_CHAIN_DEFAULT
        ):
            logger.debug(f"{self.name}: building with tools from PATH")
            return VisualCppPlatformToolChain(self, tools)

        # Either an install dir was given, or infer the install from cl.exe on PATH
        if isinstance(self._mode, InstallMode):
            candidate = self._mode.install_dir
        else:
            candidate = tools.locate(ToolType.CPP_COMPILER)

        install = self.locator.locate_visual_studio(candidate)
        if not install.discovered:
            raise InstallNotFoundError(architecture)

        sdk = self.locator.locate_windows_sdk()
        if not sdk.discovered:
            raise SdkNotFoundError(architecture)

        visual_studio = VisualStudioInstall(
            install.path, WindowsSdk(sdk.path), layouts=self.layouts
        )
        visual_studio.configure_tools(tools, target_platform)
        return VisualCppPlatformToolChain(self, tools)

    def get_shared_library_name(self, library_name: str) -> str:
        if library_name.lower().endswith(".dll"):
            return library_name
        return f"{library_name}.dll"

    def get_shared_library_link_file_name(self, library_name: str) -> str:
        """
        Get the file name to link against for a shared library.

        The runtime .dll suffix is replaced with .lib; names without that
        suffix are returned unchanged.
        """
        return re.sub(r"\.dll$", ".lib", library_name)

    def get_static_library_name(self, library_name: str) -> str:
        if library_name.lower().endswith(".lib"):
            return library_name
        return f"{library_name}.lib"

    def get_executable_name(self, executable_name: str) -> str:
        if executable_name.lower().endswith(".exe"):
            return executable_name
        return f"{executable_name}.exe"

    def __repr__(self) -> str:
        return f"VisualCppToolChain({self.name!r}, mode={self._mode})"


class VisualCppPlatformToolChain:
    """Tool factories for one targeted platform."""

    def __init__(self, toolchain: VisualCppToolChain, tools: ToolRegistry):
        self._toolchain = toolchain
        self.tools = tools

    def create_cpp_compiler(self) -> CppCompiler:
        return CppCompiler(self._command_line_tool(ToolType.CPP_COMPILER))

    def create_c_compiler(self) -> CCompiler:
        return CCompiler(self._command_line_tool(ToolType.C_COMPILER))

    def create_assembler(self) -> Assembler:
        return Assembler(self._command_line_tool(ToolType.ASSEMBLER))

    def create_linker(self) -> LinkExeLinker:
        return LinkExeLinker(self._command_line_tool(ToolType.LINKER))

    def create_static_library_archiver(self) -> LibExeStaticLibraryArchiver:
        return LibExeStaticLibraryArchiver(
            self._command_line_tool(ToolType.STATIC_LIB_ARCHIVER)
        )

    def _command_line_tool(self, tool_type: ToolType) -> CommandLineTool:
        # Configured paths win; otherwise search again
        located = self.tools.slot(tool_type).resolved_path
        if located is None:
            located = self.tools.locate(tool_type)
        executable = str(located) if located else self.tools.get_exe_name(tool_type)
        return CommandLineTool(
            tool_type.tool_name,
            executable,
            path=self.tools.get_path(tool_type),
            environment=self.tools.get_environment(tool_type),
        )

    def get_output_type(self) -> str:
        return f"{self._toolchain.name}-{self._toolchain.operating_system.os}"
