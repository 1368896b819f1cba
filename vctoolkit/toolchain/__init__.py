"""
Tool chain module for vctoolkit.

This module provides functionality for:
- Tool registry with per-tool search paths and environments
- Availability checking with actionable diagnostics
- Visual Studio and Windows SDK discovery
- Per-architecture configuration of an installation
- Tool front-ends producing process invocations
"""

from vctoolkit.toolchain.availability import CheckResult, ToolChainAvailability
from vctoolkit.toolchain.compilers import (
    AssembleSpec,
    Assembler,
    CCompileSpec,
    CCompiler,
    CommandLineTool,
    CppCompileSpec,
    CppCompiler,
    ExecInvocation,
    LibExeStaticLibraryArchiver,
    LinkerSpec,
    LinkExeLinker,
    StaticLibraryArchiverSpec,
)
from vctoolkit.toolchain.install import (
    ARCHITECTURE_LAYOUTS,
    ArchitectureLayout,
    VisualStudioInstall,
    WindowsSdk,
)
from vctoolkit.toolchain.locator import InstallationRoot, SdkRoot, VisualStudioLocator
from vctoolkit.toolchain.tools import ToolRegistry, ToolSlot, ToolType
from vctoolkit.toolchain.visualcpp import (
    AmbientMode,
    InstallMode,
    VisualCppPlatformToolChain,
    VisualCppToolChain,
)

__all__ = [
    # Registry
    "ToolType",
    "ToolSlot",
    "ToolRegistry",
    # Availability
    "CheckResult",
    "ToolChainAvailability",
    # Discovery
    "InstallationRoot",
    "SdkRoot",
    "VisualStudioLocator",
    # Configuration
    "ARCHITECTURE_LAYOUTS",
    "ArchitectureLayout",
    "VisualStudioInstall",
    "WindowsSdk",
    # Tool chain
    "AmbientMode",
    "InstallMode",
    "VisualCppToolChain",
    "VisualCppPlatformToolChain",
    # Front-ends
    "CommandLineTool",
    "ExecInvocation",
    "CppCompileSpec",
    "CCompileSpec",
    "AssembleSpec",
    "LinkerSpec",
    "StaticLibraryArchiverSpec",
    "CppCompiler",
    "CCompiler",
    "Assembler",
    "LinkExeLinker",
    "LibExeStaticLibraryArchiver",
]
