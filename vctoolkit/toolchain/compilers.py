"""
Tool front-ends for Visual C++.

Each front-end turns a structured spec into an ExecInvocation: the argument
vector, working directory and environment needed to run cl.exe, ml.exe,
link.exe or lib.exe. The mapping from spec to arguments is deterministic.
"""

import logging
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from vctoolkit.core.exceptions import ToolExecutionError

logger = logging.getLogger(__name__)


# ============================================================================
# Specs
# ============================================================================


@dataclass
class CompileSpec:
    """
    Inputs for a compile step.

    Attributes:
        source_files: Files to compile
        object_file_dir: Directory receiving the object files
        include_roots: Include directories
        macros: Preprocessor definitions ('NAME' or 'NAME=VALUE')
        args: Extra compiler arguments, passed through verbatim
    """

    source_files: List[Path]
    object_file_dir: Path
    include_roots: List[Path] = field(default_factory=list)
    macros: List[str] = field(default_factory=list)
    args: List[str] = field(default_factory=list)


@dataclass
class CppCompileSpec(CompileSpec):
    """Inputs for compiling C++ sources."""


@dataclass
class CCompileSpec(CompileSpec):
    """Inputs for compiling C sources."""


@dataclass
class AssembleSpec:
    """Inputs for assembling sources with ml.exe."""

    source_files: List[Path]
    object_file_dir: Path
    args: List[str] = field(default_factory=list)


@dataclass
class LinkerSpec:
    """
    Inputs for a link step.

    Attributes:
        object_files: Object files to link
        output_file: Executable or DLL to produce
        libraries: Libraries to link against
        library_path: Additional library directories
        args: Extra linker arguments, passed through verbatim
        shared: Produce a DLL instead of an executable
    """

    object_files: List[Path]
    output_file: Path
    libraries: List[Path] = field(default_factory=list)
    library_path: List[Path] = field(default_factory=list)
    args: List[str] = field(default_factory=list)
    shared: bool = False


@dataclass
class StaticLibraryArchiverSpec:
    """Inputs for building a static library with lib.exe."""

    object_files: List[Path]
    output_file: Path
    args: List[str] = field(default_factory=list)


# ============================================================================
# Invocation
# ============================================================================


@dataclass(frozen=True)
class ExecInvocation:
    """
    A fully-formed process invocation.

    Attributes:
        argv: Executable followed by its arguments
        working_dir: Directory to run in
        environment: Variables to set on top of the inherited environment;
            compared for equality but left out of the hash
    """

    argv: Tuple[str, ...]
    working_dir: Path
    environment: Dict[str, str] = field(default_factory=dict, hash=False)

    def merged_environment(self, base: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """
        Combine the invocation environment with a base environment.

        PATH entries of the invocation are prepended to the inherited PATH.

        Args:
            base: Environment to inherit (default: os.environ)

        Returns:
            Complete environment for the child process
        """
        env = dict(os.environ if base is None else base)
        for key, value in self.environment.items():
            if key == "PATH" and env.get("PATH"):
                env["PATH"] = value + os.pathsep + env["PATH"]
            else:
                env[key] = value
        return env

    def execute(self) -> subprocess.CompletedProcess:
        """
        Run the invocation.

        Returns:
            Completed process with captured output

        Raises:
            ToolExecutionError: If the tool exits with a non-zero code
        """
        logger.debug(f"Running {' '.join(self.argv)} in {self.working_dir}")
        result = subprocess.run(
            list(self.argv),
            cwd=str(self.working_dir),
            env=self.merged_environment(),
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            logger.error(result.stderr or result.stdout)
            raise ToolExecutionError(Path(self.argv[0]).name, result.returncode)
        return result


class CommandLineTool:
    """
    Snapshot of a tool's executable, search path and environment.

    The snapshot is taken by value, so reconfiguring the registry it came from
    does not affect it.
    """

    def __init__(
        self,
        tool_name: str,
        executable: str,
        path: Sequence[Path] = (),
        environment: Optional[Dict[str, str]] = None,
    ):
        self.tool_name = tool_name
        self.executable = executable
        self.path: Tuple[Path, ...] = tuple(path)
        self.environment: Dict[str, str] = dict(environment or {})

    def invocation(self, args: Sequence[str], working_dir: Path) -> ExecInvocation:
        env = dict(self.environment)
        if self.path:
            env["PATH"] = os.pathsep.join(str(p) for p in self.path)
        return ExecInvocation(
            argv=(self.executable, *args),
            working_dir=Path(working_dir),
            environment=env,
        )

    def __repr__(self) -> str:
        return f"CommandLineTool({self.tool_name!r}, {self.executable!r})"


# ============================================================================
# Front-ends
# ============================================================================


class ToolFrontEnd:
    """Base class for front-ends wrapping a CommandLineTool."""

    def __init__(self, command_line_tool: CommandLineTool):
        self.command_line_tool = command_line_tool

    def build_arguments(self, spec) -> List[str]:
        raise NotImplementedError

    def working_dir(self, spec) -> Path:
        raise NotImplementedError

    def build_invocation(self, spec) -> ExecInvocation:
        """Translate a spec into a process invocation."""
        return self.command_line_tool.invocation(
            self.build_arguments(spec), self.working_dir(spec)
        )

    def execute(self, spec) -> subprocess.CompletedProcess:
        """Build the invocation for a spec and run it."""
        return self.build_invocation(spec).execute()


def _output_dir_arg(flag: str, directory: Path) -> str:
    # A trailing backslash tells cl.exe and ml.exe the target is a directory
    return f"{flag}{directory}\\"


class _VisualCppCompiler(ToolFrontEnd):
    language_args: Tuple[str, ...] = ()

    def build_arguments(self, spec: CompileSpec) -> List[str]:
        args = ["/nologo", *self.language_args]
        args.extend(f"/D{macro}" for macro in spec.macros)
        args.extend(spec.args)
        args.append("/c")
        args.extend(f"/I{root}" for root in spec.include_roots)
        args.append(_output_dir_arg("/Fo", spec.object_file_dir))
        args.extend(str(source) for source in spec.source_files)
        return args

    def working_dir(self, spec: CompileSpec) -> Path:
        return Path(spec.object_file_dir)


class CppCompiler(_VisualCppCompiler):
    """cl.exe compiling C++ sources."""

    language_args = ("/TP", "/EHsc")


class CCompiler(_VisualCppCompiler):
    """cl.exe compiling C sources."""

    language_args = ("/TC",)


class Assembler(ToolFrontEnd):
    """ml.exe assembling sources."""

    def build_arguments(self, spec: AssembleSpec) -> List[str]:
        args = ["/nologo", *spec.args, "/c"]
        args.append(_output_dir_arg("/Fo", spec.object_file_dir))
        args.extend(str(source) for source in spec.source_files)
        return args

    def working_dir(self, spec: AssembleSpec) -> Path:
        return Path(spec.object_file_dir)


class LinkExeLinker(ToolFrontEnd):
    """link.exe producing executables and DLLs."""

    def build_arguments(self, spec: LinkerSpec) -> List[str]:
        args = ["/nologo", *spec.args]
        if spec.shared:
            args.append("/DLL")
        args.append(f"/OUT:{spec.output_file}")
        args.extend(f"/LIBPATH:{directory}" for directory in spec.library_path)
        args.extend(str(obj) for obj in spec.object_files)
        args.extend(str(lib) for lib in spec.libraries)
        return args

    def working_dir(self, spec: LinkerSpec) -> Path:
        return Path(spec.output_file).parent


class LibExeStaticLibraryArchiver(ToolFrontEnd):
    """lib.exe producing static libraries."""

    def build_arguments(self, spec: StaticLibraryArchiverSpec) -> List[str]:
        args = ["/nologo", *spec.args, f"/OUT:{spec.output_file}"]
        args.extend(str(obj) for obj in spec.object_files)
        return args

    def working_dir(self, spec: StaticLibraryArchiverSpec) -> Path:
        return Path(spec.output_file).parent
