"""
Centralized exception hierarchy for vctoolkit.

Availability problems are reported through ToolChainAvailability and are never
raised. The exceptions below cover fatal targeting failures, malformed input,
failed tool executions and configuration errors.
"""

from typing import Optional


# ============================================================================
# Base Exceptions
# ============================================================================


class VCToolkitError(Exception):
    """Base exception for all vctoolkit errors."""

    pass


class ConfigError(VCToolkitError):
    """Configuration parsing or validation error."""

    pass


# ============================================================================
# Tool Chain Exceptions
# ============================================================================


class ToolChainError(VCToolkitError):
    """Base exception for tool chain errors."""

    pass


class ToolChainUnavailableError(ToolChainError):
    """Raised when targeting a tool chain that failed its availability check."""

    def __init__(self, toolchain_name: str, reason: str, architecture=None):
        self.toolchain_name = toolchain_name
        self.reason = reason
        self.architecture = architecture
        message = f"Tool chain '{toolchain_name}' is not available: {reason}"
        if architecture is not None:
            message = (
                f"{message.rstrip('.')}, "
                f"so cannot target platform {_arch_name(architecture)}"
            )
        super().__init__(message)


class InvalidInstallDirError(ToolChainError):
    """Raised when a supplied installation directory is not a directory at all."""

    def __init__(self, path, detail: str = "is not a directory"):
        self.path = path
        super().__init__(f"Invalid installation directory {path}: {detail}")


class ToolExecutionError(ToolChainError):
    """Raised when a tool exits with a non-zero exit code."""

    def __init__(self, tool_name: str, exit_code: int):
        self.tool_name = tool_name
        self.exit_code = exit_code
        super().__init__(
            f"{tool_name} failed with exit code {exit_code}; "
            "see the error output for details."
        )


# ============================================================================
# Targeting Exceptions
# ============================================================================


class TargetingError(ToolChainError):
    """Base exception for fatal failures while targeting a platform."""

    def __init__(self, message: str, architecture: Optional[object] = None):
        self.architecture = architecture
        super().__init__(message)


class InstallNotFoundError(TargetingError):
    """Raised when no Visual Studio installation can be resolved for a target."""

    def __init__(self, architecture):
        super().__init__(
            "Could not find Visual Studio install, "
            f"so cannot target platform {_arch_name(architecture)}",
            architecture,
        )


class SdkNotFoundError(TargetingError):
    """Raised when no Windows SDK can be resolved for a target."""

    def __init__(self, architecture):
        super().__init__(
            f"Could not find Windows SDK, so cannot target platform {_arch_name(architecture)}",
            architecture,
        )


class UnsupportedArchitectureError(TargetingError):
    """Raised when an architecture has no known installation layout."""

    def __init__(self, architecture):
        super().__init__(
            "No Visual Studio layout is known for architecture "
            f"{_arch_name(architecture)}, so cannot target it",
            architecture,
        )


def _arch_name(architecture) -> str:
    # Enum members print as their name, plain strings as-is
    return getattr(architecture, "name", str(architecture))
