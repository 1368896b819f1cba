"""
Link-name command implementation.

Prints the link-time file name for shared library names.
"""

from vctoolkit.core.platform import PlatformInfo
from vctoolkit.toolchain.visualcpp import VisualCppToolChain


def run(args) -> int:
    """
    Run the link-name command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    # Naming is pure, so no host detection or discovery is needed
    toolchain = VisualCppToolChain(operating_system=PlatformInfo("windows", "x64"))
    for name in args.names:
        runtime_name = toolchain.get_shared_library_name(name)
        print(f"{runtime_name} -> {toolchain.get_shared_library_link_file_name(runtime_name)}")
    return 0
