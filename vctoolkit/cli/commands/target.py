"""
Target command implementation.

Targets an architecture and prints the resolved tools, search path and
environment.
"""

import logging

from vctoolkit.cli.utils import load_toolchain, print_error
from vctoolkit.core.exceptions import ToolChainError
from vctoolkit.core.platform import TargetPlatform
from vctoolkit.toolchain.tools import ToolType

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the target command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 if targeting failed)
    """
    try:
        target_platform = TargetPlatform.parse(args.arch)
    except ValueError as e:
        print_error(str(e))
        return 1

    toolchain = load_toolchain(args)

    try:
        platform_toolchain = toolchain.target(target_platform)
    except ToolChainError as e:
        print_error(str(e))
        return 1

    print(f"Output type: {platform_toolchain.get_output_type()}")
    print("Tools:")
    tools = platform_toolchain.tools
    for tool_type in ToolType:
        located = tools.locate(tool_type)
        print(f"  {tool_type.tool_name}: {located or tools.get_exe_name(tool_type)}")

    path = tools.get_path()
    if path:
        print("Path:")
        for entry in path:
            print(f"  {entry}")

    environment = tools.get_environment()
    if environment:
        print("Environment:")
        for key in sorted(environment):
            print(f"  {key}={environment[key]}")

    return 0
