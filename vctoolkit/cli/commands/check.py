"""
Check command implementation.

Reports whether the Visual C++ tool chain is available, probe by probe.
"""

import logging

from vctoolkit.cli.utils import load_toolchain, safe_print

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the check command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if available, 1 otherwise)
    """
    toolchain = load_toolchain(args)
    logger.debug(f"Checking {toolchain}")

    availability = toolchain.check_available()

    safe_print(f"{toolchain.type_name} tool chain '{toolchain.name}'")
    for result in availability.results:
        mark = "✓" if result.passed else "✗"
        safe_print(f"  {mark} {result.name}: {result.message}")

    if availability.is_available:
        safe_print("Available")
        return 0

    safe_print(f"Not available: {availability.unavailable_message}")
    return 1
