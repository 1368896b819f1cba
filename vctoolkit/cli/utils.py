"""
Shared utilities for CLI commands.

Provides common functionality used across multiple CLI commands to
eliminate duplication and ensure consistent behavior.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from vctoolkit.config.parser import create_toolchain, parse_config
from vctoolkit.toolchain.visualcpp import VisualCppToolChain

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "vctoolkit.yaml"


# ============================================================================
# Tool Chain Construction
# ============================================================================


def find_config_file(config: Optional[Path] = None) -> Optional[Path]:
    """
    Determine the configuration file to use.

    Args:
        config: Explicit configuration path from the command line

    Returns:
        The explicit path, ./vctoolkit.yaml if present, or None
    """
    if config:
        return Path(config)

    default_config = Path.cwd() / DEFAULT_CONFIG_FILE
    if default_config.exists():
        return default_config

    logger.debug("No config file found, using defaults")
    return None


def load_toolchain(args) -> VisualCppToolChain:
    """
    Build the tool chain described by command-line arguments.

    An --install-dir on the command line overrides the configuration file.

    Args:
        args: Parsed arguments with config and install_dir fields

    Returns:
        VisualCppToolChain ready for checking or targeting

    Raises:
        ConfigError: If the configuration file is invalid
    """
    config_file = find_config_file(getattr(args, "config", None))
    if config_file:
        logger.debug(f"Loading configuration from {config_file}")
        toolchain = create_toolchain(parse_config(config_file))
    else:
        toolchain = VisualCppToolChain()

    install_dir = getattr(args, "install_dir", None)
    if install_dir:
        toolchain.set_install_dir(install_dir)

    return toolchain


# ============================================================================
# User Interface / Output Formatting
# ============================================================================


def print_error(message: str, details: Optional[str] = None):
    """
    Print error message to stderr in consistent format.

    Args:
        message: Main error message
        details: Optional additional details
    """
    print(f"ERROR: {message}", file=sys.stderr)
    if details:
        print(f"  {details}", file=sys.stderr)


def safe_print(message: str, file=None):
    """
    Print message with safe encoding handling for Windows console.

    Falls back to ASCII-safe characters if Unicode symbols can't be encoded.

    Args:
        message: Message to print
        file: Output file (default: stdout)
    """
    try:
        print(message, file=file)
    except UnicodeEncodeError:
        safe_message = message.replace("✓", "[OK]").replace("✗", "[FAIL]")
        print(safe_message, file=file)
