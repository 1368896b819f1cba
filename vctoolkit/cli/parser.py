"""
vctoolkit CLI argument parser.

This module implements the command-line interface for vctoolkit using argparse.
"""

import argparse
import importlib
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("vctoolkit")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """vctoolkit command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="vctoolkit",
            description="vctoolkit - Visual C++ tool chain discovery and configuration",
            epilog='Use "vctoolkit COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"vctoolkit {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./vctoolkit.yaml)",
        )
        parser.add_argument(
            "--install-dir",
            type=Path,
            metavar="PATH",
            help="Visual Studio installation directory (default: use tools on PATH)",
        )

        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_check_command(subparsers)
        self._add_target_command(subparsers)
        self._add_link_name_command(subparsers)

        return parser

    def _add_check_command(self, subparsers):
        """Add 'check' subcommand."""
        subparsers.add_parser(
            "check",
            help="Check tool chain availability",
            description="Run the availability probes and report the first failure",
        )

    def _add_target_command(self, subparsers):
        """Add 'target' subcommand."""
        parser = subparsers.add_parser(
            "target",
            help="Configure tools for an architecture",
            description="Target an architecture and show the resolved tools and environment",
        )
        parser.add_argument(
            "--arch",
            default="default",
            metavar="ARCH",
            help="Target architecture (default|x86|x64|ia64|arm|arm64) [default: default]",
        )

    def _add_link_name_command(self, subparsers):
        """Add 'link-name' subcommand."""
        parser = subparsers.add_parser(
            "link-name",
            help="Show link-time file names for shared libraries",
            description="Derive the import library name from a shared library name",
        )
        parser.add_argument("names", nargs="+", metavar="NAME", help="Library name")

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except Exception as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        command_map = {
            "check": "vctoolkit.cli.commands.check",
            "target": "vctoolkit.cli.commands.target",
            "link-name": "vctoolkit.cli.commands.link_name",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
