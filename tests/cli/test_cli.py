"""
Tests for CLI argument parser.
"""

import pytest
from unittest.mock import patch
from pathlib import Path

from vctoolkit.cli.parser import CLI


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_creation(self):
        """Test CLI can be created."""
        cli = CLI()
        assert cli.parser is not None

    def test_no_command_shows_help(self, capsys):
        """Test that running without command shows help."""
        cli = CLI()
        result = cli.run([])

        assert result == 1
        captured = capsys.readouterr()
        assert "usage:" in captured.out.lower()

    def test_version_flag(self, capsys):
        """Test --version flag."""
        cli = CLI()

        with pytest.raises(SystemExit) as exc_info:
            cli.run(["--version"])

        assert exc_info.value.code == 0
        assert "vctoolkit" in capsys.readouterr().out

    def test_global_options(self):
        """Test global options are parsed before the command."""
        cli = CLI()
        args = cli.parse_args(
            ["--verbose", "--config", "my.yaml", "--install-dir", "C:/VS", "check"]
        )

        assert args.verbose is True
        assert args.quiet is False
        assert args.config == Path("my.yaml")
        assert args.install_dir == Path("C:/VS")
        assert args.command == "check"


class TestCommandParsing:
    """Test subcommand parsing."""

    def test_target_default_arch(self):
        """Test target defaults to the tool chain default architecture."""
        args = CLI().parse_args(["target"])

        assert args.command == "target"
        assert args.arch == "default"

    def test_target_arch(self):
        """Test target with --arch."""
        args = CLI().parse_args(["target", "--arch", "x64"])

        assert args.arch == "x64"

    def test_link_name_requires_names(self):
        """Test link-name needs at least one name."""
        with pytest.raises(SystemExit):
            CLI().parse_args(["link-name"])

    def test_link_name(self):
        """Test link-name collects names."""
        args = CLI().parse_args(["link-name", "foo.dll", "bar"])

        assert args.names == ["foo.dll", "bar"]


class TestDispatch:
    """Test command dispatch."""

    def test_dispatch_link_name(self, capsys):
        """Test a command runs end to end."""
        result = CLI().run(["link-name", "foo.dll"])

        assert result == 0
        assert "foo.dll -> foo.lib" in capsys.readouterr().out

    @patch("vctoolkit.cli.commands.check.run")
    def test_dispatch_check(self, mock_run):
        """Test check is routed to its module."""
        mock_run.return_value = 0

        assert CLI().run(["check"]) == 0
        mock_run.assert_called_once()

    @patch("vctoolkit.cli.commands.check.run")
    def test_unexpected_error(self, mock_run):
        """Test unexpected errors become exit code 1."""
        mock_run.side_effect = RuntimeError("boom")

        assert CLI().run(["check"]) == 1

    @patch("vctoolkit.cli.commands.check.run")
    def test_keyboard_interrupt(self, mock_run):
        """Test Ctrl+C gives the SIGINT exit code."""
        mock_run.side_effect = KeyboardInterrupt

        assert CLI().run(["check"]) == 130
