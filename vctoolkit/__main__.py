"""
Entry point for running the vctoolkit CLI as a module.

Usage: python -m vctoolkit [command] [options]
"""

from vctoolkit.cli.parser import main

if __name__ == "__main__":
    main()
