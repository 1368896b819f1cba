"""
Entry point for running the vctoolkit CLI as a module.

Usage: python -m vctoolkit.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
