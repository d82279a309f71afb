"""
Main entry point for the llite CLI when run as a module.

This allows the CLI to be executed using:
    python -m llite.cli
"""

from . import main

if __name__ == '__main__':
    main()
