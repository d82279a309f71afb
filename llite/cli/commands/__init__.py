"""
CLI command modules.

Each module implements one subcommand of the llite CLI.
"""

from .check import cmd_check
from .inspect import STAGES, cmd_inspect
from .languages import cmd_languages
from .translate import cmd_translate

__all__ = ["cmd_check", "cmd_inspect", "cmd_languages", "cmd_translate", "STAGES"]
