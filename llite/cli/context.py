"""
CLI context management.

Provides the CLIContext dataclass shared by all commands of a single
invocation.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from ..config import WorkspaceConfig
from .errors import CLIConfigError


@dataclass
class CLIContext:
    """
    Shared context resolved from workspace configuration.

    Attributes:
        workspace_root: Directory searched for the configuration file
        config: Parsed workspace configuration
        verbose: Whether detailed errors are requested
    """

    workspace_root: Path
    config: WorkspaceConfig
    verbose: bool = False


def get_cli_context(args: argparse.Namespace) -> CLIContext:
    """
    Retrieve the CLIContext attached to parsed arguments.

    Raises:
        CLIConfigError: If context was not initialized
    """
    ctx = getattr(args, "cli_context", None)
    if ctx is None:
        raise CLIConfigError(
            "CLI context was not initialized before command execution",
            hint="This is an internal error - please report it",
            code="CLI_CONTEXT_NOT_INITIALIZED"
        )
    return ctx
