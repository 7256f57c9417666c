"""Command-line interface for isoline.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bar over traced levels
- Verbose/quiet output modes
- Per-level breakdown table in verbose mode
- Detailed error reporting
"""

from isoline.cli.app import cli, main

__all__ = ["cli", "main"]
