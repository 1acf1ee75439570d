"""Subcommand modules for lintkit.

Provides register_commands(), which imports each tool's command lazily so
``lintkit --help`` stays fast as more tools are added.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every tool command on the root CLI group."""
    from lintkit.commands.wikifmt import wikifmt

    cli.add_command(wikifmt)
