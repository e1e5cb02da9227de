"""Subcommand modules for goldenratio.

Provides register_commands() which uses deferred imports to keep
``goldenratio --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from goldenratio.commands.config_cmd import config_cmd
    from goldenratio.commands.simulate import simulate
    from goldenratio.commands.target import target

    cli.add_command(target)
    cli.add_command(config_cmd)
    cli.add_command(simulate)
