"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from goldenratio.config.logging import configure_logging

if TYPE_CHECKING:
    from goldenratio.config.models import GoldenRatioConfig
    from goldenratio.config.settings import GoldenRatioSettings


class AppContext:
    """Settings plus output helpers shared by every command."""

    def __init__(self, settings: GoldenRatioSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def config(self) -> GoldenRatioConfig:
        return self.settings.to_config()

    @property
    def json_output(self) -> bool:
        return self.settings.json_output

    def emit_json(self, payload: dict[str, Any]) -> None:
        click.echo(json.dumps(payload, indent=2))
