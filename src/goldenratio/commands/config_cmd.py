"""Command: print the effective configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from goldenratio.commands._context import AppContext

# Set-valued fields dump in arbitrary order.
_SET_FIELDS = {"modes", "buffer_names", "extra_commands"}


@click.command("config")
@click.pass_obj
def config_cmd(app: AppContext) -> None:
    """Show the configuration after merging TOML, environment and defaults."""
    data = app.config.model_dump(mode="json", exclude={"exclude": {"inhibit_functions"}})
    for section in data.values():
        for key in _SET_FIELDS & section.keys():
            section[key] = sorted(section[key])
    source = str(app.settings.config_path) if app.settings.config_path else None
    if app.json_output:
        app.emit_json({**data, "source": source})
        return
    click.echo(f"source: {source or '(defaults)'}")
    for name, section in data.items():
        click.echo(f"[{name}]")
        for key, value in section.items():
            click.echo(f"  {key} = {value}")
