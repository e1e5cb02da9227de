"""Command: golden-ratio target dimensions for a display size."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from goldenratio.domain.geometry import compute_target_dimensions

if TYPE_CHECKING:
    from goldenratio.commands._context import AppContext


@click.command()
@click.argument("height", type=click.IntRange(min=1))
@click.argument("width", type=click.IntRange(min=1))
@click.pass_obj
def target(app: AppContext, height: int, width: int) -> None:
    """Show the target size of the active window on a HEIGHT x WIDTH display."""
    config = app.config
    dims = compute_target_dimensions(
        height,
        width,
        scale=config.scale_factor(width),
        max_width=config.resize.max_width,
    )
    if app.json_output:
        app.emit_json(dims.model_dump())
    else:
        click.echo(f"{dims.height} rows x {dims.width} columns")
