"""Command: run the resize pipeline against an in-memory layout."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from goldenratio.infrastructure.tiling import LayoutError, TilingHost
from goldenratio.output.console import layout_table, render_simulation
from goldenratio.services.orchestrator import ResizeOrchestrator

if TYPE_CHECKING:
    from goldenratio.commands._context import AppContext

_EXAMPLES = """\b
Examples:
  goldenratio simulate --split right
  goldenratio simulate --split right --split below --focus win-3
  goldenratio --json simulate -H 60 -W 200 --split below --runs 2"""


@click.command(epilog=_EXAMPLES)
@click.option("-H", "--height", default=48, type=click.IntRange(min=1), help="Display rows.")
@click.option("-W", "--width", default=160, type=click.IntRange(min=1), help="Display columns.")
@click.option(
    "--split",
    "splits",
    multiple=True,
    type=click.Choice(["right", "below"]),
    help="Split the selected window; repeat to build the layout.",
)
@click.option("--focus", default=None, help="Window to select before resizing.")
@click.option("--buffer", default=None, help="Buffer shown in the focused window.")
@click.option("--mode", default=None, help="Major mode of that buffer.")
@click.option("--runs", default=1, type=click.IntRange(min=1), help="Resize this many times.")
@click.pass_obj
def simulate(
    app: AppContext,
    height: int,
    width: int,
    splits: tuple[str, ...],
    focus: str | None,
    buffer: str | None,
    mode: str | None,
    runs: int,
) -> None:
    """Build a layout, resize the focused window, and show the result."""
    host = TilingHost(height, width)
    try:
        for direction in splits:
            if direction == "right":
                host.split_right()
            else:
                host.split_below()
        if focus is not None:
            host.select(host.window(focus))
    except LayoutError as exc:
        raise click.ClickException(str(exc)) from exc
    if buffer is not None:
        host.switch_to_buffer(buffer, mode)

    before = layout_table(host, "before")
    orchestrator = ResizeOrchestrator(host, app.config)
    results = [orchestrator.run() for _ in range(runs)]

    if app.json_output:
        app.emit_json(
            {
                "runs": [r.model_dump(mode="json") for r in results],
                "windows": [
                    {
                        "name": w.name,
                        "buffer": w.buffer,
                        "width": w.width,
                        "height": w.height,
                        "selected": w is host.selected,
                    }
                    for w in host.list_regions()
                ],
            }
        )
        return
    click.echo(render_simulation(before, layout_table(host, "after"), results[-1]), nl=False)
