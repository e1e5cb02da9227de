"""Rich rendering for the goldenratio CLI.

Renders to a StringIO-backed Console so commands return plain strings;
in non-TTY environments (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

if TYPE_CHECKING:
    from goldenratio.infrastructure.tiling import TilingHost
    from goldenratio.services.result import ResizeResult

GR_THEME = Theme(
    {
        "gr.active": "bold green",
        "gr.muted": "dim",
        "gr.warning": "bold yellow",
        "gr.title": "bold cyan",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=GR_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def layout_table(host: TilingHost, title: str) -> Table:
    """One row per window: geometry, buffer and span flags."""
    table = Table(title=title, title_style="gr.title")
    for column in ("window", "buffer", "left", "top", "width", "height", "full"):
        table.add_column(column)
    for window, (left, top, _right, _bottom) in host.edges().items():
        spans = [flag for flag, on in (("w", window.is_full_width), ("h", window.is_full_height)) if on]
        style = "gr.active" if window is host.selected else None
        table.add_row(
            window.name,
            window.buffer,
            str(left),
            str(top),
            str(window.width),
            str(window.height),
            "".join(spans) or "-",
            style=style,
        )
    return table


def render_simulation(before: Table, after: Table, result: ResizeResult) -> str:
    """Before/after layout tables followed by the resize summary."""
    console = create_console()
    console.print(before)
    console.print(after)
    if not result.fired:
        console.print(f"[gr.warning]suppressed:[/] {result.suppressed_by}")
    else:
        assert result.target is not None
        console.print(f"target: {result.target.height} rows x {result.target.width} columns")
        for outcome in result.axes:
            status = "applied" if outcome.applied else "[gr.muted]skipped[/]"
            console.print(
                f"{outcome.axis}: baseline={outcome.baseline} "
                f"proposed={outcome.proposed} delta={outcome.delta} {status}"
            )
    for warning in result.warnings:
        console.print(f"[gr.warning]WARNING:[/] {warning}")
    return get_output(console)
