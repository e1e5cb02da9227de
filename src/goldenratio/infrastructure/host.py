"""Host layout service contract.

The embedding editor owns regions, geometry, resizing and event delivery.
The core only ever talks to it through :class:`LayoutHost`. Hosts deliver
events serially on one thread; nothing here is thread-safe.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Protocol, runtime_checkable

from goldenratio.domain.commands import CommandId
from goldenratio.domain.types import Axis

Unsubscribe = Callable[[], None]
CommandFn = Callable[..., Any]
CommandWrapper = Callable[[CommandFn], CommandFn]


@runtime_checkable
class Region(Protocol):
    """One rectangular tile of the display."""

    @property
    def name(self) -> str: ...

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    @property
    def is_full_width(self) -> bool: ...

    @property
    def is_full_height(self) -> bool: ...


class LayoutHost(Protocol):
    """Everything the resize core needs from the embedding environment."""

    def list_regions(self) -> Sequence[Region]:
        """Snapshot of all live regions, minibuffer excluded."""
        ...

    def active_region(self) -> Region: ...

    def is_minibuffer_focused(self) -> bool: ...

    def display_dimensions(self) -> tuple[int, int]:
        """``(height, width)`` of the drawable area in rows and columns."""
        ...

    def is_resizable(self, region: Region, axis: Axis, delta: int) -> bool: ...

    def resize(self, region: Region, axis: Axis, delta: int) -> None:
        """Grow *region* by *delta* along *axis*; negative deltas shrink."""
        ...

    def content_type_of(self, region: Region) -> str: ...

    def content_identifier_of(self, region: Region) -> str: ...

    def reset_hscroll(self, region: Region) -> None: ...

    def recenter(self, region: Region) -> None: ...

    def on_layout_change(self, callback: Callable[[], None]) -> Unsubscribe: ...

    def on_post_command(self, callback: Callable[[CommandId | None], None]) -> Unsubscribe: ...

    def wrap_command(self, name: str, wrapper: CommandWrapper) -> Unsubscribe:
        """Replace command *name* with ``wrapper(original)`` until unsubscribed."""
        ...
