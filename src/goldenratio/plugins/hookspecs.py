"""Pluggy hook specifications for goldenratio resize events.

Hooks are observers: they run after the fact and cannot veto or alter a
resize. Inhibiting resizes is done with ``exclude.inhibit_functions``.
"""

from __future__ import annotations

from typing import Any

import pluggy

hookspec = pluggy.HookspecMarker("goldenratio")


class GoldenRatioHookSpec:
    """Hook specifications for the goldenratio plugin system."""

    @hookspec
    def post_resize(
        self,
        region: str,
        target: dict[str, int],
        axes: list[dict[str, Any]],
    ) -> None:
        """Called after the orchestrator resized the active region."""

    @hookspec
    def resize_suppressed(self, region: str, reason: str) -> None:
        """Called when the trigger policy stopped a resize."""

    @hookspec
    def post_enable(self) -> None:
        """Called after the mode registered its triggers."""

    @hookspec
    def post_disable(self) -> None:
        """Called after the mode removed its triggers."""
