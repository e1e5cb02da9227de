"""ResizeResult: what one orchestrator run did.

The public entry point discards it; tests, plugins and the CLI read it.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from goldenratio.domain.geometry import TargetDimensions
from goldenratio.domain.types import Axis, Suppression


class AxisOutcome(BaseModel):
    """Resize decision for one axis.

    Attributes:
        axis: Which dimension this outcome covers.
        baseline: Sibling-average size the proposal was measured from.
        proposed: ``target - baseline``, floored.
        delta: The delta actually requested from the host. Growth is capped
            at ``target - current``, which makes it independent of the
            baseline; a negative proposal is used as is.
        applied: Whether the host accepted and performed the resize.
    """

    model_config = {"frozen": True}

    axis: Axis
    baseline: int
    proposed: int
    delta: int
    applied: bool = False


class ResizeResult(BaseModel):
    """Outcome of a single orchestrator run.

    Attributes:
        fired: False when the run stopped before resizing anything.
        region: Name of the region that was active at the time.
        suppressed_by: Why the run stopped, when ``fired`` is False.
        target: Golden-ratio dimensions computed for this run.
        axes: Per-axis outcomes, vertical first.
        warnings: Non-fatal issues, such as failing plugin hooks.
    """

    model_config = {"frozen": True}

    fired: bool
    region: str | None = None
    suppressed_by: Suppression | None = None
    target: TargetDimensions | None = None
    axes: tuple[AxisOutcome, ...] = ()
    warnings: list[str] = Field(default_factory=list)

    def outcome(self, axis: Axis) -> AxisOutcome | None:
        return next((o for o in self.axes if o.axis is axis), None)

    def applied_delta(self, axis: Axis) -> int:
        """Delta the host applied along *axis*, 0 when skipped."""
        found = self.outcome(axis)
        if found is None or not found.applied:
            return 0
        return found.delta
