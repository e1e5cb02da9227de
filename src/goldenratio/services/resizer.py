"""Constrained per-axis enlargement of the active region.

Both baselines are measured before anything moves. Each axis is then
checked with the host and either applied or dropped on its own; a refused
axis never blocks the other one, and nothing is retried until the next
trigger.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from goldenratio.domain.geometry import (
    TargetDimensions,
    average_height_of_non_full_height_full_width_regions,
    average_width_of_non_full_width_regions,
)
from goldenratio.domain.types import Axis
from goldenratio.services.result import AxisOutcome

if TYPE_CHECKING:
    from goldenratio.infrastructure.host import LayoutHost, Region

logger = logging.getLogger(__name__)


def capped_delta(proposed: int, target: int, current: int) -> int:
    """Limit growth to what is left between *current* and *target*.

    Baselines never exceed the current size, so a growing proposal always
    collapses to ``target - current`` here; the sibling baseline only
    shapes shrinking proposals, which pass through unchanged.

    Examples:
        >>> capped_delta(18, 98, 80)
        18
        >>> capped_delta(18, 98, 98)
        0
        >>> capped_delta(-19, 29, 48)
        -19
    """
    if proposed <= 0:
        return proposed
    return min(proposed, max(0, target - current))


class ConstrainedResizer:
    """Grow a region toward target dimensions within host constraints."""

    def __init__(self, host: LayoutHost) -> None:
        self._host = host

    def resize_active_region(
        self,
        target: TargetDimensions,
        region: Region,
    ) -> tuple[AxisOutcome, AxisOutcome]:
        """Apply the vertical, then the horizontal delta to *region*.

        Returns the two outcomes in that order.
        """
        regions = self._host.list_regions()
        width_baseline = average_width_of_non_full_width_regions(regions, region)
        height_baseline = average_height_of_non_full_height_full_width_regions(regions, region)
        current_height, current_width = region.height, region.width

        vertical = self._apply(region, Axis.VERTICAL, target.height, height_baseline, current_height)
        horizontal = self._apply(region, Axis.HORIZONTAL, target.width, width_baseline, current_width)
        return vertical, horizontal

    def _apply(
        self,
        region: Region,
        axis: Axis,
        target: int,
        baseline: int,
        current: int,
    ) -> AxisOutcome:
        proposed = math.floor(target - baseline)
        delta = capped_delta(proposed, target, current)
        applied = False
        if delta != 0 and self._host.is_resizable(region, axis, delta):
            self._host.resize(region, axis, delta)
            applied = True
        elif delta != 0:
            logger.debug("Skipping %s resize of %s by %d", axis, region.name, delta)
        return AxisOutcome(
            axis=axis,
            baseline=baseline,
            proposed=proposed,
            delta=delta,
            applied=applied,
        )
