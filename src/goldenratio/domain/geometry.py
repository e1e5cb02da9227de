"""Target dimensions and sibling baselines.

Pure functions over a snapshot of region geometry. Everything here works in
whole rows and columns; results are floored, never rounded.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from goldenratio.infrastructure.host import Region

GOLDEN_RATIO = 1.618


class TargetDimensions(BaseModel):
    """Rows and columns the active region should grow toward."""

    model_config = {"frozen": True}

    height: int
    width: int


def compute_target_dimensions(
    height: int,
    width: int,
    *,
    scale: float = 1.0,
    max_width: int | None = None,
) -> TargetDimensions:
    """Golden-ratio share of a display of *height* rows by *width* columns.

    *scale* only applies to the width, so wide displays can be toned down
    without touching the vertical split. The result is not clamped to the
    display; an unreachable target simply fails the feasibility check later.

    Examples:
        >>> compute_target_dimensions(48, 160)
        TargetDimensions(height=29, width=98)
    """
    target_width = math.floor(width / GOLDEN_RATIO * scale)
    if max_width is not None:
        target_width = min(max_width, target_width)
    return TargetDimensions(
        height=math.floor(height / GOLDEN_RATIO),
        width=target_width,
    )


def _clamped_average(sizes: list[int], current: int) -> int:
    if not sizes:
        return current
    return min(sum(sizes) // len(sizes), current)


def average_width_of_non_full_width_regions(
    regions: Sequence[Region],
    active: Region,
) -> int:
    """Mean width of regions that share a row with something else.

    Falls back to *active*'s width when every region spans the display, and
    never returns more than *active*'s current width.
    """
    widths = [r.width for r in regions if not r.is_full_width]
    return _clamped_average(widths, active.width)


def average_height_of_non_full_height_full_width_regions(
    regions: Sequence[Region],
    active: Region,
) -> int:
    """Mean height of full-width regions stacked above or below one another.

    Same fallback and clamp as the width baseline.
    """
    heights = [r.height for r in regions if r.is_full_width and not r.is_full_height]
    return _clamped_average(heights, active.height)
