"""Axis and suppression enums shared across the resize pipeline."""

from __future__ import annotations

from enum import StrEnum


class Axis(StrEnum):
    """Resize axis. Vertical changes rows, horizontal changes columns."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class Suppression(StrEnum):
    """Reasons a resize evaluation stops before touching the layout."""

    MINIBUFFER = "minibuffer"
    SINGLE_REGION = "single_region"
    EXCLUDED_MODE = "excluded_mode"
    EXCLUDED_NAME = "excluded_name"
    EXCLUDED_PATTERN = "excluded_pattern"
    INHIBITED = "inhibited"
    IN_PROGRESS = "in_progress"
