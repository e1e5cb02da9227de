"""Trigger policy: whether a resize may run at all.

Stateless. Every check reads the live host and the configuration object
handed in for this invocation.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from goldenratio.domain.types import Suppression

if TYPE_CHECKING:
    from goldenratio.config.models import GoldenRatioConfig
    from goldenratio.infrastructure.host import LayoutHost


class TriggerPolicy:
    """Decide whether the active region should be resized right now."""

    def __init__(self, host: LayoutHost) -> None:
        self._host = host

    def evaluate(self, config: GoldenRatioConfig) -> Suppression | None:
        """Return the first reason to suppress the resize, or None to proceed."""
        host = self._host
        if host.is_minibuffer_focused():
            return Suppression.MINIBUFFER
        if len(host.list_regions()) == 1:
            return Suppression.SINGLE_REGION

        region = host.active_region()
        exclude = config.exclude
        if host.content_type_of(region) in exclude.modes:
            return Suppression.EXCLUDED_MODE

        name = host.content_identifier_of(region)
        if name in exclude.buffer_names:
            return Suppression.EXCLUDED_NAME
        if any(re.search(pattern, name) for pattern in exclude.buffer_regexp):
            return Suppression.EXCLUDED_PATTERN
        if exclude.inhibit_functions and all(fn() for fn in exclude.inhibit_functions):
            return Suppression.INHIBITED
        return None

    def allows(self, config: GoldenRatioConfig) -> bool:
        return self.evaluate(config) is None
