"""ResizeOrchestrator: one resize evaluation, start to finish.

policy check -> target dimensions -> constrained resize -> cosmetic follow-up.

The configuration object is read once at the start of :meth:`run` and
used unchanged for the rest of the invocation, so swapping
:attr:`ResizeOrchestrator.config` from a callback can only affect the next
run. Resizing makes most hosts fire their layout-change notification
synchronously; a run that starts while another is in progress returns
immediately instead of recursing.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import structlog

from goldenratio.domain.geometry import compute_target_dimensions
from goldenratio.domain.types import Suppression
from goldenratio.services.policy import TriggerPolicy
from goldenratio.services.resizer import ConstrainedResizer
from goldenratio.services.result import ResizeResult

if TYPE_CHECKING:
    from goldenratio.config.models import GoldenRatioConfig
    from goldenratio.infrastructure.host import LayoutHost
    from goldenratio.plugins.event_bus import EventBus

logger = logging.getLogger(__name__)
log = structlog.get_logger(__name__)


class ResizeOrchestrator:
    """Entry point invoked on every trigger event.

    Parameters:
        host: The layout service to query and resize.
        config: Initial configuration; replace :attr:`config` to change it.
        event_bus: Optional plugin dispatch for resize events.
    """

    def __init__(
        self,
        host: LayoutHost,
        config: GoldenRatioConfig,
        *,
        event_bus: EventBus | None = None,
    ) -> None:
        self.config = config
        self._host = host
        self._policy = TriggerPolicy(host)
        self._resizer = ConstrainedResizer(host)
        self._event_bus = event_bus
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> ResizeResult:
        """Evaluate the policy and, if allowed, resize the active region."""
        if self._running:
            logger.debug("Ignoring resize trigger raised by an in-progress resize")
            return ResizeResult(fired=False, suppressed_by=Suppression.IN_PROGRESS)

        config = self.config
        host = self._host
        region = host.active_region()
        warnings: list[str] = []

        reason = self._policy.evaluate(config)
        if reason is not None:
            if logger.isEnabledFor(logging.DEBUG):
                log.debug("resize.suppressed", region=region.name, reason=str(reason))
            self._dispatch_event(
                "resize_suppressed",
                {"region": region.name, "reason": str(reason)},
                warnings,
            )
            return ResizeResult(
                fired=False,
                region=region.name,
                suppressed_by=reason,
                warnings=warnings,
            )

        height, width = host.display_dimensions()
        target = compute_target_dimensions(
            height,
            width,
            scale=config.scale_factor(width),
            max_width=config.resize.max_width,
        )

        self._running = True
        try:
            axes = self._resizer.resize_active_region(target, region)
            if config.resize.recenter:
                host.reset_hscroll(region)
                host.recenter(region)
        finally:
            self._running = False

        if logger.isEnabledFor(logging.DEBUG):
            log.debug(
                "resize.applied",
                region=region.name,
                target_height=target.height,
                target_width=target.width,
                row_delta=axes[0].delta if axes[0].applied else 0,
                col_delta=axes[1].delta if axes[1].applied else 0,
            )
        self._dispatch_event(
            "post_resize",
            {
                "region": region.name,
                "target": target.model_dump(),
                "axes": [outcome.model_dump(mode="json") for outcome in axes],
            },
            warnings,
        )
        return ResizeResult(
            fired=True,
            region=region.name,
            target=target,
            axes=axes,
            warnings=warnings,
        )

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Dispatch a resize event. No-op without an event bus.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        if self._event_bus is None:
            return
        if not self._event_bus.dispatch(hook_name, payload):
            warnings.append(f"Event dispatch failed for {hook_name}")
