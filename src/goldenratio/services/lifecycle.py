"""GoldenRatioMode: the enable/disable lifecycle and trigger wiring.

Three trigger paths converge on the orchestrator:

- layout-change notifications from the host;
- post-command checks against ``triggers.extra_commands``;
- the host navigation commands in ``triggers.wrapped_commands``, wrapped
  so the resize runs after the original returns.

``enable()`` creates all subscriptions and ``disable()`` disposes all of
them. The mode object owns the handles; there is no global state.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, ParamSpec, TypeVar

from goldenratio.config.models import GoldenRatioConfig
from goldenratio.domain.commands import CommandId, matches_trigger
from goldenratio.plugins.event_bus import EventBus
from goldenratio.services.orchestrator import ResizeOrchestrator

if TYPE_CHECKING:
    from goldenratio.infrastructure.host import LayoutHost, Unsubscribe
    from goldenratio.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

_P = ParamSpec("_P")
_R = TypeVar("_R")


def run_after(action: Callable[[], object]) -> Callable[[Callable[_P, _R]], Callable[_P, _R]]:
    """Decorator factory: call *action* after the wrapped callable returns.

    The wrapped callable's return value is passed through untouched. If it
    raises, *action* does not run.
    """

    def decorator(func: Callable[_P, _R]) -> Callable[_P, _R]:
        @functools.wraps(func)
        def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
            result = func(*args, **kwargs)
            action()
            return result

        return wrapper

    return decorator


class GoldenRatioMode:
    """Golden-ratio resizing for one host, switched on and off as a unit.

    Parameters:
        host: The layout service to observe and resize.
        config: Initial configuration (defaults to code defaults).
        plugin_manager: Optional plugins notified of resize events.

    Usage::

        mode = GoldenRatioMode(host, load_config())
        mode.enable()
        ...
        mode.disable()
    """

    def __init__(
        self,
        host: LayoutHost,
        config: GoldenRatioConfig | None = None,
        *,
        plugin_manager: PluginManager | None = None,
    ) -> None:
        self._host = host
        self._event_bus = EventBus(plugin_manager) if plugin_manager is not None else None
        self.orchestrator = ResizeOrchestrator(
            host,
            config or GoldenRatioConfig(),
            event_bus=self._event_bus,
        )
        self._handles: list[Unsubscribe] = []

    @property
    def enabled(self) -> bool:
        return bool(self._handles)

    @property
    def config(self) -> GoldenRatioConfig:
        return self.orchestrator.config

    def configure(self, config: GoldenRatioConfig) -> None:
        """Replace the configuration; takes effect from the next resize.

        Changes to ``triggers.wrapped_commands`` apply on the next enable.
        """
        self.orchestrator.config = config

    def golden_ratio(self) -> None:
        """Resize the active region now. Works whether or not the mode is enabled."""
        self.orchestrator.run()

    def enable(self) -> None:
        """Register all trigger paths. No-op if already enabled."""
        if self.enabled:
            return
        host = self._host
        handles: list[Unsubscribe] = []
        try:
            handles.append(host.on_layout_change(self.golden_ratio))
            handles.append(host.on_post_command(self._on_post_command))
            for name in self.config.triggers.wrapped_commands:
                handles.append(host.wrap_command(name, run_after(self.golden_ratio)))
        except Exception:
            for handle in reversed(handles):
                handle()
            raise
        self._handles = handles
        logger.debug("Golden ratio mode enabled with %d triggers", len(handles))
        self._dispatch("post_enable")

    def disable(self) -> None:
        """Remove every trigger path registered by :meth:`enable`."""
        if not self.enabled:
            return
        handles, self._handles = self._handles, []
        for handle in reversed(handles):
            handle()
        logger.debug("Golden ratio mode disabled")
        self._dispatch("post_disable")

    def toggle(self) -> bool:
        """Flip the mode; return whether it is now enabled."""
        if self.enabled:
            self.disable()
        else:
            self.enable()
        return self.enabled

    def toggle_widescreen(self) -> None:
        """Switch ``adjust_factor`` between 1.0 and ``wide_adjust_factor``, then resize."""
        resize = self.config.resize
        factor = resize.wide_adjust_factor if resize.adjust_factor == 1.0 else 1.0
        self.configure(self.config.with_resize(adjust_factor=factor))
        self.golden_ratio()

    def __enter__(self) -> GoldenRatioMode:
        self.enable()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.disable()

    def _on_post_command(self, command: CommandId | None) -> None:
        if matches_trigger(command, self.config.triggers.extra_commands):
            self.golden_ratio()

    def _dispatch(self, hook_name: str) -> None:
        if self._event_bus is not None:
            self._event_bus.dispatch(hook_name, {})
