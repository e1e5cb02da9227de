"""Synchronous hook dispatch via pluggy.

Hosts deliver events on a single thread, so hooks run inline, in
registration order, before the dispatching call returns.

INVARIANT: Plugin failures are warnings, never errors.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from goldenratio.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class EventBus:
    """Dispatch named hooks through a :class:`PluginManager`.

    Failed dispatches are recorded in :attr:`failures` as
    ``(hook_name, error)`` pairs.
    """

    def __init__(self, plugin_manager: PluginManager) -> None:
        self._pm = plugin_manager
        self.failures: list[tuple[str, str]] = []

    def dispatch(self, hook_name: str, payload: dict[str, Any]) -> bool:
        """Call every implementation of *hook_name* with *payload*.

        Returns False if an implementation raised. Unknown hooks are a no-op.
        """
        hook_fn = getattr(self._pm.hook, hook_name, None)
        if hook_fn is None:
            return True
        try:
            hook_fn(**payload)
        except Exception as exc:
            logger.warning("Hook %s failed: %s", hook_name, exc, exc_info=True)
            self.failures.append((hook_name, str(exc)))
            return False
        return True
