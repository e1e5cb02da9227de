"""Tests for synchronous EventBus dispatch."""

from __future__ import annotations

import pluggy

from goldenratio.plugins.event_bus import EventBus
from goldenratio.plugins.manager import PluginManager

hookimpl = pluggy.HookimplMarker("goldenratio")


class _Recorder:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    @hookimpl
    def resize_suppressed(self, region: str, reason: str) -> None:
        self.calls.append((region, reason))


class _Failing:
    @hookimpl
    def resize_suppressed(self, region: str, reason: str) -> None:
        raise RuntimeError("boom")


class TestEventBus:
    def test_dispatch_calls_hook(self) -> None:
        pm = PluginManager()
        recorder = _Recorder()
        pm.register_plugin(recorder)
        bus = EventBus(pm)
        assert bus.dispatch("resize_suppressed", {"region": "win-1", "reason": "minibuffer"})
        assert recorder.calls == [("win-1", "minibuffer")]

    def test_unknown_hook_is_noop(self) -> None:
        bus = EventBus(PluginManager())
        assert bus.dispatch("no_such_hook", {})
        assert bus.failures == []

    def test_failure_recorded_not_raised(self) -> None:
        pm = PluginManager()
        pm.register_plugin(_Failing())
        bus = EventBus(pm)
        assert not bus.dispatch("resize_suppressed", {"region": "win-1", "reason": "inhibited"})
        assert bus.failures == [("resize_suppressed", "boom")]
