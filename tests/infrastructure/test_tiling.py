"""Tests for the in-memory TilingHost."""

from __future__ import annotations

import pytest

from goldenratio.domain.types import Axis
from goldenratio.infrastructure.host import Region
from goldenratio.infrastructure.tiling import LayoutError, TilingHost


class TestSplitting:
    def test_initial_window(self, host: TilingHost) -> None:
        (only,) = host.list_regions()
        assert only.name == "win-1"
        assert (only.height, only.width) == (48, 160)
        assert only.is_full_width and only.is_full_height
        assert host.display_dimensions() == (48, 160)
        assert isinstance(only, Region)

    def test_split_right(self, side_by_side: TilingHost) -> None:
        left, right = side_by_side.list_regions()
        assert (left.width, right.width) == (80, 80)
        assert (left.height, right.height) == (48, 48)
        assert not left.is_full_width and left.is_full_height
        assert right.buffer == left.buffer
        assert side_by_side.selected is left

    def test_split_below(self, stacked: TilingHost) -> None:
        top, bottom = stacked.list_regions()
        assert (top.height, bottom.height) == (24, 24)
        assert top.is_full_width and not top.is_full_height

    def test_odd_size_split(self) -> None:
        host = TilingHost(48, 161)
        host.split_right()
        assert [w.width for w in host.list_regions()] == [81, 80]

    def test_repeated_split_same_direction_stays_flat(self, side_by_side: TilingHost) -> None:
        side_by_side.split_right()
        assert [w.name for w in side_by_side.list_regions()] == ["win-1", "win-3", "win-2"]
        assert [w.width for w in side_by_side.list_regions()] == [40, 40, 80]
        assert all(w.is_full_height for w in side_by_side.list_regions())

    def test_split_too_small(self) -> None:
        host = TilingHost(48, 18)
        with pytest.raises(LayoutError, match="too small"):
            host.split_right()

    def test_edges(self, side_by_side: TilingHost) -> None:
        side_by_side.split_below()
        edges = {w.name: e for w, e in side_by_side.edges().items()}
        assert edges == {
            "win-1": (0, 0, 80, 24),
            "win-3": (0, 24, 80, 48),
            "win-2": (80, 0, 160, 48),
        }


class TestDeleteWindow:
    def test_space_returns_to_sibling(self, side_by_side: TilingHost) -> None:
        side_by_side.delete_window(side_by_side.window("win-2"))
        (only,) = side_by_side.list_regions()
        assert (only.width, only.height) == (160, 48)
        assert only.is_full_width

    def test_deleting_selected_moves_focus(self, side_by_side: TilingHost) -> None:
        side_by_side.delete_window()
        assert side_by_side.selected.name == "win-2"

    def test_nested_collapse_merges_same_direction(self, side_by_side: TilingHost) -> None:
        right = side_by_side.select(side_by_side.window("win-2"))
        side_by_side.split_below()
        side_by_side.select(side_by_side.window("win-3"))
        side_by_side.split_right()
        side_by_side.delete_window(right)
        assert [w.name for w in side_by_side.list_regions()] == ["win-1", "win-3", "win-4"]
        assert all(w.is_full_height for w in side_by_side.list_regions())
        assert sum(w.width for w in side_by_side.list_regions()) == 160

    def test_sole_window(self, host: TilingHost) -> None:
        with pytest.raises(LayoutError):
            host.delete_window()


class TestResizing:
    def test_resize_takes_from_sibling(self, side_by_side: TilingHost) -> None:
        left, right = side_by_side.list_regions()
        side_by_side.resize(left, Axis.HORIZONTAL, 10)
        assert (left.width, right.width) == (90, 70)

    def test_negative_delta_shrinks(self, side_by_side: TilingHost) -> None:
        left, right = side_by_side.list_regions()
        side_by_side.resize(left, Axis.HORIZONTAL, -30)
        assert (left.width, right.width) == (50, 110)

    def test_min_width_respected(self, side_by_side: TilingHost) -> None:
        left = side_by_side.selected
        assert side_by_side.is_resizable(left, Axis.HORIZONTAL, 70)
        assert not side_by_side.is_resizable(left, Axis.HORIZONTAL, 71)
        assert not side_by_side.is_resizable(left, Axis.HORIZONTAL, -71)

    def test_full_span_axis_not_resizable(self, side_by_side: TilingHost) -> None:
        left = side_by_side.selected
        assert not side_by_side.is_resizable(left, Axis.VERTICAL, 1)
        assert not side_by_side.is_resizable(left, Axis.VERTICAL, -1)
        assert side_by_side.is_resizable(left, Axis.VERTICAL, 0)

    def test_infeasible_resize_raises(self, side_by_side: TilingHost) -> None:
        with pytest.raises(LayoutError):
            side_by_side.resize(side_by_side.selected, Axis.VERTICAL, 5)

    def test_fixed_window_blocks_sibling_growth(self, side_by_side: TilingHost) -> None:
        left, right = side_by_side.list_regions()
        right.fixed = True
        assert not side_by_side.is_resizable(left, Axis.HORIZONTAL, 1)
        assert not side_by_side.is_resizable(left, Axis.HORIZONTAL, -1)
        assert not side_by_side.is_resizable(right, Axis.HORIZONTAL, 1)

    def test_growth_draws_nearest_sibling_first(self, side_by_side: TilingHost) -> None:
        side_by_side.split_right()
        first, middle, last = side_by_side.list_regions()
        side_by_side.resize(first, Axis.HORIZONTAL, 40)
        assert [w.width for w in (first, middle, last)] == [80, 10, 70]

    def test_resizing_stack_resizes_its_members(self, side_by_side: TilingHost) -> None:
        right = side_by_side.select(side_by_side.window("win-2"))
        side_by_side.split_below()
        bottom = side_by_side.window("win-3")
        side_by_side.resize(right, Axis.HORIZONTAL, 20)
        assert (right.width, bottom.width) == (100, 100)
        assert side_by_side.window("win-1").width == 60

    def test_resize_notifies_layout_change(self, side_by_side: TilingHost) -> None:
        calls: list[str] = []
        side_by_side.on_layout_change(lambda: calls.append("changed"))
        side_by_side.resize(side_by_side.selected, Axis.HORIZONTAL, 5)
        assert calls == ["changed"]


class TestContent:
    def test_modes_follow_buffers(self, side_by_side: TilingHost) -> None:
        side_by_side.switch_to_buffer("main.py", "python-mode")
        left, right = side_by_side.list_regions()
        assert side_by_side.content_type_of(left) == "python-mode"
        assert side_by_side.content_identifier_of(left) == "main.py"
        assert side_by_side.content_type_of(right) == "fundamental-mode"

    def test_minibuffer_focus(self, host: TilingHost) -> None:
        host.focus_minibuffer()
        assert host.is_minibuffer_focused()
        host.exit_minibuffer()
        assert not host.is_minibuffer_focused()


class TestCommands:
    def test_other_window_cycles(self, side_by_side: TilingHost) -> None:
        assert side_by_side.other_window().name == "win-2"
        assert side_by_side.other_window().name == "win-1"

    def test_windmove(self, side_by_side: TilingHost) -> None:
        side_by_side.split_below()
        assert side_by_side.run_command("windmove-down").name == "win-3"
        assert side_by_side.run_command("windmove-right").name == "win-2"
        assert side_by_side.run_command("windmove-left").name == "win-1"
        assert side_by_side.run_command("windmove-up") is None

    def test_pop_to_buffer_splits_single_window(self, host: TilingHost) -> None:
        shown = host.pop_to_buffer("*Messages*")
        assert shown.name == "win-2"
        assert host.selected is shown
        assert [w.height for w in host.list_regions()] == [24, 24]

    def test_pop_to_buffer_reuses_visible_window(self, side_by_side: TilingHost) -> None:
        side_by_side.window("win-2").buffer = "log"
        assert side_by_side.pop_to_buffer("log").name == "win-2"

    def test_post_command_receives_command(self, side_by_side: TilingHost) -> None:
        seen: list[object] = []
        unsubscribe = side_by_side.on_post_command(seen.append)
        side_by_side.run_command("other-window")
        side_by_side.run_command(("repeat", "other-window"))
        unsubscribe()
        side_by_side.run_command("other-window")
        assert seen == ["other-window", ("repeat", "other-window")]

    def test_wrap_and_unwrap(self, side_by_side: TilingHost) -> None:
        calls: list[str] = []

        def tag(label: str):
            def wrapper(fn):
                def wrapped(*args, **kwargs):
                    calls.append(label)
                    return fn(*args, **kwargs)

                return wrapped

            return wrapper

        unwrap_a = side_by_side.wrap_command("other-window", tag("a"))
        unwrap_b = side_by_side.wrap_command("other-window", tag("b"))
        side_by_side.other_window()
        unwrap_a()
        side_by_side.other_window()
        unwrap_b()
        unwrap_b()
        side_by_side.other_window()
        assert calls == ["b", "a", "b"]

    def test_wrap_unknown_command(self, host: TilingHost) -> None:
        with pytest.raises(LayoutError, match="Unknown command"):
            host.wrap_command("no-such-command", lambda fn: fn)

    def test_unsubscribe_is_idempotent(self, host: TilingHost) -> None:
        calls: list[int] = []
        unsubscribe = host.on_layout_change(lambda: calls.append(1))
        unsubscribe()
        unsubscribe()
        host.split_right()
        assert calls == []
