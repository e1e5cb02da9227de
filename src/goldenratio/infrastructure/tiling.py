"""In-memory tiling host.

A split tree standing in for a real editor frame. Leaves are windows;
internal nodes divide their area either side by side (``Axis.HORIZONTAL``,
children share the height and divide the width) or stacked
(``Axis.VERTICAL``). Every operation keeps the children of a split summing
exactly to the split's size, so the display area never changes.

Resizing borrows space from the siblings in the nearest split along the
requested axis, nearest sibling first, and never takes a window below
``window_min_height`` / ``window_min_width``. Windows marked ``fixed`` neither
grow nor shrink.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from goldenratio.domain.commands import CommandId, command_elements
from goldenratio.domain.types import Axis
from goldenratio.infrastructure.host import CommandFn, CommandWrapper, Region, Unsubscribe

logger = logging.getLogger(__name__)

DEFAULT_MODE = "fundamental-mode"

Edges = tuple[int, int, int, int]


class LayoutError(ValueError):
    """A layout operation the tree cannot satisfy."""


@dataclass(eq=False)
class Window:
    """A leaf of the split tree, displaying one buffer."""

    name: str
    buffer: str
    width: int
    height: int
    fixed: bool = False
    hscroll: int = 0
    recenter_count: int = 0
    parent: Split | None = field(default=None, repr=False)

    def _ancestor_axes(self) -> list[Axis]:
        axes: list[Axis] = []
        node = self.parent
        while node is not None:
            axes.append(node.axis)
            node = node.parent
        return axes

    @property
    def is_full_width(self) -> bool:
        return Axis.HORIZONTAL not in self._ancestor_axes()

    @property
    def is_full_height(self) -> bool:
        return Axis.VERTICAL not in self._ancestor_axes()


@dataclass(eq=False)
class Split:
    """An internal node dividing its area among children along ``axis``."""

    axis: Axis
    width: int
    height: int
    children: list[Node] = field(default_factory=list)
    parent: Split | None = field(default=None, repr=False)


Node = Window | Split


def _size(node: Node, axis: Axis) -> int:
    return node.width if axis is Axis.HORIZONTAL else node.height


def _set_size_attr(node: Node, axis: Axis, value: int) -> None:
    if axis is Axis.HORIZONTAL:
        node.width = value
    else:
        node.height = value


class TilingHost:
    """Reference :class:`~goldenratio.infrastructure.host.LayoutHost`.

    Parameters:
        height: Display rows.
        width: Display columns.
        buffer: Buffer shown in the initial window.
        mode: Major mode of that buffer.
        window_min_height: Rows no resize may take a window below.
        window_min_width: Columns no resize may take a window below.
        select_notifies: Whether plain focus moves fire layout-change
            callbacks. Off by default, so focus commands rely on the
            post-command and wrapped-command trigger paths.
    """

    def __init__(
        self,
        height: int = 48,
        width: int = 160,
        *,
        buffer: str = "*scratch*",
        mode: str = DEFAULT_MODE,
        window_min_height: int = 4,
        window_min_width: int = 10,
        select_notifies: bool = False,
    ) -> None:
        self.window_min_height = window_min_height
        self.window_min_width = window_min_width
        self.select_notifies = select_notifies
        self._names = itertools.count(1)
        self._buffer_modes: dict[str, str] = {buffer: mode}
        self._root: Node = self._new_window(buffer, width, height)
        self._selected: Window = self._root
        self._minibuffer_focused = False
        self._layout_callbacks: list[Callable[[], None]] = []
        self._command_callbacks: list[Callable[[CommandId | None], None]] = []
        self._base_commands: dict[str, CommandFn] = {
            "other-window": self._other_window,
            "pop-to-buffer": self._pop_to_buffer,
            "windmove-left": lambda: self._windmove("left"),
            "windmove-right": lambda: self._windmove("right"),
            "windmove-up": lambda: self._windmove("up"),
            "windmove-down": lambda: self._windmove("down"),
            "split-window-right": lambda: self.split_right(),
            "split-window-below": lambda: self.split_below(),
            "delete-window": lambda: self.delete_window(),
        }
        self._wrappers: dict[str, list[CommandWrapper]] = {}
        self._commands: dict[str, CommandFn] = dict(self._base_commands)

    # ------------------------------------------------------------------
    # LayoutHost protocol
    # ------------------------------------------------------------------

    def list_regions(self) -> list[Window]:
        return list(self._leaves(self._root))

    def active_region(self) -> Window:
        return self._selected

    def is_minibuffer_focused(self) -> bool:
        return self._minibuffer_focused

    def display_dimensions(self) -> tuple[int, int]:
        return self._root.height, self._root.width

    def is_resizable(self, region: Region, axis: Axis, delta: int) -> bool:
        if delta == 0:
            return True
        node, parent = self._resize_target(self._window(region), axis)
        if parent is None:
            return False
        siblings = self._siblings_nearest_first(parent, node)
        if delta > 0:
            if not self._can_grow(node, axis):
                return False
            slack = sum(max(0, _size(s, axis) - self._min_size(s, axis)) for s in siblings)
            return slack >= delta
        if _size(node, axis) + delta < self._min_size(node, axis):
            return False
        return any(self._can_grow(s, axis) for s in siblings)

    def resize(self, region: Region, axis: Axis, delta: int) -> None:
        if delta == 0:
            return
        if not self.is_resizable(region, axis, delta):
            msg = f"Cannot resize {region.name} by {delta} ({axis})"
            raise LayoutError(msg)
        node, parent = self._resize_target(self._window(region), axis)
        assert parent is not None
        siblings = self._siblings_nearest_first(parent, node)
        if delta > 0:
            remaining = delta
            for sibling in siblings:
                give = min(remaining, _size(sibling, axis) - self._min_size(sibling, axis))
                if give > 0:
                    self._apply_size(sibling, axis, _size(sibling, axis) - give)
                    remaining -= give
                if remaining == 0:
                    break
        else:
            receiver = next(s for s in siblings if self._can_grow(s, axis))
            self._apply_size(receiver, axis, _size(receiver, axis) - delta)
        self._apply_size(node, axis, _size(node, axis) + delta)
        logger.debug("Resized %s by %d (%s)", region.name, delta, axis)
        self._notify_layout_change()

    def content_type_of(self, region: Region) -> str:
        return self._buffer_modes.get(self._window(region).buffer, DEFAULT_MODE)

    def content_identifier_of(self, region: Region) -> str:
        return self._window(region).buffer

    def reset_hscroll(self, region: Region) -> None:
        self._window(region).hscroll = 0

    def recenter(self, region: Region) -> None:
        self._window(region).recenter_count += 1

    def on_layout_change(self, callback: Callable[[], None]) -> Unsubscribe:
        self._layout_callbacks.append(callback)
        return self._remover(self._layout_callbacks, callback)

    def on_post_command(self, callback: Callable[[CommandId | None], None]) -> Unsubscribe:
        self._command_callbacks.append(callback)
        return self._remover(self._command_callbacks, callback)

    def wrap_command(self, name: str, wrapper: CommandWrapper) -> Unsubscribe:
        if name not in self._base_commands:
            msg = f"Unknown command: {name}"
            raise LayoutError(msg)
        self._wrappers.setdefault(name, []).append(wrapper)
        self._compose(name)

        def unwrap() -> None:
            stack = self._wrappers.get(name, [])
            if wrapper in stack:
                stack.remove(wrapper)
                self._compose(name)

        return unwrap

    # ------------------------------------------------------------------
    # Editor operations
    # ------------------------------------------------------------------

    @property
    def selected(self) -> Window:
        return self._selected

    def window(self, name: str) -> Window:
        for leaf in self._leaves(self._root):
            if leaf.name == name:
                return leaf
        msg = f"No window named {name}"
        raise LayoutError(msg)

    def edges(self) -> dict[Window, Edges]:
        """``(left, top, right, bottom)`` of every window, in display cells."""
        result: dict[Window, Edges] = {}

        def walk(node: Node, left: int, top: int) -> None:
            if isinstance(node, Window):
                result[node] = (left, top, left + node.width, top + node.height)
                return
            for child in node.children:
                walk(child, left, top)
                if node.axis is Axis.HORIZONTAL:
                    left += child.width
                else:
                    top += child.height

        walk(self._root, 0, 0)
        return result

    def split_right(self, window: Window | None = None, buffer: str | None = None) -> Window:
        """Split *window* (default: selected) side by side; return the new window."""
        return self._split(window or self._selected, Axis.HORIZONTAL, buffer)

    def split_below(self, window: Window | None = None, buffer: str | None = None) -> Window:
        """Split *window* (default: selected) into a stack; return the new window."""
        return self._split(window or self._selected, Axis.VERTICAL, buffer)

    def delete_window(self, window: Window | None = None) -> None:
        target = window or self._selected
        parent = target.parent
        if parent is None:
            msg = "Attempt to delete the sole window"
            raise LayoutError(msg)
        index = parent.children.index(target)
        parent.children.remove(target)
        heir = parent.children[index - 1] if index > 0 else parent.children[0]
        self._apply_size(heir, parent.axis, _size(heir, parent.axis) + _size(target, parent.axis))
        if len(parent.children) == 1:
            self._collapse(parent)
        if target is self._selected:
            self._selected = next(iter(self._leaves(heir)))
        self._notify_layout_change()

    def select(self, window: Window) -> Window:
        self._selected = window
        self._minibuffer_focused = False
        if self.select_notifies:
            self._notify_layout_change()
        return window

    def switch_to_buffer(self, buffer: str, mode: str | None = None) -> Window:
        """Show *buffer* in the selected window."""
        self._register_buffer(buffer, mode)
        self._selected.buffer = buffer
        self._notify_layout_change()
        return self._selected

    def focus_minibuffer(self) -> None:
        self._minibuffer_focused = True

    def exit_minibuffer(self) -> None:
        self._minibuffer_focused = False

    def call(self, name: str, *args: Any) -> Any:
        """Invoke command *name* from code, without the command loop."""
        return self._commands[name](*args)

    def other_window(self, count: int = 1) -> Window:
        return self.call("other-window", count)

    def pop_to_buffer(self, buffer: str, mode: str | None = None) -> Window:
        return self.call("pop-to-buffer", buffer, mode)

    def run_command(self, command: CommandId, *args: Any) -> Any:
        """Execute *command* as the command loop would, then run post-command callbacks.

        Composite commands run every element that names a known command;
        the remaining elements are treated as arguments and ignored.
        """
        result: Any = None
        if isinstance(command, str):
            result = self.call(command, *args)
        else:
            for element in command_elements(command):
                if element in self._commands:
                    result = self.call(element)
        for callback in list(self._command_callbacks):
            callback(command)
        return result

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def _other_window(self, count: int = 1) -> Window:
        leaves = self.list_regions()
        index = leaves.index(self._selected)
        return self.select(leaves[(index + count) % len(leaves)])

    def _pop_to_buffer(self, buffer: str, mode: str | None = None) -> Window:
        self._register_buffer(buffer, mode)
        for leaf in self._leaves(self._root):
            if leaf.buffer == buffer:
                return self.select(leaf)
        leaves = self.list_regions()
        if len(leaves) == 1:
            target = self.split_below(buffer=buffer)
        else:
            target = next(leaf for leaf in leaves if leaf is not self._selected)
            target.buffer = buffer
            self._notify_layout_change()
        return self.select(target)

    def _windmove(self, direction: str) -> Window | None:
        edges = self.edges()
        left, top, right, bottom = edges[self._selected]
        candidates: list[Window] = []
        for leaf, (c_left, c_top, c_right, c_bottom) in edges.items():
            if direction == "right" and c_left == right and c_top < bottom and c_bottom > top:
                candidates.append(leaf)
            elif direction == "left" and c_right == left and c_top < bottom and c_bottom > top:
                candidates.append(leaf)
            elif direction == "up" and c_bottom == top and c_left < right and c_right > left:
                candidates.append(leaf)
            elif direction == "down" and c_top == bottom and c_left < right and c_right > left:
                candidates.append(leaf)
        if not candidates:
            return None
        if direction in ("left", "right"):
            best = min(candidates, key=lambda w: abs(edges[w][1] - top))
        else:
            best = min(candidates, key=lambda w: abs(edges[w][0] - left))
        return self.select(best)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _new_window(self, buffer: str, width: int, height: int) -> Window:
        return Window(name=f"win-{next(self._names)}", buffer=buffer, width=width, height=height)

    def _register_buffer(self, buffer: str, mode: str | None) -> None:
        if mode is not None:
            self._buffer_modes[buffer] = mode
        else:
            self._buffer_modes.setdefault(buffer, DEFAULT_MODE)

    def _window(self, region: Region) -> Window:
        if isinstance(region, Window):
            return region
        return self.window(region.name)

    @staticmethod
    def _leaves(node: Node) -> Sequence[Window]:
        if isinstance(node, Window):
            return [node]
        leaves: list[Window] = []
        for child in node.children:
            leaves.extend(TilingHost._leaves(child))
        return leaves

    def _split(self, window: Window, axis: Axis, buffer: str | None) -> Window:
        size = _size(window, axis)
        new_size = size // 2
        minimum = self.window_min_width if axis is Axis.HORIZONTAL else self.window_min_height
        if window.fixed or new_size < minimum or size - new_size < minimum:
            msg = f"Window {window.name} too small for splitting"
            raise LayoutError(msg)
        new = self._new_window(buffer or window.buffer, window.width, window.height)
        if buffer is not None:
            self._register_buffer(buffer, None)
        _set_size_attr(window, axis, size - new_size)
        _set_size_attr(new, axis, new_size)

        parent = window.parent
        if parent is not None and parent.axis is axis:
            parent.children.insert(parent.children.index(window) + 1, new)
            new.parent = parent
        else:
            split = Split(axis=axis, width=window.width, height=window.height, parent=parent)
            _set_size_attr(split, axis, size)
            if parent is None:
                self._root = split
            else:
                parent.children[parent.children.index(window)] = split
            split.children = [window, new]
            window.parent = split
            new.parent = split
        self._notify_layout_change()
        return new

    def _collapse(self, split: Split) -> None:
        (only,) = split.children
        grandparent = split.parent
        if grandparent is None:
            only.parent = None
            self._root = only
            return
        index = grandparent.children.index(split)
        if isinstance(only, Split) and only.axis is grandparent.axis:
            grandparent.children[index : index + 1] = only.children
            for child in only.children:
                child.parent = grandparent
        else:
            grandparent.children[index] = only
            only.parent = grandparent

    @staticmethod
    def _resize_target(window: Window, axis: Axis) -> tuple[Node, Split | None]:
        node: Node = window
        while node.parent is not None and node.parent.axis is not axis:
            node = node.parent
        return node, node.parent

    @staticmethod
    def _siblings_nearest_first(parent: Split, node: Node) -> list[Node]:
        index = parent.children.index(node)
        return [*parent.children[index + 1 :], *reversed(parent.children[:index])]

    def _min_size(self, node: Node, axis: Axis) -> int:
        if isinstance(node, Window):
            if node.fixed:
                return _size(node, axis)
            return self.window_min_width if axis is Axis.HORIZONTAL else self.window_min_height
        mins = [self._min_size(child, axis) for child in node.children]
        return sum(mins) if node.axis is axis else max(mins)

    def _can_grow(self, node: Node, axis: Axis) -> bool:
        if isinstance(node, Window):
            return not node.fixed
        growable = [self._can_grow(child, axis) for child in node.children]
        return any(growable) if node.axis is axis else all(growable)

    def _apply_size(self, node: Node, axis: Axis, new: int) -> None:
        delta = new - _size(node, axis)
        _set_size_attr(node, axis, new)
        if isinstance(node, Window):
            return
        if node.axis is not axis:
            for child in node.children:
                self._apply_size(child, axis, new)
            return
        if delta > 0:
            for child in reversed(node.children):
                if self._can_grow(child, axis):
                    self._apply_size(child, axis, _size(child, axis) + delta)
                    return
        elif delta < 0:
            remaining = -delta
            for child in reversed(node.children):
                give = min(remaining, _size(child, axis) - self._min_size(child, axis))
                if give > 0:
                    self._apply_size(child, axis, _size(child, axis) - give)
                    remaining -= give
                if remaining == 0:
                    return

    def _compose(self, name: str) -> None:
        fn = self._base_commands[name]
        for wrapper in self._wrappers.get(name, []):
            fn = wrapper(fn)
        self._commands[name] = fn

    def _notify_layout_change(self) -> None:
        for callback in list(self._layout_callbacks):
            callback()

    @staticmethod
    def _remover(callbacks: list[Any], callback: Any) -> Unsubscribe:
        def remove() -> None:
            if callback in callbacks:
                callbacks.remove(callback)

        return remove
