"""Matching executed commands against the extra trigger set.

A command is either a plain identifier or a composite: a tuple of elements,
as produced by prefixed commands, keyboard macros and anonymous command
forms. Composites match when any of their elements matches, at any depth.
"""

from __future__ import annotations

from collections.abc import Iterable

CommandId = str | tuple["CommandId", ...]


def command_elements(command: CommandId) -> Iterable[str]:
    """Yield every plain identifier contained in *command*.

    Examples:
        >>> list(command_elements("windmove-left"))
        ['windmove-left']
        >>> list(command_elements(("repeat", ("windmove-up", "arg"))))
        ['repeat', 'windmove-up', 'arg']
    """
    if isinstance(command, str):
        yield command
        return
    for element in command:
        yield from command_elements(element)


def matches_trigger(command: CommandId | None, triggers: Iterable[str]) -> bool:
    """Whether *command*, or any sub-element of it, is a trigger command."""
    if command is None:
        return False
    wanted = set(triggers)
    if not wanted:
        return False
    return any(element in wanted for element in command_elements(command))
