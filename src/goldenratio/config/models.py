"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, goldenratio.toml only contains
overrides. Every model is frozen; the embedder changes configuration by
swapping in a new object between resize invocations, never by mutating
the one a running invocation holds.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TypeVar

from pydantic import BaseModel, Field, field_validator

DEFAULT_EXTRA_COMMANDS = frozenset({"windmove-left", "windmove-right", "windmove-up", "windmove-down"})
DEFAULT_WRAPPED_COMMANDS = ("other-window", "pop-to-buffer")

InhibitFunction = Callable[[], bool]

_Section = TypeVar("_Section", bound=BaseModel)


def _replace(section: _Section, changes: dict[str, object]) -> _Section:
    """Rebuild *section* with *changes* applied, running field validation."""
    return type(section).model_validate({**dict(section), **changes})


class ResizeConfig(BaseModel):
    """[resize] section."""

    model_config = {"frozen": True}

    adjust_factor: float = Field(default=1.0, gt=0)
    wide_adjust_factor: float = Field(default=0.8, gt=0)
    auto_scale: bool = False
    max_width: int | None = Field(default=None, gt=0)
    recenter: bool = True


class ExcludeConfig(BaseModel):
    """[exclude] section.

    ``inhibit_functions`` cannot come from TOML; embedders pass callables
    directly. Resizing is inhibited only when the list is non-empty and
    every function returns true.
    """

    model_config = {"frozen": True}

    modes: frozenset[str] = Field(default_factory=frozenset)
    buffer_names: frozenset[str] = Field(default_factory=frozenset)
    buffer_regexp: tuple[str, ...] = ()
    inhibit_functions: tuple[InhibitFunction, ...] = ()

    @field_validator("buffer_regexp")
    @classmethod
    def check_buffer_regexp(cls, patterns: tuple[str, ...]) -> tuple[str, ...]:
        for pattern in patterns:
            try:
                re.compile(pattern)
            except re.error as exc:
                msg = f"invalid buffer pattern {pattern!r}: {exc}"
                raise ValueError(msg) from exc
        return patterns


class TriggerConfig(BaseModel):
    """[triggers] section."""

    model_config = {"frozen": True}

    extra_commands: frozenset[str] = DEFAULT_EXTRA_COMMANDS
    wrapped_commands: tuple[str, ...] = DEFAULT_WRAPPED_COMMANDS


class GoldenRatioConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    resize: ResizeConfig = Field(default_factory=ResizeConfig)
    exclude: ExcludeConfig = Field(default_factory=ExcludeConfig)
    triggers: TriggerConfig = Field(default_factory=TriggerConfig)

    def scale_factor(self, display_width: int) -> float:
        """Width multiplier applied to the golden-ratio target.

        With ``auto_scale`` the factor shrinks as the display widens,
        reaching 1.0 at 100 columns; otherwise it is ``adjust_factor``.
        """
        if self.resize.auto_scale:
            return 1.0 - (display_width - 100) / 1000 * 1.8
        return self.resize.adjust_factor

    def with_resize(self, **changes: object) -> GoldenRatioConfig:
        """Copy with the given [resize] fields replaced."""
        return self.model_copy(update={"resize": _replace(self.resize, changes)})

    def with_exclude(self, **changes: object) -> GoldenRatioConfig:
        """Copy with the given [exclude] fields replaced."""
        return self.model_copy(update={"exclude": _replace(self.exclude, changes)})

    def with_triggers(self, **changes: object) -> GoldenRatioConfig:
        """Copy with the given [triggers] fields replaced."""
        return self.model_copy(update={"triggers": _replace(self.triggers, changes)})
