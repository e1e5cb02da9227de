"""Shared pytest fixtures for goldenratio tests."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import pytest
from click.testing import CliRunner

from goldenratio.config.models import GoldenRatioConfig
from goldenratio.domain.types import Axis
from goldenratio.infrastructure.tiling import TilingHost


@dataclass(eq=False)
class StubRegion:
    """Plain geometry record satisfying the Region protocol."""

    name: str
    width: int
    height: int
    is_full_width: bool = False
    is_full_height: bool = False
    mode: str = "fundamental-mode"
    buffer: str = "*scratch*"


@dataclass
class StubHost:
    """Scriptable host: fixed geometry, per-axis feasibility, recorded calls."""

    regions: list[StubRegion]
    display: tuple[int, int] = (48, 160)
    minibuffer: bool = False
    resizable: dict[Axis, bool] = field(
        default_factory=lambda: {Axis.VERTICAL: True, Axis.HORIZONTAL: True}
    )
    resizes: list[tuple[str, Axis, int]] = field(default_factory=list)
    cosmetics: list[tuple[str, str]] = field(default_factory=list)
    active_index: int = 0

    def list_regions(self) -> list[StubRegion]:
        return list(self.regions)

    def active_region(self) -> StubRegion:
        return self.regions[self.active_index]

    def is_minibuffer_focused(self) -> bool:
        return self.minibuffer

    def display_dimensions(self) -> tuple[int, int]:
        return self.display

    def is_resizable(self, region: StubRegion, axis: Axis, delta: int) -> bool:
        return self.resizable[axis]

    def resize(self, region: StubRegion, axis: Axis, delta: int) -> None:
        self.resizes.append((region.name, axis, delta))

    def content_type_of(self, region: StubRegion) -> str:
        return region.mode

    def content_identifier_of(self, region: StubRegion) -> str:
        return region.buffer

    def reset_hscroll(self, region: StubRegion) -> None:
        self.cosmetics.append(("hscroll", region.name))

    def recenter(self, region: StubRegion) -> None:
        self.cosmetics.append(("recenter", region.name))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty directory so no goldenratio.toml is discovered."""
    monkeypatch.delenv("GOLDENRATIO_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def config() -> GoldenRatioConfig:
    return GoldenRatioConfig()


@pytest.fixture
def stub_host() -> Callable[..., StubHost]:
    """Factory for a StubHost with two side-by-side regions by default."""

    def make(regions: list[StubRegion] | None = None, **kwargs: object) -> StubHost:
        if regions is None:
            regions = [
                StubRegion("left", 80, 48, is_full_height=True),
                StubRegion("right", 80, 48, is_full_height=True),
            ]
        return StubHost(regions=regions, **kwargs)  # type: ignore[arg-type]

    return make


@pytest.fixture
def host() -> TilingHost:
    """A 48x160 display with a single window."""
    return TilingHost(48, 160)


@pytest.fixture
def side_by_side(host: TilingHost) -> TilingHost:
    """Two 80-column windows next to each other; win-1 selected."""
    host.split_right()
    return host


@pytest.fixture
def stacked(host: TilingHost) -> TilingHost:
    """Two 24-row windows stacked; win-1 selected."""
    host.split_below()
    return host


@pytest.fixture
def make_region() -> type[StubRegion]:
    """The StubRegion class, for tests that build their own geometry."""
    return StubRegion
