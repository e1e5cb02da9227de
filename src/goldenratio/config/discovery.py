"""Locate and read ``goldenratio.toml``.

An explicit ``GOLDENRATIO_CONFIG`` path wins. Otherwise the nearest
``goldenratio.toml`` in the working directory or one of its parents is
used, so a project can carry its own exclusions and triggers.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from goldenratio.config.models import GoldenRatioConfig

CONFIG_FILENAME = "goldenratio.toml"
CONFIG_ENV_VAR = "GOLDENRATIO_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    A ``GOLDENRATIO_CONFIG`` value that does not name a file disables the
    directory search.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> GoldenRatioConfig:
    """Build a validated :class:`GoldenRatioConfig` for an embedder.

    Sections missing from the file keep their defaults; no file at all
    means the defaults. Invalid values raise ``pydantic.ValidationError``.
    """
    path = path or find_config(cwd)
    if path is None:
        return GoldenRatioConfig()
    with path.open("rb") as fh:
        return GoldenRatioConfig.model_validate(tomllib.load(fh))
