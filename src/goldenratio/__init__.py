"""goldenratio: keep the focused window at golden-ratio proportions."""

from goldenratio.config.models import GoldenRatioConfig
from goldenratio.domain.geometry import GOLDEN_RATIO, TargetDimensions, compute_target_dimensions
from goldenratio.services.lifecycle import GoldenRatioMode
from goldenratio.services.orchestrator import ResizeOrchestrator

__version__ = "0.1.0"

__all__ = [
    "GOLDEN_RATIO",
    "GoldenRatioConfig",
    "GoldenRatioMode",
    "ResizeOrchestrator",
    "TargetDimensions",
    "__version__",
    "compute_target_dimensions",
]
