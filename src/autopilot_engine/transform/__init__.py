"""Text transformation pipeline: sequence injection and formatting."""

from autopilot_engine.transform.injector import TransformResult, inject_autopilot
from autopilot_engine.transform.normalizer import Normalizer

__all__ = [
    "TransformResult",
    "inject_autopilot",
    "Normalizer",
]
