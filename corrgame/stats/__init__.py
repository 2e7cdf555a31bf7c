"""Statistics core: correlated sample generation and correlation measures."""

from .correlation import CorrelationEngine
from .sampling import SampleGenerator

__all__ = [
    "CorrelationEngine",
    "SampleGenerator",
]
