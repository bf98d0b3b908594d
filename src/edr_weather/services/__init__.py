"""
Business logic services for the EDR weather client.

Services orchestrate API operations and provide higher-level functionality.
"""

from .fetcher import CoverageFetcher
from .fallback import FallbackSynthesizer, FallbackResult, ShapeHint, with_fallback
from .forecast import ForecastService

__all__ = [
    "CoverageFetcher",
    "FallbackSynthesizer",
    "FallbackResult",
    "ShapeHint",
    "with_fallback",
    "ForecastService",
]
