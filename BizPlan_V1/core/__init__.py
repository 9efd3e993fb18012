"""
Core package for BizPlan.

The projection engine: pure functions from a validated business plan
to a freshly computed set of results.  `calculate_operating_results`
is the entry point; the other modules hold the building blocks it
composes.
"""

from .cache import ResultsCache
from .investment import calculate_investment, compute_financing_plan
from .operating import calculate_operating_results

__all__ = [
    "ResultsCache",
    "calculate_investment",
    "calculate_operating_results",
    "compute_financing_plan",
]
