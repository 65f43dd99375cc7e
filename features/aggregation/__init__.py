"""
Aggregation feature — collects per-package results into the cross-package
build state (features, modules, icon metadata, failures).

Public API:
    from features.aggregation import Aggregator, AggregateResult
"""

from features.aggregation.aggregator import Aggregator
from features.aggregation.models import AggregateResult

__all__ = ["AggregateResult", "Aggregator"]
