"""Pydantic contracts for Line Filter.

Everything the router and the aggregator exchange is typed through these
contracts.
"""

from .filter_contracts import (
    Category,
    FilterJob,
    RoutingResult,
)

from .statistics_contracts import (
    CategoryStatistics,
    StatisticsReport,
)

__all__ = [
    # Filter
    "Category",
    "FilterJob",
    "RoutingResult",
    # Statistics
    "CategoryStatistics",
    "StatisticsReport",
]
