"""Aggregator module for statistics over category files."""

from .loader import load_category, parse_integer, parse_float
from .statistics_aggregator import (
    StatisticsAggregator,
    get_statistics,
    summarize_integers,
    summarize_floats,
    summarize_strings,
)

__all__ = [
    "load_category",
    "parse_integer",
    "parse_float",
    "StatisticsAggregator",
    "get_statistics",
    "summarize_integers",
    "summarize_floats",
    "summarize_strings",
]
