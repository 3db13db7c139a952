"""Short and full statistics over the category files.

The aggregator holds no state between calls: every report re-reads whichever
category files exist at the job's output location. A category whose file is
missing or empty is left out of the report entirely.

Integer sums are exact and the average truncates toward zero. Float sums are
accumulated in file order in single precision, the way the values were
parsed, and printed in their shortest single-precision form.
"""

from pathlib import Path
from typing import List, Optional, Sequence, Union

import numpy as np

from contracts import Category, CategoryStatistics, FilterJob, StatisticsReport
from aggregator.loader import load_category, unlimited_int_digits
from config import settings


def _truncated_mean(total: int, count: int) -> int:
    """Integer mean rounded toward zero, as with C-style division."""
    quotient = abs(total) // count
    return quotient if total >= 0 else -quotient


def summarize_integers(values: Sequence[int]) -> CategoryStatistics:
    total = sum(values)
    return CategoryStatistics(
        category=Category.INTEGER,
        count=len(values),
        minimum=min(values),
        maximum=max(values),
        total=total,
        average=_truncated_mean(total, len(values)),
    )


def summarize_floats(values: Sequence[np.float32]) -> CategoryStatistics:
    total = np.float32(0)
    for value in values:
        total = np.float32(total + value)
    average = np.float32(total / np.float32(len(values)))

    return CategoryStatistics(
        category=Category.FLOAT,
        count=len(values),
        minimum=float(min(values)),
        maximum=float(max(values)),
        total=float(total),
        average=float(average),
    )


def summarize_strings(values: Sequence[str]) -> CategoryStatistics:
    """Shortest and longest line; the first one wins a tie."""
    return CategoryStatistics(
        category=Category.STRING,
        count=len(values),
        minimum=min(values, key=len),
        maximum=max(values, key=len),
    )


_SUMMARIZERS = {
    Category.INTEGER: summarize_integers,
    Category.FLOAT: summarize_floats,
    Category.STRING: summarize_strings,
}


def format_value(category: Category, value: Union[int, float, str]) -> str:
    """Render a statistic the way it is printed in reports."""
    if category == Category.FLOAT:
        return str(np.float32(value))
    if category == Category.INTEGER:
        with unlimited_int_digits():
            return str(value)
    return str(value)


class StatisticsAggregator:
    """Builds statistics reports from a job's category files."""

    def __init__(self, job: FilterJob):
        """Initialize the aggregator.

        Args:
            job: Job whose output location and prefix locate the category files
        """
        self.job = job

    def collect(self) -> List[CategoryStatistics]:
        """Load every category file and summarize the non-empty ones.

        Returns:
            One CategoryStatistics per non-empty category, in category order

        Raises:
            MalformedNumericDataError: If a numeric file holds an unparsable line
        """
        summaries = []
        for category in Category:
            values = load_category(self.job, category)
            if values:
                summaries.append(_SUMMARIZERS[category](values))
        return summaries

    def build_report(self, full: bool = False) -> StatisticsReport:
        """Build the short report, followed by the breakdowns if ``full``."""
        summaries = self.collect()
        report = StatisticsReport()

        for stats in summaries:
            report.add(f"{stats.category.label} count: {stats.count}")

        if full:
            for stats in summaries:
                self._add_breakdown(report, stats)

        return report

    def short_statistics(self) -> str:
        """Per-category line counts."""
        return self.build_report(full=False).render()

    def full_statistics(self) -> str:
        """Counts followed by min/max/sum/average per category."""
        return self.build_report(full=True).render()

    def _add_breakdown(self, report: StatisticsReport, stats: CategoryStatistics) -> None:
        label = stats.category.label
        report.add(f"{label} min: {format_value(stats.category, stats.minimum)}")
        report.add(f"{label} max: {format_value(stats.category, stats.maximum)}")

        # Strings have no sum or average
        if stats.category == Category.STRING:
            return
        report.add(f"{label} sum: {format_value(stats.category, stats.total)}")
        report.add(f"{label} average: {format_value(stats.category, stats.average)}")


def get_statistics(
    full: bool = False,
    output_dir: Optional[Union[str, Path]] = None,
    prefix: Optional[str] = None,
) -> str:
    """Convenience function for reading statistics of existing category files.

    Args:
        full: Include min/max/sum/average breakdowns
        output_dir: Directory holding the category files (default: settings)
        prefix: Category file name prefix (default: settings)

    Returns:
        Rendered report text
    """
    job = FilterJob(
        output_dir=Path(output_dir) if output_dir is not None else settings.get_output_path(),
        prefix=prefix if prefix is not None else settings.prefix,
        encoding=settings.encoding,
    )
    aggregator = StatisticsAggregator(job)
    return aggregator.full_statistics() if full else aggregator.short_statistics()
