"""Statistics contracts for per-category summaries and rendered reports."""

from pydantic import BaseModel, Field
from typing import List, Optional, Union

from .filter_contracts import Category


StatValue = Union[int, float, str]


class CategoryStatistics(BaseModel):
    """Summary of one category file.

    Numeric categories fill every field. The string category only carries
    minimum/maximum, which hold the shortest and longest line.
    """
    category: Category = Field(..., description="Category the numbers describe")
    count: int = Field(..., ge=0, description="Number of lines loaded")
    minimum: Optional[StatValue] = Field(None, description="Smallest value (shortest line for strings)")
    maximum: Optional[StatValue] = Field(None, description="Largest value (longest line for strings)")
    total: Optional[Union[int, float]] = Field(None, description="Sum of values")
    average: Optional[Union[int, float]] = Field(None, description="Mean of values")


class StatisticsReport(BaseModel):
    """Ordered, append-only list of report lines."""
    lines: List[str] = Field(default_factory=list, description="Report lines in output order")

    def add(self, line: str) -> "StatisticsReport":
        self.lines.append(line)
        return self

    def render(self) -> str:
        return "\n".join(self.lines)

    def is_empty(self) -> bool:
        return not self.lines
