"""Filter contracts for line categories, jobs and routing results."""

from pydantic import BaseModel, Field, field_validator
from typing import Dict, List, Optional
from pathlib import Path
from enum import Enum

from config import OUTPUT_FILE_SUFFIX


class Category(str, Enum):
    """Kind of value a line holds. The value is also the output file stem."""
    INTEGER = "integers"
    FLOAT = "floats"
    STRING = "strings"

    @property
    def label(self) -> str:
        """Capitalised name used in statistics reports."""
        return self.value.capitalize()


class FilterJob(BaseModel):
    """Everything the router and the aggregator need to know about one run."""
    input_files: List[Path] = Field(default_factory=list, description="Input files, in processing order")
    output_dir: Path = Field(default=Path("."), description="Directory holding the category files")
    prefix: Optional[str] = Field(None, description="Prefix for category file names; blank means none")
    append: bool = Field(False, description="Append to category files that already exist")
    input_dir: Optional[Path] = Field(None, description="Base directory for relative input paths")
    encoding: str = Field("utf-8", description="Text encoding for every file touched")

    @field_validator("prefix")
    @classmethod
    def blank_prefix_is_none(cls, value: Optional[str]) -> Optional[str]:
        """Drop a blank prefix so it never reaches a file name."""
        if value is None or not value.strip():
            return None
        return value

    def output_path(self, category: Category) -> Path:
        """Path of the category file: {output_dir}/{prefix}{category}.txt"""
        return self.output_dir / f"{self.prefix or ''}{category.value}{OUTPUT_FILE_SUFFIX}"

    def output_paths(self) -> Dict[Category, Path]:
        """Category file paths in routing order."""
        return {category: self.output_path(category) for category in Category}

    def resolved_inputs(self) -> List[Path]:
        """Input paths with relative entries anchored at input_dir, if set."""
        if self.input_dir is None:
            return list(self.input_files)
        return [
            path if path.is_absolute() else self.input_dir / path
            for path in self.input_files
        ]


class RoutingResult(BaseModel):
    """Outcome of one routing run."""
    lines_written: Dict[Category, int] = Field(default_factory=dict, description="Lines written per category")
    output_files: Dict[Category, Path] = Field(default_factory=dict, description="Category file each pass wrote to")
    appended: Dict[Category, bool] = Field(default_factory=dict, description="Whether the pass kept existing content")

    @property
    def total_lines(self) -> int:
        """Number of input lines routed across all categories."""
        return sum(self.lines_written.values())
