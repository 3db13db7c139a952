"""Tests for the Pydantic contracts, settings and errors.

Verifies that every contract can be instantiated with valid data
and that validation works correctly.
"""

import pytest
from pathlib import Path

from contracts import (
    # Filter
    Category,
    FilterJob,
    RoutingResult,
    # Statistics
    CategoryStatistics,
    StatisticsReport,
)
from config import Settings
from errors import (
    LineFilterError,
    MalformedNumericDataError,
    MissingInputError,
    UnreadableInputError,
    UnwritableOutputError,
)


class TestFilterContracts:
    """Test filter-related contracts."""

    def test_category_values_and_labels(self):
        assert [c.value for c in Category] == ["integers", "floats", "strings"]
        assert Category.INTEGER.label == "Integers"
        assert Category.FLOAT.label == "Floats"
        assert Category.STRING.label == "Strings"

    def test_filter_job_defaults(self):
        job = FilterJob()
        assert job.input_files == []
        assert job.output_dir == Path(".")
        assert job.prefix is None
        assert job.append is False

    def test_output_path_with_prefix(self):
        job = FilterJob(output_dir=Path("/data"), prefix="run_")
        assert job.output_path(Category.FLOAT) == Path("/data/run_floats.txt")

    @pytest.mark.parametrize("prefix", [None, "", "   "])
    def test_blank_prefix_is_omitted(self, prefix):
        job = FilterJob(output_dir=Path("/data"), prefix=prefix)
        assert job.prefix is None
        assert job.output_path(Category.STRING) == Path("/data/strings.txt")

    def test_output_paths_in_category_order(self):
        paths = FilterJob(output_dir=Path("out")).output_paths()
        assert list(paths) == [Category.INTEGER, Category.FLOAT, Category.STRING]

    def test_resolved_inputs(self):
        job = FilterJob(
            input_files=[Path("a.txt"), Path("/abs/b.txt")],
            input_dir=Path("/base"),
        )
        assert job.resolved_inputs() == [Path("/base/a.txt"), Path("/abs/b.txt")]

    def test_resolved_inputs_without_base(self):
        job = FilterJob(input_files=["a.txt"])
        assert job.resolved_inputs() == [Path("a.txt")]

    def test_routing_result_total(self):
        result = RoutingResult(lines_written={Category.INTEGER: 2, Category.STRING: 3})
        assert result.total_lines == 5


class TestStatisticsContracts:
    """Test statistics-related contracts."""

    def test_category_statistics(self):
        stats = CategoryStatistics(
            category=Category.INTEGER,
            count=2,
            minimum=-7,
            maximum=42,
            total=35,
            average=17,
        )
        assert stats.total == 35
        assert isinstance(stats.minimum, int)

    def test_string_statistics_keep_text(self):
        stats = CategoryStatistics(category=Category.STRING, count=2, minimum="", maximum="3.5")
        assert stats.minimum == ""
        assert stats.maximum == "3.5"

    def test_count_validation(self):
        """Test that count cannot be negative."""
        with pytest.raises(ValueError):
            CategoryStatistics(category=Category.FLOAT, count=-1)

    def test_report_render(self):
        report = StatisticsReport()
        assert report.is_empty()
        report.add("Integers count: 2").add("Floats count: 1")
        assert report.render() == "Integers count: 2\nFloats count: 1"


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for name in ("OUTPUT_DIR", "PREFIX", "APPEND", "INPUT_DIR", "ENCODING"):
            monkeypatch.delenv(f"LINE_FILTER_{name}", raising=False)
        current = Settings(_env_file=None)
        assert current.output_dir == "."
        assert current.prefix == ""
        assert current.append is False
        assert current.get_input_path() is None

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("LINE_FILTER_OUTPUT_DIR", "/tmp/sorted")
        monkeypatch.setenv("LINE_FILTER_APPEND", "true")
        current = Settings(_env_file=None)
        assert current.get_output_path() == Path("/tmp/sorted")
        assert current.append is True


class TestErrors:
    """Test the error taxonomy."""

    def test_all_errors_share_base(self):
        for error in (
            MissingInputError(),
            UnreadableInputError("in.txt"),
            UnwritableOutputError("out.txt"),
            MalformedNumericDataError("integers.txt", 3, "x"),
        ):
            assert isinstance(error, LineFilterError)

    def test_messages_name_the_path(self):
        assert "in.txt" in str(UnreadableInputError("in.txt", "file not found"))
        assert "out.txt" in str(UnwritableOutputError(Path("out.txt")))
        message = str(MalformedNumericDataError("integers.txt", 3, "x"))
        assert "integers.txt:3" in message
