"""Tests for the command-line entry point."""

import pytest
from click.testing import CliRunner

import main as cli
from main import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("42\n-7\n3.14\nhello\n\n", encoding="utf-8")
    return path


class TestCli:
    """Test the line-filter command."""

    def test_routes_without_statistics(self, runner, tmp_path, source):
        out = tmp_path / "out"
        result = runner.invoke(main, [str(source), "-o", str(out)])

        assert result.exit_code == 0
        assert result.output == ""
        assert (out / "integers.txt").read_text() == "42\n-7\n"

    def test_short_statistics(self, runner, tmp_path, source):
        result = runner.invoke(main, [str(source), "-o", str(tmp_path), "--short"])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "Integers count: 2",
            "Floats count: 1",
            "Strings count: 2",
        ]

    def test_full_wins_over_short(self, runner, tmp_path, source):
        """Scenario: both flags print the full report."""
        result = runner.invoke(main, [str(source), "-o", str(tmp_path), "-s", "-f"])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert "Integers sum: 35" in lines
        assert "Integers average: 17" in lines
        assert "Strings max: hello" in lines

    def test_prefix_and_append(self, runner, tmp_path, source):
        args = [str(source), "-o", str(tmp_path), "-p", "x_", "-a"]
        runner.invoke(main, args)
        result = runner.invoke(main, args + ["-s"])

        assert result.exit_code == 0
        assert "Integers count: 4" in result.output.splitlines()
        assert (tmp_path / "x_floats.txt").read_text() == "3.14\n3.14\n"

    def test_append_defaults_to_settings(self, runner, tmp_path, source, monkeypatch):
        monkeypatch.setattr(cli.settings, "append", True)
        args = [str(source), "-o", str(tmp_path)]
        runner.invoke(main, args)
        runner.invoke(main, args)

        assert (tmp_path / "floats.txt").read_text() == "3.14\n3.14\n"

    def test_no_append_overrides_settings(self, runner, tmp_path, source, monkeypatch):
        monkeypatch.setattr(cli.settings, "append", True)
        args = [str(source), "-o", str(tmp_path), "--no-append"]
        runner.invoke(main, args)
        result = runner.invoke(main, args)

        assert result.exit_code == 0
        assert (tmp_path / "floats.txt").read_text() == "3.14\n"

    def test_report_goes_to_stdout_only(self, runner, tmp_path, source):
        result = runner.invoke(main, [str(source), "-o", str(tmp_path), "-s"])

        assert result.exit_code == 0
        assert "Integers count: 2" in result.stdout.splitlines()
        assert result.stderr == ""

    def test_input_dir(self, runner, tmp_path, source):
        out = tmp_path / "out"
        result = runner.invoke(main, ["in.txt", "-i", str(tmp_path), "-o", str(out)])

        assert result.exit_code == 0
        assert (out / "floats.txt").read_text() == "3.14\n"

    def test_missing_input_file(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "nope.txt"), "-o", str(tmp_path)])

        assert result.exit_code == 1
        assert "Cannot read file" in result.stderr
        assert result.stdout == ""

    def test_no_input_files(self, runner, tmp_path):
        result = runner.invoke(main, ["-o", str(tmp_path)])

        assert result.exit_code == 1
        assert "at least one file" in result.stderr

    def test_unwritable_category_file(self, runner, tmp_path, source):
        # A directory named like a category file cannot be opened for writing
        (tmp_path / "strings.txt").mkdir()
        result = runner.invoke(main, [str(source), "-o", str(tmp_path), "-f"])

        assert result.exit_code == 1
        assert "Cannot write output file" in result.stderr
        assert result.stdout == ""
