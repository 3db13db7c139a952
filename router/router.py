"""Router writing classified lines to their category files.

Each category gets its own pass over every input file, in the order the
files were supplied. A pass holds one write handle on its category file for
its whole duration, so lines land in first-seen order.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from contracts import Category, FilterJob, RoutingResult
from errors import MissingInputError, UnreadableInputError, UnwritableOutputError
from router.classifier import classify_line
from router.reader import read_lines
from config import settings


logger = logging.getLogger(__name__)


class LineRouter:
    """Routes every line of a job's input files to its category file."""

    def __init__(self, job: FilterJob):
        """Initialize the router.

        Args:
            job: Inputs, output location and append policy for this run
        """
        self.job = job

    def route(self) -> RoutingResult:
        """Classify all input lines and write them to the category files.

        Categories are routed in order (integers, floats, strings). A failure
        stops the failing pass; files finished by earlier passes are kept.

        Returns:
            RoutingResult with per-category line counts

        Raises:
            MissingInputError: If the job has no input files
            UnreadableInputError: If an input file cannot be read
            UnwritableOutputError: If a category file cannot be written
        """
        inputs = self._check_inputs()
        self._ensure_output_dir()

        result = RoutingResult()
        for category, output_path in self.job.output_paths().items():
            append = self.job.append and output_path.exists()
            written = self._route_category(category, inputs, output_path, append)

            result.lines_written[category] = written
            result.output_files[category] = output_path
            result.appended[category] = append
            logger.info(
                "%s: %d line(s) %s %s",
                category.label, written, "appended to" if append else "written to", output_path,
            )

        return result

    def _check_inputs(self) -> List[Path]:
        """Resolve input paths and fail fast on ones that do not exist."""
        if not self.job.input_files:
            raise MissingInputError()

        inputs = self.job.resolved_inputs()
        for path in inputs:
            if not path.is_file():
                raise UnreadableInputError(path, "file not found")
        return inputs

    def _ensure_output_dir(self) -> None:
        output_dir = self.job.output_dir
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise UnwritableOutputError(output_dir, str(e)) from e

    def _route_category(
        self,
        category: Category,
        inputs: Sequence[Path],
        output_path: Path,
        append: bool,
    ) -> int:
        """Run one category pass over every input file.

        A category file that does not exist yet is always created fresh. An
        existing one is appended to or truncated depending on ``append``.

        Returns:
            Number of lines written during this pass
        """
        mode = "a" if append else "w"
        try:
            output = open(output_path, mode, encoding=self.job.encoding, newline="\n")
        except OSError as e:
            raise UnwritableOutputError(output_path, str(e)) from e

        # Covers the flush on close as well as each write
        written = 0
        try:
            with output:
                for input_path in inputs:
                    logger.debug("Scanning %s for %s", input_path, category.value)
                    for line in read_lines(input_path, self.job.encoding):
                        if classify_line(line) is not category:
                            continue
                        output.write(line + "\n")
                        written += 1
        except OSError as e:
            raise UnwritableOutputError(output_path, str(e)) from e
        return written


def route_files(
    input_files: Sequence[Union[str, Path]],
    output_dir: Optional[Union[str, Path]] = None,
    prefix: Optional[str] = None,
    append: Optional[bool] = None,
) -> RoutingResult:
    """Convenience function for routing files.

    Unset arguments fall back to the global settings.

    Args:
        input_files: Files to classify, in processing order
        output_dir: Directory for the category files
        prefix: Prefix for the category file names
        append: Append to category files that already exist

    Returns:
        RoutingResult with per-category line counts
    """
    job = FilterJob(
        input_files=[Path(p) for p in input_files],
        output_dir=Path(output_dir) if output_dir is not None else settings.get_output_path(),
        prefix=prefix if prefix is not None else settings.prefix,
        append=append if append is not None else settings.append,
        input_dir=settings.get_input_path(),
        encoding=settings.encoding,
    )
    router = LineRouter(job)
    return router.route()
