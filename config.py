"""Configuration settings for Line Filter."""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional
from pathlib import Path


class Settings(BaseSettings):
    """Global settings for Line Filter.

    Settings can be overridden via environment variables with LINE_FILTER_ prefix.
    Example: LINE_FILTER_OUTPUT_DIR=./sorted
    """

    # Paths
    output_dir: str = Field(
        default=".",
        description="Directory the category files are written to"
    )
    input_dir: Optional[str] = Field(
        default=None,
        description="Base directory for relative input file paths (default: cwd)"
    )

    # Output files
    prefix: str = Field(
        default="",
        description="Prefix prepended to every category file name"
    )
    append: bool = Field(
        default=False,
        description="Append to category files that already exist instead of truncating them"
    )
    encoding: str = Field(
        default="utf-8",
        description="Text encoding for input and category files"
    )

    model_config = {
        "env_prefix": "LINE_FILTER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def get_output_path(self) -> Path:
        """Get output path as Path object."""
        return Path(self.output_dir)

    def get_input_path(self) -> Optional[Path]:
        """Get input base path as Path object, if one is configured."""
        return Path(self.input_dir) if self.input_dir else None


OUTPUT_FILE_SUFFIX = ".txt"


# Create singleton instance
settings = Settings()
