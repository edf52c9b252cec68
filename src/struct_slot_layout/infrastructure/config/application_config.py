"""Configuration management for the struct slot layout tool."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

OUTPUT_FORMATS = ("table", "json")


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes", "on")


def _parse_slot(value: str) -> int:
    """Parse a slot number written in decimal or 0x-prefixed hex."""
    return int(value.strip(), 0)


@dataclass
class Config:
    """Configuration for the struct slot layout tool."""

    input_file: Optional[Path] = None
    output_format: str = "table"
    hex_slots: bool = False
    base_slot: int = 0
    verbose: bool = False
    parallel: bool = False
    log_dir: Optional[Path] = None

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object

        Raises:
            ValueError: If BASE_SLOT is not a valid integer
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        input_file_str = os.getenv("INPUT_FILE")
        log_dir_str = os.getenv("LOG_DIR")

        return cls(
            input_file=Path(input_file_str) if input_file_str else None,
            output_format=os.getenv("OUTPUT_FORMAT", "table").lower(),
            hex_slots=_parse_bool(os.getenv("HEX_SLOTS", "false")),
            base_slot=_parse_slot(os.getenv("BASE_SLOT", "0")),
            verbose=_parse_bool(os.getenv("VERBOSE", "false")),
            parallel=_parse_bool(os.getenv("PARALLEL", "false")),
            log_dir=Path(log_dir_str) if log_dir_str else None,
        )

    @classmethod
    def from_args(
        cls,
        input_file: Optional[Path] = None,
        output_format: Optional[str] = None,
        hex_slots: Optional[bool] = None,
        base_slot: Optional[int] = None,
        verbose: Optional[bool] = None,
        parallel: Optional[bool] = None,
        log_dir: Optional[Path] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Returns:
            Config object
        """
        config = cls.from_env()

        if input_file is not None:
            config.input_file = input_file
        if output_format is not None:
            config.output_format = output_format.lower()
        if hex_slots is not None:
            config.hex_slots = hex_slots
        if base_slot is not None:
            config.base_slot = base_slot
        if verbose is not None:
            config.verbose = verbose
        if parallel is not None:
            config.parallel = parallel
        if log_dir is not None:
            config.log_dir = log_dir

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if self.input_file is not None:
            if not self.input_file.exists():
                raise ValueError(f"Input file not found: {self.input_file}")
            if not self.input_file.is_file():
                raise ValueError(f"Not a file: {self.input_file}")

        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format '{self.output_format}' "
                f"(expected one of: {', '.join(OUTPUT_FORMATS)})"
            )

        if self.base_slot < 0:
            raise ValueError(f"Base slot must be non-negative: {self.base_slot}")
