#!/usr/bin/env python3

"""Struct layout generator orchestrator (Application Layer).

Ties the modular components together:
- struct_extractor: source text -> struct/enum definitions
- StructLayoutService: definitions -> StructLayouts
- layout_formatter: StructLayouts -> table or JSON text
"""

import sys
from dataclasses import dataclass, field

from ..domain.models.layout import LayoutError, StructLayout
from ..domain.services.formatting import format_json, format_tables
from ..domain.services.layout import StructLayoutService
from ..domain.services.parsing import extract_definitions
from ..infrastructure.config import Config
from ..infrastructure.logging import get_logger, log_timing

logger = get_logger(__name__)


@dataclass
class GenerationResult:
    """Rendered output plus the per-struct outcomes it was built from."""

    output: str
    layouts: dict[str, StructLayout] = field(default_factory=dict)
    failures: dict[str, LayoutError] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return not self.failures


class LayoutGenerator:
    """Generates rendered storage layouts from source text."""

    def __init__(self, config: Config):
        """Initialize generator with configuration.

        Args:
            config: Output and execution settings
        """
        self.config = config

    def read_source(self) -> str:
        """Read source text from the configured input file, or stdin when none is set."""
        if self.config.input_file is not None:
            logger.debug(f"Reading source from {self.config.input_file}")
            return self.config.input_file.read_text(encoding="utf-8")

        logger.debug("Reading source from stdin")
        return sys.stdin.read()

    @log_timing
    def generate(self, source: str, struct_names: list[str] | None = None) -> GenerationResult:
        """Lay out and render the structs declared in ``source``.

        Args:
            source: Source text with struct declarations
            struct_names: Structs to render (default: every struct found)

        Returns:
            GenerationResult with rendered output for the structs that succeeded

        Raises:
            SourceParseError: If the source declarations are malformed
        """
        definitions = extract_definitions(source)
        service = StructLayoutService.from_definitions(definitions)

        layouts, failures = service.layout_all(struct_names, parallel=self.config.parallel)

        for name, error in failures.items():
            logger.error(f"[FAILED] {name}: {error}")

        return GenerationResult(
            output=self.render(list(layouts.values())),
            layouts=layouts,
            failures=failures,
        )

    def render(self, layouts: list[StructLayout]) -> str:
        """Render layouts in the configured output format."""
        if self.config.output_format == "json":
            return format_json(layouts, self.config.hex_slots, self.config.base_slot)
        return format_tables(layouts, self.config.hex_slots, self.config.base_slot)
