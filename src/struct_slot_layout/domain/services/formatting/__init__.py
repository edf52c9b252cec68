#!/usr/bin/env python3

"""Layout rendering services."""

from .layout_formatter import (
    format_json,
    format_slot,
    format_table,
    format_tables,
    layout_to_dict,
)

__all__ = [
    "format_json",
    "format_slot",
    "format_table",
    "format_tables",
    "layout_to_dict",
]
