#!/usr/bin/env python3

"""Source scanning services."""

from .struct_extractor import compact_type, extract_definitions, strip_comments

__all__ = ["compact_type", "extract_definitions", "strip_comments"]
