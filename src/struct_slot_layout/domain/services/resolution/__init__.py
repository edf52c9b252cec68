#!/usr/bin/env python3

"""Type resolution services."""

from .type_resolver import TypeResolver, enum_byte_size, normalize_type_name

__all__ = ["TypeResolver", "enum_byte_size", "normalize_type_name"]
