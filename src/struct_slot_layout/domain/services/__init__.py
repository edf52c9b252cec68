#!/usr/bin/env python3

"""Domain services layer."""

from . import formatting, layout, parsing, resolution
from .layout import StructLayoutService, allocate
from .resolution import TypeResolver

__all__ = [
    "StructLayoutService",
    "TypeResolver",
    "allocate",
    "formatting",
    "layout",
    "parsing",
    "resolution",
]
