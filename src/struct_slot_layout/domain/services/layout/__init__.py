#!/usr/bin/env python3

"""Layout allocation services."""

from .layout_allocator import allocate
from .struct_layout_service import StructLayoutService

__all__ = ["StructLayoutService", "allocate"]
