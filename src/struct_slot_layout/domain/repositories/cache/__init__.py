#!/usr/bin/env python3

"""Cache implementations for computed layouts."""

from .layout_cache import LayoutCache

__all__ = ["LayoutCache"]
