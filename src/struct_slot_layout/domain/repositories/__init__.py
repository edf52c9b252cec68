#!/usr/bin/env python3

"""Domain repositories."""

from .cache import LayoutCache

__all__ = ["LayoutCache"]
