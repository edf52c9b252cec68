#!/usr/bin/env python3

"""Domain models."""

from . import layout

__all__ = ["layout"]
