#!/usr/bin/env python3

"""Application layer."""

from .layout_generator import GenerationResult, LayoutGenerator

__all__ = ["GenerationResult", "LayoutGenerator"]
