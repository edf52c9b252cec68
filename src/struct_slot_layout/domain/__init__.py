#!/usr/bin/env python3

"""Domain layer: layout models, services and repositories."""

from . import models, repositories, services

__all__ = ["models", "repositories", "services"]
