"""Infrastructure configuration module."""

from .application_config import Config
from .layout_config import get_config

__all__ = ["Config", "get_config"]
