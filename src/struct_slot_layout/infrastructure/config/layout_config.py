#!/usr/bin/env python3

"""Tunables for layout computation."""

import os

# Default configuration values
DEFAULT_CONFIG = {
    # Layout cache
    "LAYOUT_CACHE_SIZE": 1000,
    "ENABLE_LAYOUT_CACHE": True,

    # Parallel layout
    "MAX_WORKERS": 4,
}


def get_config() -> dict:
    """Get configuration with environment variable overrides.

    Variables are named ``SLOT_LAYOUT_<KEY>``; values that do not convert to
    the default's type are ignored.

    Returns:
        Configuration dictionary
    """
    config = DEFAULT_CONFIG.copy()

    for key in config:
        env_value = os.getenv(f"SLOT_LAYOUT_{key}")
        if env_value is not None:
            # Convert to appropriate type
            if isinstance(config[key], bool):
                config[key] = env_value.lower() in ("true", "1", "yes", "on")
            elif isinstance(config[key], int):
                try:
                    config[key] = int(env_value)
                except ValueError:
                    pass
            else:
                config[key] = env_value

    return config
