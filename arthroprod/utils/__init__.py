"""
Utility functions for arthroprod.

Includes configuration management.
"""

from .config import Config, load_config, save_config

__all__ = [
    # Configuration
    "Config",
    "load_config",
    "save_config",
]
