"""
Shared utilities for jdfill.

Common functionality used across contexts:
- Logger setup
- Configuration management
"""

from jdfill.utils.config import load_config

__all__ = ["load_config"]
