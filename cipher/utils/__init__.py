"""
Shared utilities for CIPHER.

Common functionality used across contexts:
- Text normalization helpers
- Configuration loading
- Logger setup
- Timestamps
"""

from cipher.utils.config import get_setting, load_config
from cipher.utils.timestamp import current_year, now

__all__ = ["get_setting", "load_config", "current_year", "now"]
