"""Utilities module initialization"""

from supersaver_pos.utils.logger import configure_logging

__all__ = ["configure_logging"]
