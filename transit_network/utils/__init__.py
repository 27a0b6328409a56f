"""
Utility functions for the Transit Network library.
"""

from .helpers import apply_log_level, setup_logging

__all__ = ["apply_log_level", "setup_logging"]
