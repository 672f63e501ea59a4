"""
Utilities package for asciir.

Contains common utility functions used across the asciir codebase.
"""

from .logging_utils import log_conversion, log_conversion_error, log_table_render

__all__ = [
    "log_conversion",
    "log_conversion_error",
    "log_table_render",
]
