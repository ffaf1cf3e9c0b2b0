"""
Utility functions for XtalLink
"""

from .validators import (
    parse_frequency,
    format_frequency,
    validate_frequency
)

__all__ = [
    "parse_frequency",
    "format_frequency",
    "validate_frequency"
]
