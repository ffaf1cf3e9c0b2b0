"""
Known crystal table and validation for XtalLink
"""

from .table import KNOWN_XTALS, table_range, xtals_between
from .validator import Bracket, XtalValidator, default_validator, MACHINE_EPSILON
from .xtal import XTAL, XtalFatalError, fail, format_failure

__all__ = [
    "KNOWN_XTALS",
    "table_range",
    "xtals_between",
    "Bracket",
    "XtalValidator",
    "default_validator",
    "MACHINE_EPSILON",
    "XTAL",
    "XtalFatalError",
    "fail",
    "format_failure"
]
