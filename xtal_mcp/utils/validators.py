"""
Validation utilities for XtalLink
"""

import re
from typing import Union

UNIT_MULTIPLIERS = {
    "hz": 1.0,
    "khz": 1e3,
    "mhz": 1e6,
    "ghz": 1e9,
}

_FREQ_RE = re.compile(r"^\s*([0-9][0-9_']*(?:\.[0-9]*)?(?:[eE][+-]?[0-9]+)?)\s*([kKmMgG]?[hH][zZ])?\s*$")


def parse_frequency(value: Union[int, float, str]) -> float:
    """Parse a frequency in Hz from a number or a string like '14.318181 MHz'"""
    if isinstance(value, bool):
        raise ValueError(f"Invalid frequency: {value!r}")
    if isinstance(value, (int, float)):
        return float(value)

    match = _FREQ_RE.match(str(value))
    if not match:
        raise ValueError(f"Invalid frequency: {value!r}")
    number = float(match.group(1).replace("_", "").replace("'", ""))
    unit = (match.group(2) or "hz").lower()
    return number * UNIT_MULTIPLIERS[unit]


def format_frequency(freq: float) -> str:
    """Format a frequency with the largest unit that keeps it >= 1"""
    if freq >= 1e9:
        return f"{freq/1e9:.9g} GHz"
    if freq >= 1e6:
        return f"{freq/1e6:.9g} MHz"
    if freq >= 1e3:
        return f"{freq/1e3:.9g} kHz"
    return f"{freq:.9g} Hz"


def validate_frequency(freq: float, min_freq: float, max_freq: float) -> bool:
    """Validate frequency is within range"""
    return min_freq <= freq <= max_freq
