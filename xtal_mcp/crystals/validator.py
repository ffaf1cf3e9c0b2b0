"""
Crystal frequency validator
Binary-searches the known crystal table with a relative tolerance
"""

import logging
from dataclasses import dataclass, asdict
from typing import Dict, Optional, Any, Sequence

import numpy as np

from .table import KNOWN_XTALS

logger = logging.getLogger(__name__)

# Match tolerance, in units of float64 machine epsilon relative to the candidate
TOLERANCE_FACTOR = 2
MACHINE_EPSILON = float(np.finfo(np.float64).eps)


@dataclass(frozen=True)
class Bracket:
    """Nearest known crystals below and above a rejected value"""
    low: Optional[float]
    high: Optional[float]


def _top_power_of_two(value: int) -> int:
    """Largest power of two <= value (0 for 0)"""
    fill = value
    for shift in (1, 2, 4, 8, 16, 32):
        fill |= fill >> shift
    return fill - (fill >> 1)


class XtalValidator:
    """Validates clock values against a sorted table of known crystals.

    Keeps the last confirmed value as a one-slot cache, since the same
    crystal is usually checked once per device sharing it, and records the
    bracketing table entries of the last rejected value for diagnostics.

    An instance is not thread-safe; give each thread its own validator.
    The table itself is read-only and can be shared.
    """

    def __init__(self, table: Optional[Sequence[float]] = None):
        if table is None:
            self.table = KNOWN_XTALS
        else:
            table = np.array(table, dtype=np.float64)
            if table.ndim != 1 or len(table) == 0:
                raise ValueError("Crystal table must be a non-empty sequence")
            if not np.all(np.diff(table) > 0):
                raise ValueError("Crystal table must be strictly ascending")
            table.flags.writeable = False
            self.table = table

        self.last_index = len(self.table) - 1
        self.start_step = _top_power_of_two(self.last_index)
        self.tolerance = TOLERANCE_FACTOR * MACHINE_EPSILON

        self.last_confirmed: Optional[float] = None
        self.bracket_low: Optional[float] = None
        self.bracket_high: Optional[float] = None

        self.cache_hits = 0
        self.searches = 0
        self.failures = 0

    def _matches(self, candidate: float, sfreq: float) -> bool:
        if candidate == 0:
            return False
        return abs((candidate - sfreq) / candidate) <= self.tolerance

    def _confirm(self, candidate: float) -> bool:
        self.last_confirmed = candidate
        return True

    def check(self, candidate: float) -> bool:
        """Return True if candidate is a known crystal within tolerance.

        On a miss, bracket_low/bracket_high are both overwritten with the
        nearest table entries (None past either end of the table).
        """
        if candidate == self.last_confirmed:
            self.cache_hits += 1
            return True

        self.searches += 1
        table = self.table
        last = self.last_index
        slot = self.start_step
        step = self.start_step

        while step:
            if slot > last:
                slot ^= step | (step >> 1)
            else:
                sfreq = float(table[slot])
                if self._matches(candidate, sfreq):
                    return self._confirm(candidate)
                if candidate > sfreq:
                    slot |= step >> 1
                else:
                    slot ^= step | (step >> 1)
            step >>= 1

        # Index 0 is never probed inside the loop
        sfreq = float(table[slot])
        if self._matches(candidate, sfreq):
            return self._confirm(candidate)

        if candidate < sfreq:
            self.bracket_low = float(table[slot - 1]) if slot > 0 else None
            self.bracket_high = sfreq
        else:
            self.bracket_low = sfreq
            self.bracket_high = float(table[slot + 1]) if slot < last else None

        self.failures += 1
        logger.debug(
            f"Unknown crystal {candidate!r}, nearest {self.bracket_low!r} / {self.bracket_high!r}"
        )
        return False

    @property
    def bracket(self) -> Bracket:
        """Bracket recorded by the last failed check"""
        return Bracket(self.bracket_low, self.bracket_high)

    def nearest(self, candidate: float) -> Optional[Bracket]:
        """None if candidate is known, else its bracketing crystals"""
        if self.check(candidate):
            return None
        return self.bracket

    def reset(self):
        """Forget the cached value, the bracket and the counters"""
        self.last_confirmed = None
        self.bracket_low = None
        self.bracket_high = None
        self.cache_hits = 0
        self.searches = 0
        self.failures = 0

    def get_statistics(self) -> Dict[str, Any]:
        """Get validator statistics"""
        return {
            "table_size": len(self.table),
            "last_confirmed": self.last_confirmed,
            "last_bracket": asdict(self.bracket),
            "cache_hits": self.cache_hits,
            "searches": self.searches,
            "failures": self.failures,
        }


_default_validator: Optional[XtalValidator] = None


def default_validator() -> XtalValidator:
    """Process-wide validator over the known crystal table"""
    global _default_validator
    if _default_validator is None:
        _default_validator = XtalValidator()
    return _default_validator
