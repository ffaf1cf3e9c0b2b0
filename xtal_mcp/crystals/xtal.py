"""
Crystal clock values and the fatal unknown-crystal report
"""

import logging
from functools import total_ordering
from typing import Optional, Union

from .validator import Bracket, XtalValidator, default_validator

logger = logging.getLogger(__name__)

Number = Union[int, float]


class XtalFatalError(SystemExit):
    """Unknown crystal in a clock definition.

    Derives from SystemExit so that generic ``except Exception`` handlers
    do not swallow it; left alone it ends the interpreter with status 1
    and the message on stderr.
    """

    def __init__(self, message: str, frequency: float, bracket: Bracket):
        super().__init__(message)
        self.message = message
        self.frequency = frequency
        self.bracket = bracket

    def __str__(self):
        return self.message


def format_failure(candidate: float, context: str, bracket: Bracket) -> str:
    """Build the unknown crystal diagnostic"""
    message = "Unknown crystal value %.0f. " % candidate
    if bracket.low is not None and bracket.high is not None:
        message += " Did you mean %.0f or %.0f?" % (bracket.low, bracket.high)
    elif bracket.low is not None or bracket.high is not None:
        nearest = bracket.low if bracket.low is not None else bracket.high
        message += " Did you mean %.0f?" % nearest
    message += " Context: %s" % context
    return message


def fail(candidate: float, context: str = "", validator: Optional[XtalValidator] = None):
    """Report candidate as an unknown crystal and terminate.

    Must follow a failed ``check`` on the same validator, whose recorded
    bracket supplies the suggestions. Never returns.
    """
    if validator is None:
        validator = default_validator()
    bracket = validator.bracket
    message = format_failure(candidate, context, bracket)
    logger.critical(message)
    raise XtalFatalError(message, candidate, bracket)


@total_ordering
class XTAL:
    """A crystal clock and the clock derived from it.

    Multiplying or dividing an XTAL gives the derived clock seen by a chip
    while keeping the base crystal, which is what gets validated.
    """

    def __init__(self, base_clock: Number, current_clock: Optional[Number] = None):
        self.base_clock = float(base_clock)
        self.current_clock = self.base_clock if current_clock is None else float(current_clock)

    @classmethod
    def hz(cls, value: Number) -> "XTAL":
        if value <= 0:
            raise ValueError(f"Crystal frequency must be positive, got {value}")
        return cls(value)

    @classmethod
    def khz(cls, value: Number) -> "XTAL":
        return cls.hz(value * 1e3)

    @classmethod
    def mhz(cls, value: Number) -> "XTAL":
        return cls.hz(value * 1e6)

    def value(self) -> int:
        """Derived clock in whole Hz"""
        return int(self.current_clock)

    def dvalue(self) -> float:
        """Derived clock in Hz"""
        return self.current_clock

    def base(self) -> float:
        """Crystal frequency in Hz"""
        return self.base_clock

    def check(self, validator: Optional[XtalValidator] = None) -> bool:
        if validator is None:
            validator = default_validator()
        return validator.check(self.base_clock)

    def validate(self, context: str = "", validator: Optional[XtalValidator] = None) -> "XTAL":
        """Fail fatally unless the base clock is a known crystal"""
        if validator is None:
            validator = default_validator()
        if not validator.check(self.base_clock):
            fail(self.base_clock, context, validator)
        return self

    def __mul__(self, factor: Number) -> "XTAL":
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return XTAL(self.base_clock, self.current_clock * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Number) -> "XTAL":
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return XTAL(self.base_clock, self.current_clock / divisor)

    def __float__(self):
        return self.current_clock

    def __int__(self):
        return self.value()

    def __eq__(self, other):
        if isinstance(other, XTAL):
            return self.current_clock == other.current_clock
        if isinstance(other, (int, float)):
            return self.current_clock == other
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, XTAL):
            return self.current_clock < other.current_clock
        if isinstance(other, (int, float)):
            return self.current_clock < other
        return NotImplemented

    def __hash__(self):
        return hash(self.current_clock)

    def __repr__(self):
        if self.current_clock == self.base_clock:
            return f"XTAL({self.base_clock:.0f})"
        return f"XTAL({self.base_clock:.0f}) -> {self.current_clock:.2f} Hz"
