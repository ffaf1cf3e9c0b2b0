"""
Tests for XTAL clock values and the fatal unknown crystal report
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from xtal_mcp.crystals.validator import Bracket, XtalValidator
from xtal_mcp.crystals.xtal import XTAL, XtalFatalError, fail, format_failure


@pytest.fixture
def validator():
    return XtalValidator()


def test_format_two_suggestions():
    message = format_failure(250, "test board", Bracket(200.0, 300.0))
    assert message == "Unknown crystal value 250.  Did you mean 200 or 300? Context: test board"


def test_format_one_suggestion():
    assert format_failure(1000, "rtc", Bracket(None, 32_768.0)) == \
        "Unknown crystal value 1000.  Did you mean 32768? Context: rtc"
    assert format_failure(3e8, "cpu", Bracket(200e6, None)) == \
        "Unknown crystal value 300000000.  Did you mean 200000000? Context: cpu"


def test_format_without_bracket():
    assert format_failure(5, "x", Bracket(None, None)) == "Unknown crystal value 5.  Context: x"


def test_validate_known_crystal(validator):
    xtal = XTAL.mhz(14.318181)
    assert xtal.validate("isa bus", validator) is xtal


def test_validate_unknown_crystal_is_fatal(validator):
    with pytest.raises(XtalFatalError) as excinfo:
        XTAL(14_318_180).validate("test driver", validator)
    err = excinfo.value
    assert str(err) == (
        "Unknown crystal value 14318180.  Did you mean 14314000 or 14318181? Context: test driver"
    )
    assert err.frequency == 14_318_180.0
    assert err.bracket == Bracket(14_314_000.0, 14_318_181.0)
    assert err.code == err.message


def test_fatal_error_escapes_exception_handlers(validator):
    def careless_caller():
        try:
            XTAL(1).validate("too slow", validator)
        except Exception:
            return "recovered"
        return "continued"

    with pytest.raises(SystemExit):
        careless_caller()


def test_fail_uses_recorded_bracket():
    small = XtalValidator([100, 200, 300])
    assert not small.check(10)
    with pytest.raises(XtalFatalError, match="Did you mean 100\\? Context: probe"):
        fail(10, "probe", small)


def test_fail_with_default_validator():
    assert not XTAL(123).check()
    with pytest.raises(XtalFatalError, match="Did you mean 32768\\?"):
        fail(123, "default")


def test_check_is_not_fatal(validator):
    assert XTAL(32_768).check(validator)
    assert not XTAL(32_769).check(validator)


def test_unit_constructors():
    assert XTAL.hz(32_768).base() == 32_768.0
    assert XTAL.khz(32.768).base() == pytest.approx(32_768.0)
    assert XTAL.mhz(3.579545).base() == pytest.approx(3_579_545.0)


@pytest.mark.parametrize("value", [0, -1, -14.318181])
def test_unit_constructors_reject_non_positive(value):
    with pytest.raises(ValueError):
        XTAL.mhz(value)


def test_derived_clock_keeps_base(validator):
    cpu = XTAL(14_318_181) / 4
    assert cpu.base() == 14_318_181.0
    assert cpu.dvalue() == 14_318_181 / 4
    assert cpu.value() == 3_579_545
    assert cpu.validate("pc cpu", validator) is cpu

    doubled = 2 * XTAL(16_000_000)
    assert doubled.dvalue() == 32_000_000.0
    assert doubled.base() == 16_000_000.0
    assert (XTAL(16_000_000) * 2) == doubled


def test_derived_from_unknown_crystal_is_fatal(validator):
    # 20 MHz is known, but the crystal here is 40.5 MHz
    with pytest.raises(XtalFatalError):
        (XTAL(40_500_000) / 2).validate("divider", validator)


def test_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        XTAL(8_000_000) / 0


def test_conversions_and_ordering():
    xtal = XTAL(4_000_000)
    assert float(xtal) == 4_000_000.0
    assert int(xtal / 3) == 1_333_333
    assert xtal / 2 < xtal
    assert xtal == 4_000_000
    assert repr(xtal) == "XTAL(4000000)"
    assert repr(xtal / 2) == "XTAL(4000000) -> 2000000.00 Hz"


def test_full_ordering():
    slow, fast = XTAL(1_000_000), XTAL(2_000_000)
    assert slow <= fast
    assert fast >= slow
    assert fast > slow
    assert slow <= XTAL(1_000_000)
    assert fast >= 2_000_000
    assert sorted([fast, slow / 4, slow]) == [slow / 4, slow, fast]
