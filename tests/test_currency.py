"""
Test suite for money handling

Validates Decimal conversion, rounding and display formatting.
"""

import pytest
from decimal import Decimal

from ledger_core.currency import to_amount, quantize, format_amount, MAX_AMOUNT
from ledger_core.exceptions import InvalidAmountError


class TestToAmount:
    """Test conversion of caller-supplied amounts"""

    def test_decimal_passthrough(self):
        assert to_amount(Decimal('1000.00')) == Decimal('1000.00')

    def test_int_and_string(self):
        assert to_amount(250) == Decimal('250.00')
        assert to_amount("750.50") == Decimal('750.50')
        assert to_amount(" 12.5 ") == Decimal('12.50')

    def test_float_goes_through_str(self):
        """0.1 + 0.2 style artifacts must not leak into balances"""
        assert to_amount(0.1) == Decimal('0.10')
        assert to_amount(750.5) == Decimal('750.50')

    def test_rounds_half_up(self):
        assert to_amount("10.005") == Decimal('10.01')
        assert to_amount("10.004") == Decimal('10.00')

    def test_sign_preserved(self):
        assert to_amount("-50.00") == Decimal('-50.00')

    @pytest.mark.parametrize("value", ["abc", "", "NaN", "Infinity", "-inf", None, True, [1]])
    def test_invalid_values(self, value):
        with pytest.raises(InvalidAmountError):
            to_amount(value)


class TestFormatting:
    """Test quantize and format helpers"""

    def test_quantize(self):
        assert quantize(Decimal('1')) == Decimal('1.00')
        assert str(quantize(Decimal('1'))) == "1.00"

    def test_format_amount(self):
        assert format_amount(Decimal('1000')) == "$1,000.00"
        assert format_amount(Decimal('950.5')) == "$950.50"
        assert format_amount(Decimal('-500')) == "-$500.00"


class TestAmountLimits:
    """Test amounts at and beyond the ledger maximum"""

    def test_maximum_is_accepted(self):
        assert to_amount(MAX_AMOUNT) == MAX_AMOUNT
        assert to_amount(-MAX_AMOUNT) == -MAX_AMOUNT

    @pytest.mark.parametrize("value", ["1e30", "1" + "0" * 27, Decimal('1E+27'), 10 ** 40, "-1e30"])
    def test_beyond_maximum_is_typed(self, value):
        with pytest.raises(InvalidAmountError, match="exceeds the maximum"):
            to_amount(value)

    def test_one_cent_over_maximum(self):
        with pytest.raises(InvalidAmountError):
            to_amount(MAX_AMOUNT + Decimal('0.01'))
