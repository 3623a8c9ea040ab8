"""
Test suite for amount handling

All amounts must come out as Decimal at the configured precision.
"""

import pytest
from decimal import Decimal

from bank_ledger import config as config_module
from bank_ledger.errors import InvalidAmountError
from bank_ledger.money import (
    decimal_from_string, format_amount, quantize_amount, to_amount,
    to_positive_amount
)


class TestToAmount:
    """Test conversion of incoming amounts"""

    def test_decimal_is_rounded_half_up(self):
        assert to_amount(Decimal('100.555')) == Decimal('100.56')
        assert to_amount(Decimal('100.554')) == Decimal('100.55')

    def test_float_goes_through_string(self):
        """Test 0.1 becomes exactly Decimal('0.10')"""
        assert to_amount(0.1) == Decimal('0.10')
        assert to_amount(0.1) + to_amount(0.2) == Decimal('0.30')

    def test_int_and_string(self):
        assert to_amount(7) == Decimal('7.00')
        assert to_amount("12.5") == Decimal('12.50')

    def test_negative_preserved(self):
        assert to_amount(-3) == Decimal('-3.00')

    @pytest.mark.parametrize("value", [True, None, [], "", "abc", Decimal('NaN'), Decimal('Infinity')])
    def test_invalid_values(self, value):
        with pytest.raises(InvalidAmountError):
            to_amount(value)

    def test_out_of_range(self):
        with pytest.raises(InvalidAmountError):
            to_amount(Decimal('1e40'))


class TestToPositiveAmount:
    """Test the strictly-positive guard"""

    def test_positive(self):
        assert to_positive_amount("0.01") == Decimal('0.01')

    @pytest.mark.parametrize("value", [0, -1, "0.004"])
    def test_non_positive(self, value):
        with pytest.raises(InvalidAmountError, match="greater than zero"):
            to_positive_amount(value)


class TestDecimalFromString:
    """Test string parsing"""

    def test_plain_and_symbols(self):
        assert decimal_from_string("100.50") == Decimal('100.50')
        assert decimal_from_string(" $1,234.56 ") == Decimal('1234.56')

    def test_comma_decimal_separator(self):
        assert decimal_from_string("10,5") == Decimal('10.5')

    def test_comma_thousands_separator(self):
        assert decimal_from_string("1,000") == Decimal('1000')

    def test_european_grouping(self):
        """Test the last separator is the decimal point"""
        assert decimal_from_string("1.000,50") == Decimal('1000.50')
        assert decimal_from_string("1.234.567") == Decimal('1234567')

    def test_trailing_currency_symbol(self):
        assert decimal_from_string("100 €") == Decimal('100')

    @pytest.mark.parametrize("value", [
        "1-2", "1e5", "12abc34", "abc", "1,2,3", "12,34,567.00", "5.", "$", "$$5", "1.0.0"
    ])
    def test_garbage(self, value):
        """Test malformed text is rejected instead of reinterpreted"""
        with pytest.raises(InvalidAmountError):
            decimal_from_string(value)


class TestFormatting:
    """Test display formatting"""

    def test_format_amount(self):
        assert format_amount(Decimal('5')) == "5.00"
        assert format_amount(Decimal('5'), signed=True) == "+5.00"
        assert format_amount(Decimal('-5.5'), signed=True) == "-5.50"

    def test_precision_follows_config(self, monkeypatch):
        """Test amount_precision changes rounding and formatting"""
        monkeypatch.setenv("LEDGER_AMOUNT_PRECISION", "0")
        config_module.reload_config()
        try:
            assert quantize_amount(Decimal('100.7')) == Decimal('101')
            assert format_amount(Decimal('101')) == "101"
        finally:
            monkeypatch.delenv("LEDGER_AMOUNT_PRECISION")
            config_module.reload_config()
