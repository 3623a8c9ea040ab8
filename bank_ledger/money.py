"""
Amount Handling Module

Normalises monetary amounts to fixed-point Decimal at the configured
precision. NEVER uses float for balances; floats coming in are converted
through their string form first.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, getcontext
from typing import Union
import re

from .config import get_config
from .errors import InvalidAmountError

# Set global decimal context for financial precision
getcontext().prec = 28

ZERO = Decimal('0')

AmountLike = Union[Decimal, int, float, str]

CURRENCY_SYMBOLS = ("$", "€", "£", "¥")

PLAIN_NUMBER = re.compile(r'^[+-]?\d+(\.\d+)?$')


def quantum() -> Decimal:
    """Smallest representable amount step, e.g. Decimal('0.01')"""
    return Decimal('0.1') ** get_config().amount_precision


def quantize_amount(value: Decimal) -> Decimal:
    """Round a Decimal half-up to the configured precision"""
    return value.quantize(quantum(), rounding=ROUND_HALF_UP)


def _grouped(text: str, separator: str) -> bool:
    """Check text is digits in thousands groups, e.g. '1,234,567'"""
    pattern = r'^[+-]?\d{1,3}(%s\d{3})+$' % re.escape(separator)
    return re.match(pattern, text) is not None


def decimal_from_string(value: str) -> Decimal:
    """
    Safely convert string to Decimal, handling common formats

    Accepts surrounding whitespace, one leading or trailing currency symbol,
    thousands separators in groups of three, and either ',' or '.' as the
    decimal point (the last one wins when both appear). Exponents, stray
    letters and misplaced separators are rejected.

    Args:
        value: String representation of number

    Returns:
        Decimal value

    Raises:
        InvalidAmountError: If string is not a plain number
    """
    if not value or not isinstance(value, str):
        raise InvalidAmountError("Amount must be a non-empty string")

    clean_value = value.strip()
    if clean_value.startswith(CURRENCY_SYMBOLS):
        clean_value = clean_value[1:].strip()
    elif clean_value.endswith(CURRENCY_SYMBOLS):
        clean_value = clean_value[:-1].strip()

    if ',' in clean_value and '.' in clean_value:
        decimal_point = ',' if clean_value.rfind(',') > clean_value.rfind('.') else '.'
        thousands = '.' if decimal_point == ',' else ','
        whole, _, fraction = clean_value.rpartition(decimal_point)
        if not _grouped(whole, thousands):
            raise InvalidAmountError(f"Cannot convert '{value}' to an amount")
        clean_value = whole.replace(thousands, '') + '.' + fraction
    elif ',' in clean_value:
        whole, _, fraction = clean_value.rpartition(',')
        if clean_value.count(',') == 1 and len(fraction) <= 2:
            # Single comma with cents - decimal separator
            clean_value = whole + '.' + fraction
        elif _grouped(clean_value, ','):
            clean_value = clean_value.replace(',', '')
        else:
            raise InvalidAmountError(f"Cannot convert '{value}' to an amount")
    elif clean_value.count('.') > 1 and _grouped(clean_value, '.'):
        clean_value = clean_value.replace('.', '')

    if not PLAIN_NUMBER.match(clean_value):
        raise InvalidAmountError(f"Cannot convert '{value}' to an amount")

    return Decimal(clean_value)


def to_amount(value: AmountLike) -> Decimal:
    """
    Convert an incoming amount to a quantized Decimal

    The sign is preserved; callers decide whether zero or negative is allowed.

    Raises:
        InvalidAmountError: For booleans, unparseable text, NaN or infinity
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Invalid amount: {value!r}")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, float):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        amount = decimal_from_string(value)
    else:
        raise InvalidAmountError(f"Invalid amount type: {type(value).__name__}")

    if not amount.is_finite():
        raise InvalidAmountError(f"Invalid amount: {value!r}")

    try:
        return quantize_amount(amount)
    except InvalidOperation:
        raise InvalidAmountError(f"Amount out of range: {value!r}")


def to_positive_amount(value: AmountLike) -> Decimal:
    """Convert an amount and reject anything that is not strictly positive"""
    amount = to_amount(value)
    if amount <= ZERO:
        raise InvalidAmountError(
            f"Invalid amount {format_amount(amount)}: must be greater than zero"
        )
    return amount


def format_amount(amount: Decimal, signed: bool = False) -> str:
    """Format for display, e.g. '100.00' or '+100.00'"""
    precision = get_config().amount_precision
    if signed:
        return f"{amount:+.{precision}f}"
    return f"{amount:.{precision}f}"
