from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from utils.constants import CURRENCY_SYMBOL
from utils.errors import ValidationError

_CENT = Decimal("0.01")


def to_decimal(value) -> Decimal:
    """Exact decimal for an API or user value; floats go through str()."""
    if isinstance(value, Decimal):
        return value
    if value is None or value == "":
        return Decimal("0")
    if isinstance(value, float):
        value = repr(value)
    try:
        result = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"Not a number: {value!r}") from None
    if not result.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return result


def parse_magnitude(raw) -> Decimal:
    """Parse user-entered amount text. Raises ValidationError when malformed."""
    if raw is None or str(raw).strip() == "":
        raise ValidationError("Please enter an amount.")
    try:
        return abs(to_decimal(raw))
    except ValueError:
        raise ValidationError("Invalid amount.") from None


def signed_amount(magnitude, category_type: str) -> Decimal:
    """Negate the magnitude iff the category is an expense category."""
    value = abs(to_decimal(magnitude))
    if category_type == "expense":
        return value.copy_negate()
    return value


def round_money(amount: Decimal) -> Decimal:
    return to_decimal(amount).quantize(_CENT, rounding=ROUND_HALF_UP)


def format_currency(amount, symbol: str = CURRENCY_SYMBOL) -> str:
    """Format an amount as currency string, e.g. '₹1,234.56'."""
    return f"{symbol}{round_money(amount):,.2f}"


def format_signed(amount, symbol: str = CURRENCY_SYMBOL) -> str:
    """Format with +/- sign."""
    value = to_decimal(amount)
    sign = "+" if value >= 0 else "-"
    return f"{sign}{symbol}{round_money(abs(value)):,.2f}"
