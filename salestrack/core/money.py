from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

ZERO = Decimal("0")
_CENTS = Decimal("0.01")


def to_decimal(value, field="value"):
    if value is None:
        raise ValueError(f"{field} is required")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"{field} must be a number")
    try:
        # str() keeps floats from leaking binary noise into the decimal.
        return Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"{field} must be a number") from None


def format_money(value) -> str:
    return str(to_decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP))


def format_quantity(value) -> str:
    quantity = to_decimal(value)
    if quantity == quantity.to_integral_value():
        return str(quantity.quantize(Decimal(1)))
    return str(quantity.normalize())
