"""
Amount helpers for the bank demo: parsing, rounding to paise, display.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

CURRENCY_SYMBOL = "₹"

_QUANT = Decimal("0.01")

AmountLike = Union[Decimal, int, float, str]


def quantize(amount: Decimal) -> Decimal:
    return amount.quantize(_QUANT, rounding=ROUND_HALF_UP)


def to_amount(value: AmountLike) -> Decimal:
    """Coerce ``value`` to a Decimal rounded to two places.

    Floats go through their string form so that ``0.1`` means one tenth.
    Raises ValueError for text that is not a finite number.
    """
    if isinstance(value, bool):
        raise TypeError("amount must be a number, not a bool")
    if isinstance(value, float):
        value = repr(value)
    if isinstance(value, str):
        raw = value.strip()
        if raw == "":
            raise ValueError("amount cannot be empty")
        try:
            value = Decimal(raw)
        except InvalidOperation as exc:
            raise ValueError(f"invalid amount: {raw!r}") from exc
    dec = Decimal(value)
    if not dec.is_finite():
        raise ValueError(f"amount must be finite: {value!r}")
    try:
        return quantize(dec)
    except InvalidOperation as exc:
        raise ValueError(f"amount out of range: {value!r}") from exc


def format_amount(amount: Decimal) -> str:
    return f"{CURRENCY_SYMBOL}{amount:,.2f}"
