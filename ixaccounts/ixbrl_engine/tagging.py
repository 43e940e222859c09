"""
Inline XBRL tag primitives.

The only place that embeds a value in the output markup together with its
concept, context and unit. Visible text and machine value are always derived
from the same rounded number, so stripping a tag leaves exactly what
format_number() would print.

Tags are returned as markupsafe.Markup so templates embed them verbatim
while every other value stays autoescaped.

These functions check syntax only. Business rules belong to validation.
"""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from markupsafe import Markup

NUMBER_FORMAT = "ixt:num-dot-decimal"
DATE_FORMAT = "ixt:date-day-monthname-year-en"
PURE_UNIT = "pure"

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

Number = Union[Decimal, int]


def round_value(value: Number, decimals: int = 0) -> Decimal:
    """Round half-up to ``decimals`` places."""
    if decimals < 0:
        raise ValueError(f"decimals must be zero or positive, got {decimals}")
    exponent = Decimal(1).scaleb(-decimals)
    return Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)


def _digits(value: Decimal, decimals: int) -> str:
    return f"{abs(value):,.{decimals}f}"


def format_number(value: Number, decimals: int = 0) -> str:
    """
    Human-readable amount.

    Examples:
        >>> format_number(Decimal("1234.5"))
        '1,235'
        >>> format_number(Decimal("-1234"))
        '(1,234)'
    """
    rounded = round_value(value, decimals)
    text = _digits(rounded, decimals)
    return f"({text})" if rounded < 0 else text


def format_date(value: date) -> str:
    """Long-form date, e.g. ``31 December 2024``."""
    return f"{value.day} {MONTH_NAMES[value.month - 1]} {value.year}"


def _tag_numeric(value: Number, concept: str, context_ref: str, unit: str, decimals: int) -> Markup:
    rounded = round_value(value, decimals)
    negative = rounded < 0
    tag = Markup(
        '<ix:nonFraction name="{}" contextRef="{}" unitRef="{}" decimals="{}" scale="0" '
        'format="{}"{}>{}</ix:nonFraction>'
    ).format(
        concept,
        context_ref,
        unit,
        decimals,
        NUMBER_FORMAT,
        Markup(' sign="-"') if negative else "",
        _digits(rounded, decimals),
    )
    # Brackets stay outside the tag; the sign attribute carries the negation
    return Markup("({})").format(tag) if negative else tag


def tag_monetary(
    value: Number,
    concept: str,
    context_ref: str,
    unit: str = "GBP",
    decimals: int = 0,
) -> Markup:
    """Tag a currency amount."""
    return _tag_numeric(value, concept, context_ref, unit, decimals)


def tag_count(
    value: Number,
    concept: str,
    context_ref: str,
    unit: str = PURE_UNIT,
    decimals: int = 0,
) -> Markup:
    """Tag a pure number such as an employee or share count."""
    return _tag_numeric(value, concept, context_ref, unit, decimals)


def tag_date(value: date, concept: str, context_ref: str) -> Markup:
    """Tag a date, rendered as ``31 December 2024``."""
    return Markup('<ix:nonNumeric name="{}" contextRef="{}" format="{}">{}</ix:nonNumeric>').format(
        concept, context_ref, DATE_FORMAT, format_date(value)
    )


def tag_text(value: str, concept: str, context_ref: str) -> Markup:
    """Tag narrative text. The value is escaped, never interpreted as markup."""
    return Markup('<ix:nonNumeric name="{}" contextRef="{}">{}</ix:nonNumeric>').format(
        concept, context_ref, value
    )
