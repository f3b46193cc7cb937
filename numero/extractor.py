"""
Deterministic extraction of canonical decimal number text.

Accepted shape (SEP and DEC come from the conversion options):

    ["-"] (d{1,3} (SEP d{3})* | d+)? [DEC d+] [("e"|"E") ["-"|"+"] d+]

Grouping must be regular: "1,000,000" and "1000000" are fine, "1,00,000"
and "1,000,00" are not. Anything that does not match returns None rather
than a best guess.
"""

from __future__ import annotations

import re
from functools import lru_cache

from .exceptions import CapacityError
from .models import ConversionOptions, NumberParts

# Far beyond the longest nameable number (10^606); keeps "1e999999999" cheap
MAX_EXPONENT = 1_000


@lru_cache(maxsize=32)
def _number_pattern(thousands: str, decimal: str) -> re.Pattern[str]:
    sep, dec = re.escape(thousands), re.escape(decimal)
    return re.compile(
        rf"(?P<sign>-)?"
        rf"(?P<integral>[0-9]{{1,3}}(?:{sep}[0-9]{{3}})+|[0-9]+)?"
        rf"(?:{dec}(?P<fractional>[0-9]+))?"
        rf"(?:[eE](?P<exponent>[-+]?[0-9]+))?"
    )


def extract(text: str, options: ConversionOptions) -> NumberParts | None:
    """Split canonical number text into sign, digits and resolved exponent.

    Args:
        text: e.g. "-1,234.56e3"
        options: Supplies the separator symbols and the leading-zero policy.

    Returns:
        NumberParts(negative=True, integral_digits="1234560", ...), or None
        if the text is not a number.

    Raises:
        CapacityError: The exponent is absurdly large.
    """
    pattern = _number_pattern(
        options.thousands_separator_symbol, options.decimal_separator_symbol
    )
    match = pattern.fullmatch(text.strip())
    if not match:
        return None

    integral = (match.group("integral") or "").replace(
        options.thousands_separator_symbol, ""
    )
    fractional = match.group("fractional") or ""
    if not integral and not fractional:
        return None

    if match.group("exponent") is not None:
        integral, fractional = _resolve_exponent(
            integral, fractional, int(match.group("exponent"))
        )

    integral = integral.lstrip("0")
    if not integral:
        if not fractional or options.force_leading_zero:
            integral = "0"

    return NumberParts(
        negative=match.group("sign") is not None,
        integral_digits=integral,
        fractional_digits=fractional,
    )


def _resolve_exponent(integral: str, fractional: str, exponent: int) -> tuple[str, str]:
    """Move the decimal point `exponent` places to the right (left if negative).

    >>> _resolve_exponent("1", "23", 6)
    ('1230000', '')
    >>> _resolve_exponent("6", "25", -2)
    ('', '0625')
    """
    if abs(exponent) > MAX_EXPONENT:
        raise CapacityError(
            f"Exponent {exponent} is out of range (limit {MAX_EXPONENT})",
            {"exponent": exponent},
        )

    digits = integral + fractional
    point = len(integral) + exponent

    if point > len(digits):
        digits += "0" * (point - len(digits))
    elif point < 0:
        digits = "0" * -point + digits
        point = 0

    return digits[:point], digits[point:]
