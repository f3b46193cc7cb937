"""
Output formatting for canonical number text.

Only presentation lives here: separators, the sign, the leading zero and
the optional scientific form. The digits themselves are decided elsewhere.
"""

from __future__ import annotations

from .models import ConversionOptions


def group_thousands(digits: str, symbol: str) -> str:
    """Insert `symbol` between groups of three digits, counting from the right.

    >>> group_thousands("1234567", ",")
    '1,234,567'
    """
    head = len(digits) % 3 or 3
    chunks = [digits[:head]]
    chunks.extend(digits[i : i + 3] for i in range(head, len(digits), 3))
    return symbol.join(chunks)


def to_scientific(integral: str, decimal_symbol: str) -> str:
    """Write a non-zero integer digit string as mantissa and exponent.

    >>> to_scientific("1230000", ".")
    '1.23e6'
    """
    significant = integral.rstrip("0")
    mantissa = significant[0]
    if len(significant) > 1:
        mantissa += decimal_symbol + significant[1:]
    return f"{mantissa}e{len(integral) - 1}"


def format_number(
    negative: bool, integral: str, fractional: str, options: ConversionOptions
) -> str:
    """Assemble canonical number text from raw digit strings.

    Args:
        negative: Prefix a minus sign (dropped when the value is zero).
        integral: Integral digits, leading zeros allowed.
        fractional: Fractional digits, may be empty.
        options: Separator symbols and formatting switches.
    """
    integral = integral.lstrip("0") or "0"

    if options.use_thousands_separators:
        text = group_thousands(integral, options.thousands_separator_symbol)
    else:
        text = integral

    if fractional:
        text += options.decimal_separator_symbol + fractional
    elif options.use_scientific_notation and integral != "0":
        scientific = to_scientific(integral, options.decimal_separator_symbol)
        if len(scientific) < len(text):
            text = scientific

    is_zero = integral == "0" and not fractional.strip("0")
    return f"-{text}" if negative and not is_zero else text
