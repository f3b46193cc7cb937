"""
Number → numeral conversion.

Integral digits are read right to left in groups of three. Each non-zero
group is spelled out ("two hundred thirty-four") and followed by the scale
word for its position ("thousand", "million", "milliard", ...). Fractional
digits are read one by one after "point".
"""

from __future__ import annotations

import logging

from .exceptions import MalformedInputError
from .extractor import extract
from .latin import scale_word_for_place
from .lexicon import NEGATIVE_WORD, POINT_WORD, SHIFT_TO_SCALE, VALUE_TO_WORD
from .models import ConversionOptions, NamingSystem, NumberParts

logger = logging.getLogger(__name__)


def generate_numeral(number: str, options: ConversionOptions) -> str:
    """Convert canonical number text to an English numeral.

    Args:
        number: e.g. "-1,234.5"
        options: Naming system, separators and leading-zero policy.

    Returns:
        "negative one thousand two hundred thirty-four point five"

    Raises:
        MalformedInputError: `number` is not canonical number text.
        CapacityError: The number is too large to name.
    """
    parts = extract(number, options)
    if parts is None:
        raise MalformedInputError(
            f"{number!r} is not a valid number", {"number": number}
        )
    return numeral_for_parts(parts, options.naming_system)


def numeral_for_parts(parts: NumberParts, naming_system: NamingSystem) -> str:
    words: list[str] = []

    if parts.negative and not parts.is_zero:
        words.append(NEGATIVE_WORD)

    if parts.integral_digits.strip("0"):
        words.extend(integral_words(parts.integral_digits, naming_system))
    elif parts.integral_digits:
        words.append(VALUE_TO_WORD[0])

    if parts.fractional_digits:
        words.append(POINT_WORD)
        words.extend(VALUE_TO_WORD[int(d)] for d in parts.fractional_digits)

    return " ".join(words)


def integral_words(digits: str, naming_system: NamingSystem) -> list[str]:
    """Spell out a non-zero integer digit string, most significant group first."""
    digits = digits.lstrip("0")
    chunks: list[list[str]] = []

    for place in range(0, len(digits), 3):
        end = len(digits) - place
        group = digits[max(0, end - 3) : end].rjust(3, "0")
        words = group_words(group)
        if not words:
            continue
        if place >= 3:
            words.append(scale_word_for_place(place, naming_system))
        logger.debug("group %s at 10^%d: %s", group, place, " ".join(words))
        chunks.append(words)

    return [word for chunk in reversed(chunks) for word in chunk]


def group_words(group: str) -> list[str]:
    """Spell out a three-digit group; "000" gives no words.

    >>> group_words("234")
    ['two', 'hundred', 'thirty-four']
    """
    hundreds, rest = int(group[0]), int(group[1:])
    words: list[str] = []

    if hundreds:
        words += [VALUE_TO_WORD[hundreds], SHIFT_TO_SCALE[2]]

    if rest in VALUE_TO_WORD and rest:
        words.append(VALUE_TO_WORD[rest])
    elif rest:
        tens, ones = rest - rest % 10, rest % 10
        words.append(f"{VALUE_TO_WORD[tens]}-{VALUE_TO_WORD[ones]}")

    return words
