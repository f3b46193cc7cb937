"""
Converter facade — the public entry points.

    is_number(text, options)     Is this canonical number text?
    is_numeral(text)             Does this look like numeral text?
    to_number(numeral, options)  "twelve thousand" → "12,000"
    to_numeral(number, options)  "12,000" → "twelve thousand"
    convert(text, options)       Whichever direction applies

Every function takes its options explicitly (defaults when omitted) and
touches no shared mutable state, so they can be called from any number of
threads at once.
"""

from __future__ import annotations

import logging
import re

from .exceptions import CapacityError
from .extractor import extract
from .models import ConversionOptions
from .numeral_generator import generate_numeral
from .numeral_parser import parse_numeral

logger = logging.getLogger(__name__)

_NUMERAL_PATTERN = re.compile(r"(?:[a-z]+|[0-9]+)(?:[ \-]+(?:[a-z]+|[0-9]+))*")

_DEFAULT_OPTIONS = ConversionOptions()


def is_number(text: str, options: ConversionOptions | None = None) -> bool:
    """True iff `text` is canonical number text under `options`."""
    try:
        return extract(text, options or _DEFAULT_OPTIONS) is not None
    except CapacityError:
        # Well formed, only too large to expand
        return True


def is_numeral(text: str) -> bool:
    """Cheap lexical pre-filter: space/hyphen-joined words or digit runs.

    Full grammar checks only happen in to_number().
    """
    return _NUMERAL_PATTERN.fullmatch(text.strip().lower()) is not None


def to_number(numeral: str, options: ConversionOptions | None = None) -> str:
    """Convert an English numeral to canonical number text.

    Raises:
        NumeroError: See numero.exceptions for the specific categories.
    """
    logger.debug("to_number(%r)", numeral)
    return parse_numeral(numeral, options or _DEFAULT_OPTIONS)


def to_numeral(number: str, options: ConversionOptions | None = None) -> str:
    """Convert canonical number text to an English numeral.

    Raises:
        MalformedInputError: `number` is not canonical number text.
        CapacityError: `number` is too large to name.
    """
    logger.debug("to_numeral(%r)", number)
    return generate_numeral(number, options or _DEFAULT_OPTIONS)


def convert(text: str, options: ConversionOptions | None = None) -> str:
    """Convert in whichever direction `text` calls for."""
    options = options or _DEFAULT_OPTIONS
    if is_number(text, options):
        return to_numeral(text, options)
    return to_number(text, options)


class NumeralConverter:
    """Binds one set of options to the conversion functions.

    Usage:
        converter = NumeralConverter(ConversionOptions(naming_system="long_scale"))
        converter.to_numeral("1,000,000,000")   # "one milliard"
    """

    def __init__(self, options: ConversionOptions | None = None):
        self.options = options or _DEFAULT_OPTIONS

    def is_number(self, text: str) -> bool:
        return is_number(text, self.options)

    def is_numeral(self, text: str) -> bool:
        return is_numeral(text)

    def to_number(self, numeral: str) -> str:
        return to_number(numeral, self.options)

    def to_numeral(self, number: str) -> str:
        return to_numeral(number, self.options)

    def convert(self, text: str) -> str:
        return convert(text, self.options)
