"""
Pydantic models for conversion data — strict typing at the boundary.

ConversionOptions and NumberParts are validated on construction: a bad
separator or a stray non-digit fails loudly here, not three modules later.
Term and Group are transient, call-local accumulators and are plain
dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, field_validator, model_validator

from .exceptions import MalformedInputError


# ─── Naming System ──────────────────────────────────────────────────


class NamingSystem(str, Enum):
    """How "-illion" words map to powers of ten."""

    SHORT_SCALE = "short_scale"  # billion = 10^9
    LONG_SCALE = "long_scale"  # billion = 10^12, milliard = 10^9


_NAMING_SYSTEM_ALIASES: dict[str, NamingSystem] = {
    "short_scale": NamingSystem.SHORT_SCALE,
    "short-scale": NamingSystem.SHORT_SCALE,
    "short": NamingSystem.SHORT_SCALE,
    "ss": NamingSystem.SHORT_SCALE,
    "long_scale": NamingSystem.LONG_SCALE,
    "long-scale": NamingSystem.LONG_SCALE,
    "long": NamingSystem.LONG_SCALE,
    "ls": NamingSystem.LONG_SCALE,
}

# Symbols that already mean something in the number grammar
_RESERVED_SYMBOLS: frozenset[str] = frozenset("0123456789-+eE")


# ─── Conversion Options ─────────────────────────────────────────────


class ConversionOptions(BaseModel):
    """Options guiding a single conversion. Immutable once built."""

    model_config = {"frozen": True}

    naming_system: NamingSystem = NamingSystem.SHORT_SCALE
    thousands_separator_symbol: str = ","
    decimal_separator_symbol: str = "."
    use_thousands_separators: bool = True
    force_leading_zero: bool = True
    use_scientific_notation: bool = False

    @field_validator("naming_system", mode="before")
    @classmethod
    def _parse_naming_system(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, NamingSystem):
            resolved = _NAMING_SYSTEM_ALIASES.get(value.strip().lower())
            if resolved is None:
                raise MalformedInputError(
                    f"{value!r} is not a valid number naming system. "
                    "Supported naming systems are 'short-scale' and 'long-scale'.",
                    {"naming_system": value},
                )
            return resolved
        return value

    @field_validator("thousands_separator_symbol", "decimal_separator_symbol")
    @classmethod
    def _check_symbol(cls, value: str) -> str:
        if len(value) != 1 or value in _RESERVED_SYMBOLS or value.isspace():
            raise MalformedInputError(
                f"Separator symbol must be a single non-digit character, got {value!r}",
                {"symbol": value},
            )
        return value

    @model_validator(mode="after")
    def _check_separators_differ(self) -> ConversionOptions:
        if self.thousands_separator_symbol == self.decimal_separator_symbol:
            raise MalformedInputError(
                "Thousands and decimal separators have to be different",
                {"symbol": self.decimal_separator_symbol},
            )
        return self


# ─── Extracted Number ───────────────────────────────────────────────


class NumberParts(BaseModel):
    """A canonical decimal number split into its parts.

    The exponent has already been resolved into the digit strings by the
    extractor, so downstream code never has to look at it.
    """

    negative: bool = False
    integral_digits: str = ""
    fractional_digits: str = ""
    exponent: int = 0

    @field_validator("integral_digits", "fractional_digits")
    @classmethod
    def _digits_only(cls, value: str) -> str:
        if value and not all("0" <= c <= "9" for c in value):
            raise MalformedInputError(f"Not a digit string: {value!r}")
        return value

    @model_validator(mode="after")
    def _not_empty(self) -> NumberParts:
        if not self.integral_digits and not self.fractional_digits:
            raise MalformedInputError("A number needs integral or fractional digits")
        return self

    @property
    def is_zero(self) -> bool:
        return not (self.integral_digits + self.fractional_digits).strip("0")


# ─── Numeral Terms ──────────────────────────────────────────────────


class TermKind(str, Enum):
    """Grammatical role of a single numeral term."""

    ADDITIVE = "additive"  # zero..ninety, 0..999 literals
    MULTIPLICATIVE = "multiplicative"  # hundred, thousand, myriad
    SCALE = "scale"  # -illion, -illiard


@dataclass
class Term:
    """One whitespace/hyphen-delimited token and what it turned out to be."""

    text: str
    kind: TermKind | None = None
    value: int | None = None  # additive value
    shift: int | None = None  # power of ten for multiplicative/scale terms


@dataclass
class Group:
    """Digits contributed between two scale-word boundaries."""

    fragment: str = ""
    magnitude: int = 0  # sum of shifts >= 3 applied so far
    last_shift: int | None = None
    terms: list[str] = field(default_factory=list)
    spelling: str = ""  # terms as written, hyphens included

    def add(self, text: str, hyphenated: bool = False) -> None:
        if self.terms:
            self.spelling += "-" if hyphenated else " "
        self.spelling += text
        self.terms.append(text)

    @property
    def numeral(self) -> str:
        return self.spelling


# ─── Batch Results ──────────────────────────────────────────────────


class Conversion(BaseModel):
    """Outcome of converting one input in a batch."""

    input: str
    input_is_number: bool
    result: str
    error: bool = False
