"""
Word tables for English numerals and Latin scale words.

Every table is written once as a list of (value, word) pairs and turned into
two read-only dicts, one per direction, so the two lookups can never drift
apart. Nothing here is mutated after import.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType


def _bidirectional(
    pairs: tuple[tuple[int, str], ...],
) -> tuple[Mapping[int, str], Mapping[str, int]]:
    """Build value→word and word→value views from a single source list."""
    forward = {value: word for value, word in pairs}
    backward = {word: value for value, word in pairs}
    if len(forward) != len(pairs) or len(backward) != len(pairs):
        raise ValueError("Lexicon source list contains duplicate entries")
    return MappingProxyType(forward), MappingProxyType(backward)


# ─── Base Words ──────────────────────────────────────────────────────

_BASE_WORDS: tuple[tuple[int, str], ...] = (
    (0, "zero"),
    (1, "one"),
    (2, "two"),
    (3, "three"),
    (4, "four"),
    (5, "five"),
    (6, "six"),
    (7, "seven"),
    (8, "eight"),
    (9, "nine"),
    (10, "ten"),
    (11, "eleven"),
    (12, "twelve"),
    (13, "thirteen"),
    (14, "fourteen"),
    (15, "fifteen"),
    (16, "sixteen"),
    (17, "seventeen"),
    (18, "eighteen"),
    (19, "nineteen"),
    (20, "twenty"),
    (30, "thirty"),
    (40, "forty"),
    (50, "fifty"),
    (60, "sixty"),
    (70, "seventy"),
    (80, "eighty"),
    (90, "ninety"),
)

VALUE_TO_WORD, _WORD_TO_VALUE = _bidirectional(_BASE_WORDS)

# Accepted on input only; never generated.
_ALTERNATE_SPELLINGS: dict[str, int] = {
    "fourty": 40,
}

WORD_TO_VALUE: Mapping[str, int] = MappingProxyType(
    {**_WORD_TO_VALUE, **_ALTERNATE_SPELLINGS}
)


# ─── Latin Prefixes ──────────────────────────────────────────────────
# Combined with a tens root: "tre" + "vigint" + "illion" = 23-illion.

_PREFIXES: tuple[tuple[int, str], ...] = (
    (1, "un"),
    (2, "duo"),
    (3, "tre"),
    (4, "quattuor"),
    (5, "quin"),
    (6, "sex"),
    (7, "septen"),
    (8, "octo"),
    (9, "novem"),
)

VALUE_TO_PREFIX, PREFIX_TO_VALUE = _bidirectional(_PREFIXES)

# Longest first so "septen" wins over any shorter prefix sharing its start
PREFIXES_BY_LENGTH: tuple[str, ...] = tuple(
    sorted(PREFIX_TO_VALUE, key=len, reverse=True)
)


# ─── Latin Roots ─────────────────────────────────────────────────────
# Stored without the "-illion" / "-illiard" suffix.

_ROOTS: tuple[tuple[int, str], ...] = (
    (1, "m"),
    (2, "b"),
    (3, "tr"),
    (4, "quadr"),
    (5, "quint"),
    (6, "sext"),
    (7, "sept"),
    (8, "oct"),
    (9, "non"),
    (10, "dec"),
    (20, "vigint"),
    (30, "trigint"),
    (40, "quadragint"),
    (50, "quinquagint"),
    (60, "sexagint"),
    (70, "septuagint"),
    (80, "octogint"),
    (90, "nonagint"),
    (100, "cent"),
)

FACTOR_TO_ROOT, ROOT_TO_FACTOR = _bidirectional(_ROOTS)

MAX_FACTOR = 100  # centillion

ILLION = "illion"
ILLIARD = "illiard"


# ─── Fixed Scale Words ───────────────────────────────────────────────
# word -> power of ten

_FIXED_SCALES: tuple[tuple[int, str], ...] = (
    (2, "hundred"),
    (3, "thousand"),
    (4, "myriad"),
)

SHIFT_TO_SCALE, SCALE_TO_SHIFT = _bidirectional(_FIXED_SCALES)


# ─── Structural Words ────────────────────────────────────────────────

SIGN_WORDS: frozenset[str] = frozenset({"negative", "minus"})
NEGATIVE_WORD = "negative"
INDEFINITE_ARTICLE = "a"
POINT_WORD = "point"
FILLER_WORDS: frozenset[str] = frozenset({"and"})
