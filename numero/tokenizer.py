"""
Numeral tokenizer and term classifier.

A numeral is split on whitespace and hyphens into terms. Each term is then
looked at twice, independently:

  - as an additive term   ("seven", "fourteen", "ninety", "250")
  - as a multiplicative   ("hundred", "thousand", "myriad", "quadrillion")

Both lookups return an Outcome instead of raising, so the caller can branch
on which one worked. The place-value merge that combines additive values
also lives here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from .exceptions import GrammarError, InvalidRootError, MalformedInputError, NumeroError
from .latin import shift_for_scale_word, split_scale_suffix
from .lexicon import SCALE_TO_SHIFT, WORD_TO_VALUE
from .models import NamingSystem, Term, TermKind

MAX_ADDITIVE_LITERAL = 999


# ─── Tokenizer ───────────────────────────────────────────────────────


class Token(NamedTuple):
    text: str
    hyphenated: bool  # joined to the previous term by a hyphen


def split_tokens(numeral: str) -> list[Token]:
    """Split numeral text into lowercase terms, remembering hyphen joins.

    >>> split_tokens("Twenty-One thousand")
    [Token(text='twenty', hyphenated=False), Token(text='one', hyphenated=True), Token(text='thousand', hyphenated=False)]
    """
    tokens: list[Token] = []
    for chunk in numeral.lower().split():
        parts = [part for part in chunk.split("-") if part]
        tokens.extend(Token(part, i > 0) for i, part in enumerate(parts))
    return tokens


# ─── Classification ──────────────────────────────────────────────────


@dataclass(frozen=True)
class Outcome:
    """Result of one classification attempt: a term or the reason it failed."""

    term: Term | None = None
    error: NumeroError | None = None

    @property
    def ok(self) -> bool:
        return self.term is not None


def classify_additive(text: str) -> Outcome:
    """Classify `text` as a base word or a digit literal of at most 999."""
    if text in WORD_TO_VALUE:
        return Outcome(Term(text, TermKind.ADDITIVE, value=WORD_TO_VALUE[text]))

    if text.isascii() and text.isdigit() and int(text) <= MAX_ADDITIVE_LITERAL:
        return Outcome(Term(text, TermKind.ADDITIVE, value=int(text)))

    return Outcome(
        error=MalformedInputError(
            f"{text!r} is not a valid base term", {"term": text}
        )
    )


def classify_multiplicative(text: str, naming_system: NamingSystem) -> Outcome:
    """Classify `text` as hundred/thousand/myriad or an -illion/-illiard word.

    Capacity and naming-system errors are not classification failures: the
    word was recognised, it just cannot be used. Those propagate.
    """
    if text in SCALE_TO_SHIFT:
        return Outcome(Term(text, TermKind.MULTIPLICATIVE, shift=SCALE_TO_SHIFT[text]))

    if split_scale_suffix(text) is None:
        return Outcome(
            error=MalformedInputError(
                f"{text!r} is not a multiplicative term", {"term": text}
            )
        )

    try:
        shift = shift_for_scale_word(text, naming_system)
    except InvalidRootError as e:
        return Outcome(error=e)
    return Outcome(Term(text, TermKind.SCALE, shift=shift))


# ─── Place-Value Merge ───────────────────────────────────────────────


def merge_fragments(left: str, right: str, context: str = "") -> str:
    """Merge two digit strings place by place, aligned on the last digit.

    Every place may be filled by at most one side, so "700" + "4" gives
    "704" while "17" + "4" is rejected: English never adds digits within a
    group.

    Raises:
        GrammarError: Both sides have a non-zero digit at the same place.
    """
    width = max(len(left), len(right))
    merged: list[str] = []
    for a, b in zip(left.rjust(width, "0"), right.rjust(width, "0")):
        if a != "0" and b != "0":
            raise GrammarError(
                f"Sub-numerals overlap and cannot be merged: {context or left + ' + ' + right}",
                {"left": left, "right": right, "numeral": context},
            )
        merged.append(a if a != "0" else b)
    return "".join(merged)
