"""
Numeral → number conversion.

The integral part of a numeral is read left to right as a sequence of
magnitude groups:

    "seven hundred four million | eighty-three thousand | eleven"

A group is opened by an additive term that follows a scale word (thousand
or larger) and is scaled by the multiplicative terms inside it. Groups must
appear in strictly decreasing magnitude, and their digits are finally
merged place by place:

    704,000,000 + 83,000 + 11 = 704,083,011

Everything after "point" is read digit by digit.
"""

from __future__ import annotations

import logging

from .exceptions import GrammarError, MalformedInputError
from .formatting import format_number
from .lexicon import (
    FILLER_WORDS,
    INDEFINITE_ARTICLE,
    POINT_WORD,
    SCALE_TO_SHIFT,
    SIGN_WORDS,
    WORD_TO_VALUE,
)
from .models import ConversionOptions, Group
from .tokenizer import (
    Token,
    classify_additive,
    classify_multiplicative,
    merge_fragments,
    split_tokens,
)

logger = logging.getLogger(__name__)

# Shifts from here on close a group when an additive term follows
GROUP_BOUNDARY_SHIFT = 3
HUNDRED_SHIFT = SCALE_TO_SHIFT["hundred"]


def parse_numeral(numeral: str, options: ConversionOptions) -> str:
    """Convert English numeral text to canonical number text.

    Args:
        numeral: e.g. "negative twelve million eighty-three thousand fifty-six"
        options: Naming system and output formatting.

    Returns:
        "-12,083,056"

    Raises:
        MalformedInputError: Empty text or an unknown term.
        GrammarError: Valid terms combined in an invalid way.
        CapacityError / NamingSystemMismatchError: Unusable scale words.
    """
    tokens = split_tokens(numeral)

    negative = bool(tokens) and tokens[0].text in SIGN_WORDS
    if negative:
        tokens = tokens[1:]

    integral_tokens, fractional_tokens = _split_at_point(tokens, numeral)

    implicit_one = bool(integral_tokens) and integral_tokens[0].text == INDEFINITE_ARTICLE
    if implicit_one:
        integral_tokens = integral_tokens[1:]
    integral_tokens = [t for t in integral_tokens if t.text not in FILLER_WORDS]

    if not integral_tokens and (implicit_one or not fractional_tokens):
        raise MalformedInputError(
            f"Empty numeral cannot be converted to a number: {numeral!r}",
            {"numeral": numeral},
        )

    integral = _read_integral(integral_tokens, options, implicit_one) if integral_tokens else ""
    fractional = _read_fractional([t.text for t in fractional_tokens])

    return format_number(negative, integral, fractional, options)


# ─── Integral Part ───────────────────────────────────────────────────


def _read_integral(tokens: list[Token], options: ConversionOptions, implicit_one: bool) -> str:
    """Run the group state machine over the integral terms."""
    groups: list[Group] = []
    current: Group | None = None
    if implicit_one:
        current = Group(fragment="1")
        current.add(INDEFINITE_ARTICLE)
    previous_shift: int | None = None  # set only if the previous term was multiplicative
    standalone = len(tokens) == 1 and not implicit_one

    for text, hyphenated in tokens:
        additive = classify_additive(text)
        multiplicative = classify_multiplicative(text, options.naming_system)

        if not additive.ok and not multiplicative.ok:
            raise additive.error from multiplicative.error

        if additive.ok:
            value = additive.term.value
            if value == 0 and not standalone:
                raise GrammarError(
                    f'"{text}" cannot be combined with other terms; '
                    "zero is only valid as the entire integral part",
                    {"term": text},
                )
            if current is None or (previous_shift or 0) >= GROUP_BOUNDARY_SHIFT:
                if current is not None:
                    _close_group(current, groups)
                current = Group()
            current.fragment = merge_fragments(
                current.fragment, str(value), " ".join([*current.terms, text])
            )
            current.add(text, hyphenated)
            previous_shift = None
        else:
            shift = multiplicative.term.shift
            if current is None:
                current = Group(fragment="1")
            if current.last_shift is not None and shift < current.last_shift:
                raise GrammarError(
                    f'"{text}" cannot follow "{current.numeral}": multiplicative '
                    "terms within a group must not decrease in magnitude",
                    {"term": text, "group": current.numeral},
                )
            if shift == HUNDRED_SHIFT and current.last_shift is not None:
                raise GrammarError(
                    f'"{text}" cannot follow "{current.numeral}": a group takes '
                    f'at most one "{text}"',
                    {"term": text, "group": current.numeral},
                )
            current.fragment += "0" * shift
            if shift >= GROUP_BOUNDARY_SHIFT:
                current.magnitude += shift
            current.last_shift = shift
            current.add(text, hyphenated)
            previous_shift = shift

    _close_group(current, groups)

    digits = ""
    for group in groups:
        digits = merge_fragments(digits, group.fragment, " ".join(t.text for t in tokens))
    return digits.lstrip("0") or "0"


def _close_group(group: Group, groups: list[Group]) -> None:
    """Append a finished group after checking it against its predecessor."""
    if groups:
        previous = groups[-1]
        if group.magnitude == previous.magnitude:
            raise GrammarError(
                f'"{group.numeral}" repeats the magnitude already used by '
                f'"{previous.numeral}"',
                {"group": group.numeral, "previous": previous.numeral,
                 "magnitude": group.magnitude},
            )
        if group.magnitude > previous.magnitude:
            raise GrammarError(
                f'"{group.numeral}" has a higher magnitude than "{previous.numeral}" '
                f'which came before it; did you mean "{group.numeral} {previous.numeral}"?',
                {"group": group.numeral, "previous": previous.numeral,
                 "magnitude": group.magnitude},
            )

    logger.debug(
        "group %r: fragment=%s magnitude=%d",
        group.numeral, group.fragment, group.magnitude,
    )
    groups.append(group)


# ─── Fractional Part ─────────────────────────────────────────────────


def _split_at_point(tokens: list[Token], numeral: str) -> tuple[list[Token], list[Token]]:
    texts = [t.text for t in tokens]
    if POINT_WORD not in texts:
        return tokens, []
    if texts.count(POINT_WORD) > 1:
        raise MalformedInputError(
            f'"{POINT_WORD}" may only be used once: {numeral!r}', {"numeral": numeral}
        )
    index = texts.index(POINT_WORD)
    fractional = tokens[index + 1 :]
    if not fractional:
        raise MalformedInputError(
            f'"{POINT_WORD}" must be followed by at least one digit: {numeral!r}',
            {"numeral": numeral},
        )
    return tokens[:index], fractional


def _read_fractional(terms: list[str]) -> str:
    """Read "six two five" (or "6 2 5") as "625"."""
    digits: list[str] = []
    for text in terms:
        if text.isascii() and text.isdigit():
            digits.append(text)
        elif WORD_TO_VALUE.get(text, 10) < 10:
            digits.append(str(WORD_TO_VALUE[text]))
        else:
            raise MalformedInputError(
                f"{text!r} is not a valid decimal digit term", {"term": text}
            )
    return "".join(digits)
