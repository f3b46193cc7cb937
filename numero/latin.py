"""
Latin root resolution for "-illion" and "-illiard" scale words.

A scale word is a Latin factor plus a suffix. The factor is either a single
root from the table ("quadr" → 4, "vigint" → 20) or a prefix glued to a tens
root ("tre" + "vigint" → 23). The factor turns into a power of ten:

    short scale:  -illion  → 10^(3·f + 3)
    long scale:   -illion  → 10^(6·f)
                  -illiard → 10^(6·f + 3)

The largest supported factor is 100 (centillion).
"""

from __future__ import annotations

from .exceptions import CapacityError, InvalidRootError, NamingSystemMismatchError
from .lexicon import (
    FACTOR_TO_ROOT,
    ILLIARD,
    ILLION,
    MAX_FACTOR,
    PREFIX_TO_VALUE,
    PREFIXES_BY_LENGTH,
    ROOT_TO_FACTOR,
    SHIFT_TO_SCALE,
    VALUE_TO_PREFIX,
)
from .models import NamingSystem


# ─── Word → Magnitude ────────────────────────────────────────────────


def split_scale_suffix(word: str) -> tuple[str, str] | None:
    """Split "trevigintillion" into ("trevigint", "illion").

    Returns None if the word carries neither suffix.
    """
    for suffix in (ILLIARD, ILLION):
        if word.endswith(suffix):
            return word[: -len(suffix)], suffix
    return None


def resolve_factor(root: str) -> int:
    """Turn a Latin root (suffix already removed) into its factor.

    Raises:
        InvalidRootError: The root is not a known root or prefix + tens root.
        CapacityError: The root is well formed but names a factor above 100.
    """
    if root in ROOT_TO_FACTOR:
        return ROOT_TO_FACTOR[root]

    prefix = next((p for p in PREFIXES_BY_LENGTH if root.startswith(p)), None)
    if prefix is None:
        raise InvalidRootError(
            f"{root!r} is not a valid root prefix term", {"root": root}
        )

    base = root[len(prefix):]
    base_factor = ROOT_TO_FACTOR.get(base)
    # Prefixes only combine with tens roots: "unbillion" is not a word
    if base_factor is None or base_factor % 10:
        raise InvalidRootError(
            f"{base!r} is not a valid root term", {"root": root, "prefix": prefix}
        )

    factor = base_factor + PREFIX_TO_VALUE[prefix]
    if factor > MAX_FACTOR:
        raise CapacityError(
            f"{root!r} names factor {factor}; nothing beyond centillion "
            f"(factor {MAX_FACTOR}) is supported",
            {"root": root, "factor": factor},
        )
    return factor


def shift_for_scale_word(word: str, naming_system: NamingSystem) -> int:
    """Return the power of ten named by an "-illion"/"-illiard" word.

    Examples:
        >>> shift_for_scale_word("billion", NamingSystem.SHORT_SCALE)
        9
        >>> shift_for_scale_word("milliard", NamingSystem.LONG_SCALE)
        9

    Raises:
        InvalidRootError: The word has no scale suffix or an unknown root.
        NamingSystemMismatchError: "-illiard" used with the short scale.
        CapacityError: The factor exceeds centillion.
    """
    parts = split_scale_suffix(word)
    if parts is None:
        raise InvalidRootError(f"{word!r} is not a scale word", {"term": word})
    root, suffix = parts

    if suffix == ILLIARD and naming_system != NamingSystem.LONG_SCALE:
        raise NamingSystemMismatchError(
            f"{word!r} is only valid in the long scale naming system",
            {"term": word, "naming_system": naming_system.value},
        )

    factor = resolve_factor(root)

    if naming_system == NamingSystem.SHORT_SCALE:
        return 3 * factor + 3
    return 6 * factor + (3 if suffix == ILLIARD else 0)


# ─── Factor → Word ───────────────────────────────────────────────────


def scale_word_for_factor(
    factor: int, remainder: int, naming_system: NamingSystem
) -> str:
    """Compose the scale word for a factor.

    Args:
        factor: Latin factor, 1–100.
        remainder: 0 for "-illion", 3 for "-illiard" (long scale only).
        naming_system: The naming system the word is meant for.
    """
    if factor > MAX_FACTOR:
        raise CapacityError(
            f"Factor {factor} is beyond centillion (factor {MAX_FACTOR})",
            {"factor": factor},
        )
    if factor < 1:
        raise ValueError(f"Latin factors start at 1, got {factor}")
    if remainder not in (0, 3):
        raise ValueError(f"Scale remainder must be 0 or 3, got {remainder}")
    if remainder and naming_system != NamingSystem.LONG_SCALE:
        raise NamingSystemMismatchError(
            "-illiard words only exist in the long scale naming system",
            {"factor": factor, "naming_system": naming_system.value},
        )

    if factor in FACTOR_TO_ROOT:
        root = FACTOR_TO_ROOT[factor]
    else:
        ones, tens = factor % 10, factor - factor % 10
        root = VALUE_TO_PREFIX[ones] + FACTOR_TO_ROOT[tens]

    return root + (ILLIARD if remainder else ILLION)


def scale_word_for_place(place: int, naming_system: NamingSystem) -> str:
    """Scale word for the digit group starting at 10^place (place % 3 == 0)."""
    if place == 3:
        return SHIFT_TO_SCALE[3]

    if naming_system == NamingSystem.SHORT_SCALE:
        return scale_word_for_factor((place - 3) // 3, 0, naming_system)
    return scale_word_for_factor(place // 6, place % 6, naming_system)
