"""
Unit tests for the building blocks behind the converter.

Each component is tested in isolation: models, lexicon, extractor, Latin
root resolver, tokenizer, formatting and configuration.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from numero.config import load_options
from numero.exceptions import (
    CapacityError,
    GrammarError,
    InvalidRootError,
    MalformedInputError,
    NamingSystemMismatchError,
)
from numero.extractor import extract
from numero.formatting import format_number, group_thousands, to_scientific
from numero.latin import (
    resolve_factor,
    scale_word_for_factor,
    scale_word_for_place,
    shift_for_scale_word,
    split_scale_suffix,
)
from numero.lexicon import VALUE_TO_WORD, WORD_TO_VALUE
from numero.models import ConversionOptions, Group, NamingSystem, NumberParts, TermKind
from numero.numeral_generator import group_words
from numero.tokenizer import (
    classify_additive,
    classify_multiplicative,
    merge_fragments,
    split_tokens,
)

SHORT = NamingSystem.SHORT_SCALE
LONG = NamingSystem.LONG_SCALE


# ═══════════════════════════════════════════════════════════════════════
# MODELS
# ═══════════════════════════════════════════════════════════════════════


class TestConversionOptions:
    def test_defaults(self):
        options = ConversionOptions()
        assert options.naming_system == SHORT
        assert options.thousands_separator_symbol == ","
        assert options.decimal_separator_symbol == "."
        assert options.use_thousands_separators is True
        assert options.force_leading_zero is True
        assert options.use_scientific_notation is False

    @pytest.mark.parametrize("alias", ["long-scale", "long", "ls", "LS", "long_scale"])
    def test_long_scale_aliases(self, alias):
        assert ConversionOptions(naming_system=alias).naming_system == LONG

    @pytest.mark.parametrize("alias", ["short-scale", "short", "ss", "SS"])
    def test_short_scale_aliases(self, alias):
        assert ConversionOptions(naming_system=alias).naming_system == SHORT

    def test_unknown_naming_system(self):
        with pytest.raises(ValidationError, match="not a valid number naming system"):
            ConversionOptions(naming_system="medium")

    def test_equal_separators_rejected(self):
        with pytest.raises(ValidationError, match="have to be different"):
            ConversionOptions(thousands_separator_symbol=".", decimal_separator_symbol=".")

    @pytest.mark.parametrize("symbol", ["", "ab", "5", "-", "e", " "])
    def test_bad_separator_symbol(self, symbol):
        with pytest.raises(ValidationError):
            ConversionOptions(thousands_separator_symbol=symbol)

    def test_frozen(self):
        options = ConversionOptions()
        with pytest.raises(ValidationError):
            options.force_leading_zero = False


class TestNumberParts:
    def test_needs_some_digits(self):
        with pytest.raises(ValidationError):
            NumberParts(integral_digits="", fractional_digits="")

    def test_digits_only(self):
        with pytest.raises(ValidationError):
            NumberParts(integral_digits="12a")

    def test_is_zero(self):
        assert NumberParts(integral_digits="0", fractional_digits="000").is_zero
        assert not NumberParts(integral_digits="", fractional_digits="01").is_zero


# ═══════════════════════════════════════════════════════════════════════
# LEXICON
# ═══════════════════════════════════════════════════════════════════════


class TestLexicon:
    def test_directions_agree(self):
        for value, word in VALUE_TO_WORD.items():
            assert WORD_TO_VALUE[word] == value

    def test_alternate_spelling_is_input_only(self):
        assert WORD_TO_VALUE["fourty"] == 40
        assert VALUE_TO_WORD[40] == "forty"

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            VALUE_TO_WORD[100] = "hundred"  # type: ignore[index]


# ═══════════════════════════════════════════════════════════════════════
# EXTRACTOR
# ═══════════════════════════════════════════════════════════════════════


class TestExtractor:
    def test_full_example(self):
        parts = extract("-1,234.56e3", ConversionOptions())
        assert parts == NumberParts(negative=True, integral_digits="1234560")

    def test_separators_stripped(self):
        assert extract("1,000,000", ConversionOptions()).integral_digits == "1000000"

    def test_leading_zeros_stripped(self):
        assert extract("007", ConversionOptions()).integral_digits == "7"

    def test_plain_zero(self):
        assert extract("0", ConversionOptions()).integral_digits == "0"

    def test_leading_zero_policy(self):
        forced = extract("0.0625", ConversionOptions())
        assert (forced.integral_digits, forced.fractional_digits) == ("0", "0625")
        bare = extract("0.0625", ConversionOptions(force_leading_zero=False))
        assert (bare.integral_digits, bare.fractional_digits) == ("", "0625")

    def test_negative_exponent_pads_fraction(self):
        parts = extract("1e-3", ConversionOptions(force_leading_zero=False))
        assert (parts.integral_digits, parts.fractional_digits) == ("", "001")

    def test_exponent_pads_integral(self):
        parts = extract("1.23e6", ConversionOptions())
        assert (parts.integral_digits, parts.fractional_digits) == ("1230000", "")

    def test_exponent_inside_fraction(self):
        parts = extract("1.2345E+2", ConversionOptions())
        assert (parts.integral_digits, parts.fractional_digits) == ("123", "45")

    def test_exponent_keeps_written_trailing_zeros(self):
        parts = extract("1.50e0", ConversionOptions())
        assert (parts.integral_digits, parts.fractional_digits) == ("1", "50")

    def test_surrounding_whitespace(self):
        assert extract("  42 ", ConversionOptions()).integral_digits == "42"

    @pytest.mark.parametrize("text", ["1,00,000", "1,000,00", "-", "1-e3", "1..5", "abc"])
    def test_not_a_number(self, text):
        assert extract(text, ConversionOptions()) is None

    def test_exponent_out_of_range(self):
        with pytest.raises(CapacityError):
            extract("1e1001", ConversionOptions())


# ═══════════════════════════════════════════════════════════════════════
# LATIN ROOT RESOLVER
# ═══════════════════════════════════════════════════════════════════════


class TestLatinRoots:
    def test_split_suffix(self):
        assert split_scale_suffix("trevigintillion") == ("trevigint", "illion")
        assert split_scale_suffix("milliard") == ("m", "illiard")
        assert split_scale_suffix("thousand") is None

    @pytest.mark.parametrize(
        "root, factor",
        [("m", 1), ("dec", 10), ("undec", 11), ("sexdec", 16), ("trevigint", 23),
         ("septenvigint", 27), ("octooctogint", 88), ("novemnonagint", 99), ("cent", 100)],
    )
    def test_resolve_factor(self, root, factor):
        assert resolve_factor(root) == factor

    @pytest.mark.parametrize("root", ["gaz", "", "un", "unb", "treb", "trem"])
    def test_invalid_root(self, root):
        with pytest.raises(InvalidRootError):
            resolve_factor(root)

    def test_beyond_centillion(self):
        with pytest.raises(CapacityError):
            resolve_factor("uncent")

    @pytest.mark.parametrize(
        "word, naming_system, shift",
        [
            ("million", SHORT, 6),
            ("billion", SHORT, 9),
            ("trevigintillion", SHORT, 72),
            ("centillion", SHORT, 303),
            ("million", LONG, 6),
            ("milliard", LONG, 9),
            ("billion", LONG, 12),
            ("billiard", LONG, 15),
            ("trevigintillion", LONG, 138),
            ("centilliard", LONG, 603),
        ],
    )
    def test_shift_for_scale_word(self, word, naming_system, shift):
        assert shift_for_scale_word(word, naming_system) == shift

    def test_illiard_needs_long_scale(self):
        with pytest.raises(NamingSystemMismatchError):
            shift_for_scale_word("milliard", SHORT)

    def test_not_a_scale_word(self):
        with pytest.raises(InvalidRootError):
            shift_for_scale_word("thousand", SHORT)

    @pytest.mark.parametrize(
        "factor, remainder, naming_system, word",
        [
            (1, 0, SHORT, "million"),
            (10, 0, SHORT, "decillion"),
            (15, 0, SHORT, "quindecillion"),
            (23, 0, SHORT, "trevigintillion"),
            (78, 0, SHORT, "octoseptuagintillion"),
            (1, 3, LONG, "milliard"),
            (100, 3, LONG, "centilliard"),
        ],
    )
    def test_scale_word_for_factor(self, factor, remainder, naming_system, word):
        assert scale_word_for_factor(factor, remainder, naming_system) == word

    def test_factor_beyond_ceiling(self):
        with pytest.raises(CapacityError):
            scale_word_for_factor(101, 0, SHORT)

    def test_illiard_word_in_short_scale(self):
        with pytest.raises(NamingSystemMismatchError):
            scale_word_for_factor(1, 3, SHORT)

    @pytest.mark.parametrize("factor", range(1, 101))
    def test_every_factor_resolves_back(self, factor):
        word = scale_word_for_factor(factor, 0, SHORT)
        assert shift_for_scale_word(word, SHORT) == 3 * factor + 3

    @pytest.mark.parametrize(
        "place, naming_system, word",
        [(3, SHORT, "thousand"), (3, LONG, "thousand"), (6, SHORT, "million"),
         (9, SHORT, "billion"), (9, LONG, "milliard"), (12, LONG, "billion")],
    )
    def test_scale_word_for_place(self, place, naming_system, word):
        assert scale_word_for_place(place, naming_system) == word


# ═══════════════════════════════════════════════════════════════════════
# TOKENIZER
# ═══════════════════════════════════════════════════════════════════════


class TestTokenizer:
    def test_splits_on_spaces_and_hyphens(self):
        assert [t.text for t in split_tokens("Twenty-One  thousand")] == ["twenty", "one", "thousand"]

    def test_empty(self):
        assert split_tokens("   ") == []

    def test_split_tokens_remember_hyphens(self):
        tokens = split_tokens("forty-two  thousand")
        assert [t.text for t in tokens] == ["forty", "two", "thousand"]
        assert [t.hyphenated for t in tokens] == [False, True, False]

    def test_group_keeps_spelling(self):
        group = Group()
        for token in split_tokens("forty-two thousand"):
            group.add(token.text, token.hyphenated)
        assert group.numeral == "forty-two thousand"
        assert group.terms == ["forty", "two", "thousand"]

    def test_additive_word(self):
        outcome = classify_additive("fourteen")
        assert outcome.ok
        assert outcome.term.kind == TermKind.ADDITIVE
        assert outcome.term.value == 14

    def test_additive_literal(self):
        assert classify_additive("999").term.value == 999
        assert not classify_additive("1000").ok

    def test_additive_failure_carries_error(self):
        outcome = classify_additive("hundred")
        assert not outcome.ok
        assert isinstance(outcome.error, MalformedInputError)

    @pytest.mark.parametrize("word, shift", [("hundred", 2), ("thousand", 3), ("myriad", 4)])
    def test_fixed_multiplicative(self, word, shift):
        outcome = classify_multiplicative(word, SHORT)
        assert outcome.term.kind == TermKind.MULTIPLICATIVE
        assert outcome.term.shift == shift

    def test_scale_word(self):
        outcome = classify_multiplicative("quadrillion", SHORT)
        assert outcome.term.kind == TermKind.SCALE
        assert outcome.term.shift == 15

    def test_unknown_root_is_a_failed_outcome(self):
        outcome = classify_multiplicative("gazillion", SHORT)
        assert not outcome.ok
        assert isinstance(outcome.error, InvalidRootError)

    def test_additive_is_not_multiplicative(self):
        assert not classify_multiplicative("seven", SHORT).ok

    def test_capacity_error_propagates(self):
        with pytest.raises(CapacityError):
            classify_multiplicative("uncentillion", SHORT)

    def test_merge_fills_gaps(self):
        assert merge_fragments("700", "4") == "704"
        assert merge_fragments("1900", "18") == "1918"
        assert merge_fragments("", "5") == "5"

    def test_merge_overlap(self):
        with pytest.raises(GrammarError, match="overlap"):
            merge_fragments("17", "4", "seventeen four")


# ═══════════════════════════════════════════════════════════════════════
# GENERATOR GROUPS
# ═══════════════════════════════════════════════════════════════════════


class TestGroupWords:
    @pytest.mark.parametrize(
        "group, words",
        [
            ("000", []),
            ("007", ["seven"]),
            ("010", ["ten"]),
            ("015", ["fifteen"]),
            ("040", ["forty"]),
            ("042", ["forty-two"]),
            ("100", ["one", "hundred"]),
            ("234", ["two", "hundred", "thirty-four"]),
            ("911", ["nine", "hundred", "eleven"]),
        ],
    )
    def test_group_words(self, group, words):
        assert group_words(group) == words


# ═══════════════════════════════════════════════════════════════════════
# FORMATTING
# ═══════════════════════════════════════════════════════════════════════


class TestFormatting:
    @pytest.mark.parametrize(
        "digits, grouped",
        [("1", "1"), ("123", "123"), ("1234", "1,234"), ("1234567", "1,234,567")],
    )
    def test_group_thousands(self, digits, grouped):
        assert group_thousands(digits, ",") == grouped

    def test_scientific(self):
        assert to_scientific("1230000", ".") == "1.23e6"
        assert to_scientific("2000000000", ".") == "2e9"
        assert to_scientific("1500", ",") == "1,5e3"

    def test_format_number(self):
        options = ConversionOptions()
        assert format_number(True, "0012083056", "", options) == "-12,083,056"
        assert format_number(False, "", "0625", options) == "0.0625"
        assert format_number(True, "0", "", options) == "0"


# ═══════════════════════════════════════════════════════════════════════
# CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════


class TestConfig:
    def test_empty_environment_gives_defaults(self):
        assert load_options({}) == ConversionOptions()

    def test_reads_environment(self):
        options = load_options({
            "NUMERO_NAMING_SYSTEM": "long-scale",
            "NUMERO_USE_THOUSANDS_SEPARATORS": "false",
            "NUMERO_FORCE_LEADING_ZERO": "0",
            "NUMERO_USE_SCIENTIFIC_NOTATION": "yes",
        })
        assert options.naming_system == LONG
        assert options.use_thousands_separators is False
        assert options.force_leading_zero is False
        assert options.use_scientific_notation is True

    def test_dot_thousands_implies_comma_decimal(self):
        options = load_options({"NUMERO_THOUSANDS_SEPARATOR": "."})
        assert options.decimal_separator_symbol == ","

    def test_overrides_win(self):
        options = load_options({"NUMERO_NAMING_SYSTEM": "long"}, naming_system="short")
        assert options.naming_system == SHORT

    def test_none_override_falls_through(self):
        options = load_options({"NUMERO_NAMING_SYSTEM": "long"}, naming_system=None)
        assert options.naming_system == LONG

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("NUMERO_NAMING_SYSTEM", "ls")
        assert load_options().naming_system == LONG

    def test_invalid_value(self):
        with pytest.raises(ValidationError):
            load_options({"NUMERO_DECIMAL_SEPARATOR": ","})
