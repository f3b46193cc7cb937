"""
Custom exception hierarchy for numeral/number conversion.

Each exception type maps to one category of conversion failure, so callers
(the CLI, tests, embedding applications) can tell a typo from a grammar
mistake from a number that is simply too large to name.

All of them derive from ValueError: a failed conversion is always caused by
the value that was passed in.
"""

from __future__ import annotations


class NumeroError(ValueError):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class MalformedInputError(NumeroError):
    """Empty text, unknown term, irregular separators or bad options."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("MALFORMED_INPUT", message, details)


class InvalidRootError(MalformedInputError):
    """A scale word whose Latin root cannot be resolved (e.g. "gazillion")."""

    def __init__(self, message: str, details: dict | None = None):
        NumeroError.__init__(self, "INVALID_ROOT", message, details)


class CapacityError(NumeroError):
    """The magnitude lies beyond centillion (Latin factor 100)."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("CAPACITY_EXCEEDED", message, details)


class NamingSystemMismatchError(NumeroError):
    """A long scale-only word ("-illiard") was used with the short scale."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NAMING_SYSTEM_MISMATCH", message, details)


class GrammarError(NumeroError):
    """Terms are valid on their own but cannot be combined in this order."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("GRAMMAR_VIOLATION", message, details)
