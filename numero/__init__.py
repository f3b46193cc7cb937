"""
Numero — bidirectional conversion between decimal numbers and English numerals.

Architecture: Extract → Tokenize/Classify → Group & Merge (to numbers)
              Extract → Group by three → Spell & Scale (to numerals)
Supports short and long scale naming up to centillion.
"""

from .converter import (
    NumeralConverter,
    convert,
    is_number,
    is_numeral,
    to_number,
    to_numeral,
)
from .models import ConversionOptions, NamingSystem

__version__ = "1.0.0"

__all__ = [
    "ConversionOptions",
    "NamingSystem",
    "NumeralConverter",
    "convert",
    "is_number",
    "is_numeral",
    "to_number",
    "to_numeral",
]
