"""
Domain models and value objects.

Contains the NumeralSystem model and the standard alphabets.
"""

from src.core.domain.alphabets import (
    BASE2,
    BASE8,
    BASE10,
    BASE16,
    BASE36,
    BASE57,
    BASE58,
    BASE62,
    STANDARD_ALPHABETS,
    standard_system,
)
from src.core.domain.numeral_system import MIN_BASE, NumeralSystem
from src.core.errors import InvalidAlphabet, NumeralSystemError, Overflow, UnknownDigit

__all__ = [
    # NumeralSystem model
    "NumeralSystem",
    "MIN_BASE",
    # Errors
    "NumeralSystemError",
    "InvalidAlphabet",
    "UnknownDigit",
    "Overflow",
    # Standard alphabets
    "BASE2",
    "BASE8",
    "BASE10",
    "BASE16",
    "BASE36",
    "BASE57",
    "BASE58",
    "BASE62",
    "STANDARD_ALPHABETS",
    "standard_system",
]
