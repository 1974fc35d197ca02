"""
Core math modules для систем счисления

Беззнаковые ширины и позиционная арифметика с проверкой переполнения.
"""

# Unsigned widths
from src.core.math.uint_widths import (
    DEFAULT_WIDTH,
    USIZE_BITS,
    UIntWidth,
    fits,
    validate_unsigned,
)

# Positional arithmetic
from src.core.math.positional import (
    accumulate_digit,
    from_digit_indices,
    to_digit_indices,
)

__all__ = [
    # Unsigned widths — Constants
    "DEFAULT_WIDTH",
    "USIZE_BITS",
    # Unsigned widths — Types
    "UIntWidth",
    # Unsigned widths — Validation
    "fits",
    "validate_unsigned",
    # Positional arithmetic
    "accumulate_digit",
    "from_digit_indices",
    "to_digit_indices",
]
