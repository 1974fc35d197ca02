"""
Alphabets — стандартные алфавиты систем счисления

Готовые алфавиты для распространённых оснований и фабрика systems по имени.
BASE57 и BASE58 исключают визуально похожие символы (0/O, 1/l/I).
"""

from typing import Final

from src.core.domain.numeral_system import NumeralSystem
from src.core.math.uint_widths import DEFAULT_WIDTH, UIntWidth

# =============================================================================
# АЛФАВИТЫ
# =============================================================================

BASE2: Final[str] = "01"
BASE8: Final[str] = "01234567"
BASE10: Final[str] = "0123456789"
BASE16: Final[str] = "0123456789abcdef"
BASE36: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"
BASE57: Final[str] = "23456789abcdefghijkmnpqrstuvwxyzABCDEFGHIJKLMNPQRSTUVWXYZ"
BASE58: Final[str] = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BASE62: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

STANDARD_ALPHABETS: Final[dict[str, str]] = {
    "base2": BASE2,
    "base8": BASE8,
    "base10": BASE10,
    "base16": BASE16,
    "base36": BASE36,
    "base57": BASE57,
    "base58": BASE58,
    "base62": BASE62,
}


def standard_system(name: str, width: UIntWidth = DEFAULT_WIDTH) -> NumeralSystem:
    """
    Система счисления по имени стандартного алфавита.

    Args:
        name: Имя алфавита ('base16', 'base62', ...), регистр не важен
        width: Целевая ширина системы

    Returns:
        Новая NumeralSystem

    Raises:
        KeyError: Если имя неизвестно
    """
    key = name.lower()
    if key not in STANDARD_ALPHABETS:
        known = ", ".join(sorted(STANDARD_ALPHABETS))
        raise KeyError(f"Unknown standard alphabet {name!r} (known: {known})")
    return NumeralSystem(STANDARD_ALPHABETS[key], width=width)
