"""
Unsigned Widths — беззнаковые целочисленные ширины

Python int не ограничен по размеру, поэтому диапазон целевого типа
задаётся явно через UIntWidth. Все операции конверсии проверяют значение
против max_value выбранной ширины.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Допустимый диапазон ширины: [0, 2**bits - 1]
2. usize соответствует ширине указателя платформы
3. Отрицательные значения не поддерживаются
"""

import struct
from enum import Enum
from typing import Final

from src.core.errors import Overflow

# =============================================================================
# ПАРАМЕТРЫ ПЛАТФОРМЫ
# =============================================================================

# Ширина указателя платформы в битах (64 на 64-bit хостах)
USIZE_BITS: Final[int] = struct.calcsize("P") * 8


# =============================================================================
# ENUMS
# =============================================================================


class UIntWidth(str, Enum):
    """Беззнаковая целочисленная ширина"""

    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    USIZE = "usize"

    @property
    def bits(self) -> int:
        """Количество бит в ширине."""
        if self is UIntWidth.USIZE:
            return USIZE_BITS
        return int(self.value[1:])

    @property
    def max_value(self) -> int:
        """Максимальное представимое значение: 2**bits - 1."""
        return (1 << self.bits) - 1


# Ширина по умолчанию для систем счисления
DEFAULT_WIDTH: Final[UIntWidth] = UIntWidth.USIZE


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def fits(value: int, width: UIntWidth) -> bool:
    """
    Проверка, что значение помещается в ширину.

    Args:
        value: Проверяемое значение
        width: Целевая ширина

    Returns:
        True если 0 <= value <= width.max_value
    """
    return 0 <= value <= width.max_value


def validate_unsigned(value: int, width: UIntWidth) -> None:
    """
    Проверка, что value является допустимым беззнаковым значением ширины.

    Args:
        value: Проверяемое значение
        width: Целевая ширина

    Raises:
        TypeError: Если value не int (bool также отклоняется)
        ValueError: Если value отрицательное
        Overflow: Если value > width.max_value
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Value must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"Value must be non-negative, got {value}")

    if value > width.max_value:
        raise Overflow(
            f"Value {value} exceeds {width.value} maximum {width.max_value}",
            width=width.value,
        )
