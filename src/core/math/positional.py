"""
Positional — позиционная арифметика систем счисления

Чистые функции без знания об алфавите: работают только с индексами цифр.

ФОРМУЛЫ:
    value = Σ digit_k × base^k   (k — позиция справа, с нуля)

    encode: повторное divmod(value, base), остатки — цифры от младшей к старшей
    decode: acc = acc × base + digit, слева направо (от старшей к младшей)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ноль представлен ровно одной цифрой [0], никогда пустым списком
2. Переполнение проверяется на каждом шаге multiply-add, а не только в конце
3. Все операции детерминированы и не имеют side effects
"""

from typing import Iterable, Optional

from src.core.errors import Overflow
from src.core.math.uint_widths import UIntWidth

# =============================================================================
# INTEGER → DIGIT INDICES
# =============================================================================


def to_digit_indices(value: int, base: int) -> list[int]:
    """
    Разложение значения на индексы цифр в системе с основанием base.

    Args:
        value: Неотрицательное целое
        base: Основание (>= 2)

    Returns:
        Индексы цифр от старшей к младшей; [0] для value == 0

    Raises:
        ValueError: Если value < 0 или base < 2

    Examples:
        >>> to_digit_indices(5, 2)
        [1, 0, 1]
        >>> to_digit_indices(0, 16)
        [0]
        >>> to_digit_indices(255, 16)
        [15, 15]
    """
    if base < 2:
        raise ValueError(f"base must be >= 2, got {base}")
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")

    if value == 0:
        return [0]

    indices = []
    while value > 0:
        value, remainder = divmod(value, base)
        indices.append(remainder)

    indices.reverse()
    return indices


# =============================================================================
# DIGIT INDICES → INTEGER
# =============================================================================


def accumulate_digit(
    acc: int,
    base: int,
    digit: int,
    width: UIntWidth,
    position: Optional[int] = None,
) -> int:
    """
    Checked multiply-add: acc × base + digit в пределах ширины.

    Args:
        acc: Текущий аккумулятор (в пределах width)
        base: Основание системы
        digit: Значение очередной цифры, 0 <= digit < base
        width: Целевая ширина
        position: Позиция цифры во входе (для диагностики)

    Returns:
        Новый аккумулятор

    Raises:
        Overflow: Если результат превышает width.max_value
    """
    result = acc * base + digit

    if result > width.max_value:
        where = f" at position {position}" if position is not None else ""
        raise Overflow(
            f"Decoded value exceeds {width.value} maximum {width.max_value}{where}",
            width=width.value,
            position=position,
        )

    return result


def from_digit_indices(indices: Iterable[int], base: int, width: UIntWidth) -> int:
    """
    Сборка значения из индексов цифр (от старшей к младшей).

    Пустая последовательность даёт 0.

    Raises:
        ValueError: Если индекс вне диапазона [0, base)
        Overflow: Если значение не помещается в width
    """
    acc = 0
    for position, digit in enumerate(indices):
        if not 0 <= digit < base:
            raise ValueError(f"digit {digit} out of range for base {base} at position {position}")
        acc = accumulate_digit(acc, base, digit, width, position)
    return acc
