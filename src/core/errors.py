"""
Numeral System Errors — таксономия ошибок конверсии

Все ошибки библиотеки наследуются от NumeralSystemError (ValueError),
поэтому вызывающий код может ловить их единым except.

- InvalidAlphabet: некорректный алфавит при создании системы счисления
- UnknownDigit: символ не из алфавита при decode
- Overflow: значение не помещается в целевую беззнаковую ширину

Ошибки детерминированы: одинаковый вход всегда даёт одинаковую ошибку.
Частичные результаты никогда не возвращаются.
"""

from typing import Optional


class NumeralSystemError(ValueError):
    """Базовая ошибка библиотеки систем счисления."""


class InvalidAlphabet(NumeralSystemError):
    """
    Алфавит не может задать систему счисления.

    Причины:
    1. Меньше 2 символов (base 0/1 не имеет позиционного смысла)
    2. Повторяющийся символ
    3. Элемент последовательности не является одиночным символом
    4. Base не помещается в целевую ширину
    """


class UnknownDigit(NumeralSystemError):
    """
    Символ отсутствует в алфавите системы счисления.

    Attributes:
        char: Неизвестный символ
        position: Позиция символа во входной строке (0-based)
    """

    def __init__(self, char: str, position: int) -> None:
        self.char = char
        self.position = position
        super().__init__(f"Encountered char {char!r} not in base at position {position}")


class Overflow(NumeralSystemError):
    """
    Значение превышает диапазон целевой беззнаковой ширины.

    Attributes:
        width: Имя ширины (например, 'u8')
        position: Позиция цифры, на которой произошло переполнение (None для encode)
    """

    def __init__(self, message: str, width: str, position: Optional[int] = None) -> None:
        self.width = width
        self.position = position
        super().__init__(message)
