"""
NumeralSystem — система счисления с односимвольными цифрами

Immutable Pydantic модель: упорядоченный алфавит уникальных символов.
Значение цифры равно её позиции в алфавите (первый символ — ноль).

Операции:
- encode: целое → строка цифр
- decode: строка цифр → целое

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Алфавит содержит >= 2 символов, каждый ровно один раз
2. Base помещается в настроенную ширину (проверяется при создании)
3. encode(0) — ровно одна цифра с индексом 0
4. decode проверяет переполнение на каждом шаге, не возвращает частичных результатов
5. Пустая строка декодируется в 0
"""

import logging
from typing import Any, Final, Optional, Sequence, Union

from pydantic import (
    BaseModel,
    Field,
    PrivateAttr,
    ValidationError,
    field_validator,
    model_validator,
)

from src.core.errors import InvalidAlphabet, NumeralSystemError, UnknownDigit
from src.core.math.positional import accumulate_digit, to_digit_indices
from src.core.math.uint_widths import DEFAULT_WIDTH, UIntWidth, validate_unsigned

logger = logging.getLogger(__name__)

# Минимальный размер алфавита
MIN_BASE: Final[int] = 2


def _unwrap_numeral_error(exc: ValidationError) -> Optional[NumeralSystemError]:
    """Достаёт исходную ошибку библиотеки из контекста ValidationError."""
    for error in exc.errors():
        original = error.get("ctx", {}).get("error")
        if isinstance(original, NumeralSystemError):
            return original
    return None


class NumeralSystem(BaseModel):
    """
    Система счисления, заданная упорядоченным алфавитом.

    Examples:
        >>> base16 = NumeralSystem("0123456789abcdef")
        >>> base16.encode(255)
        'ff'
        >>> base16.decode("10")
        16
    """

    digits: str = Field(..., description="Упорядоченные цифры, позиция = значение")
    width: UIntWidth = Field(DEFAULT_WIDTH, description="Целевая беззнаковая ширина")

    model_config = {"frozen": True}

    _values: dict[str, int] = PrivateAttr(default_factory=dict)

    def __init__(
        self,
        digits: Union[str, Sequence[str]],
        width: UIntWidth = DEFAULT_WIDTH,
        **data: Any,
    ) -> None:
        try:
            super().__init__(digits=digits, width=width, **data)
        except ValidationError as exc:
            original = _unwrap_numeral_error(exc)
            if original is None:
                raise
            raise original from None

    # -------------------------------------------------------------------------
    # Валидация алфавита
    # -------------------------------------------------------------------------

    @field_validator("digits", mode="before")
    @classmethod
    def join_digit_sequence(cls, v: Any) -> Any:
        """Последовательность одиночных символов склеивается в строку"""
        if isinstance(v, (list, tuple)):
            for position, char in enumerate(v):
                if not isinstance(char, str) or len(char) != 1:
                    raise InvalidAlphabet(
                        f"Digit at position {position} must be a single character, got {char!r}"
                    )
            return "".join(v)
        return v

    @field_validator("digits")
    @classmethod
    def validate_unique_digits(cls, v: str) -> str:
        """Проверка длины алфавита и уникальности символов"""
        if len(v) < MIN_BASE:
            raise InvalidAlphabet(
                f"Alphabet must contain at least {MIN_BASE} digits, got {len(v)}"
            )

        seen: dict[str, int] = {}
        for position, char in enumerate(v):
            if char in seen:
                raise InvalidAlphabet(
                    f"Duplicate digit {char!r} at positions {seen[char]} and {position}"
                )
            seen[char] = position
        return v

    @model_validator(mode="after")
    def validate_base_fits_width(self) -> "NumeralSystem":
        """Проверка, что base помещается в целевую ширину"""
        if len(self.digits) > self.width.max_value:
            raise InvalidAlphabet(
                f"Base {len(self.digits)} does not fit {self.width.value} "
                f"(maximum {self.width.max_value})"
            )
        return self

    def model_post_init(self, __context: Any) -> None:
        self._values = {char: position for position, char in enumerate(self.digits)}
        logger.debug("Created base-%d numeral system (%s)", self.base, self.width.value)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def base(self) -> int:
        """Основание системы (размер алфавита)."""
        return len(self.digits)

    def __str__(self) -> str:
        return self.digits

    def __contains__(self, char: object) -> bool:
        return char in self._values

    def value_of(self, char: str) -> int:
        """
        Позиционное значение одной цифры.

        Raises:
            UnknownDigit: Если символ не из алфавита
        """
        value = self._values.get(char)
        if value is None:
            raise UnknownDigit(char, 0)
        return value

    def digit_for(self, value: int) -> str:
        """
        Символ цифры для значения в диапазоне [0, base).

        Raises:
            ValueError: Если значение вне диапазона
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Digit value must be an int, got {type(value).__name__}")
        if not 0 <= value < self.base:
            raise ValueError(f"Digit value {value} out of range for base {self.base}")
        return self.digits[value]

    def _resolve_width(self, width: Optional[UIntWidth]) -> UIntWidth:
        if width is None:
            return self.width

        target = UIntWidth(width)
        if self.base > target.max_value:
            raise InvalidAlphabet(
                f"Base {self.base} does not fit {target.value} (maximum {target.max_value})"
            )
        return target

    # -------------------------------------------------------------------------
    # Конверсия
    # -------------------------------------------------------------------------

    def encode(self, value: int, width: Optional[UIntWidth] = None) -> str:
        """
        Представление целого в этой системе счисления.

        Args:
            value: Неотрицательное целое в пределах ширины
            width: Целевая ширина (default: ширина системы)

        Returns:
            Строка цифр от старшей к младшей, никогда не пустая

        Raises:
            TypeError: Если value не int
            ValueError: Если value отрицательное
            Overflow: Если value не помещается в ширину
            InvalidAlphabet: Если base не помещается в явно заданную ширину
        """
        target = self._resolve_width(width)
        validate_unsigned(value, target)

        return "".join(self.digits[index] for index in to_digit_indices(value, self.base))

    def decode(self, text: Union[str, Sequence[str]], width: Optional[UIntWidth] = None) -> int:
        """
        Значение строки цифр этой системы счисления.

        Один проход слева направо: acc = acc * base + digit.
        Пустая строка даёт 0, ведущие нули допускаются.

        Args:
            text: Строка (или последовательность одиночных символов)
            width: Целевая ширина (default: ширина системы)

        Returns:
            Декодированное значение

        Raises:
            UnknownDigit: Символ не из алфавита (с позицией)
            Overflow: Значение превышает ширину (с позицией цифры)
            InvalidAlphabet: Если base не помещается в явно заданную ширину
        """
        target = self._resolve_width(width)
        base = self.base

        acc = 0
        for position, char in enumerate(text):
            digit = self._values.get(char)
            if digit is None:
                raise UnknownDigit(char, position)
            acc = accumulate_digit(acc, base, digit, target, position)

        return acc
