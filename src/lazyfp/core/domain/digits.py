"""
Digits → Words — преобразование неотрицательного целого в слова его цифр

Пример: 1234256 → "one-two-three-four-two-five-six"

Конвейер (point-free):
    digits_of >> map(digit_to_word) >> intersperse("-") >> "".join

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. digits_of(0) == [0] (не пустой список)
2. Порядок цифр: от старшей к младшей
3. Отрицательное число не попадает в digits_of через num_to_words:
   вход проверяется заранее, результат — WordsErr, а не исключение
"""

from functools import partial
from typing import Annotated, Any, Final, Literal, Optional, Union

from pydantic import BaseModel, Field

from lazyfp.core.functional import intersperse, pipe
from lazyfp.core.math.streams import unfold

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Индекс = цифра
DIGIT_WORDS: Final[tuple[str, ...]] = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
)

DIGIT_SEPARATOR: Final[str] = "-"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidDigitError(ValueError):
    """Значение вне диапазона 0-9 передано в digit_to_word."""

    def __init__(self, digit: Any):
        super().__init__(f"Digit outside the range of 0-9 passed in: {digit!r}")
        self.digit = digit


class InvalidInputError(ValueError):
    """Число не является неотрицательным целым."""

    def __init__(self, value: Any, reason: str):
        super().__init__(reason)
        self.value = value
        self.reason = reason


# =============================================================================
# RESULT MODELS
# =============================================================================


class InvalidInput(BaseModel):
    """Описание отклонённого входа."""

    value: Any = Field(..., description="Исходное значение")
    reason: str = Field(..., description="Причина отказа")

    model_config = {"frozen": True}


class WordsOk(BaseModel):
    """Успешное преобразование."""

    kind: Literal["ok"] = "ok"
    value: str = Field(..., description="Слова цифр через разделитель")

    model_config = {"frozen": True}

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> str:
        return self.value


class WordsErr(BaseModel):
    """Отклонённый вход (отрицательное или нецелое число)."""

    kind: Literal["err"] = "err"
    error: InvalidInput

    model_config = {"frozen": True}

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> str:
        raise InvalidInputError(self.error.value, self.error.reason)


WordsResult = Annotated[Union[WordsOk, WordsErr], Field(discriminator="kind")]


# =============================================================================
# ПРЕОБРАЗОВАНИЯ
# =============================================================================


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def digit_to_word(digit: int) -> str:
    """
    Английское название цифры.

    Raises:
        InvalidDigitError: Если digit не целое в диапазоне 0-9

    Examples:
        >>> digit_to_word(7)
        'seven'
    """
    if not _is_int(digit) or not 0 <= digit <= 9:
        raise InvalidDigitError(digit)
    return DIGIT_WORDS[digit]


def _input_problem(number: Any) -> Optional[str]:
    if not _is_int(number):
        return f"number must be an int, got {number!r}"
    if number < 0:
        return f"number must be non-negative, got {number}"
    return None


def _split_last_digit(rest: int) -> Optional[tuple[int, int]]:
    if rest == 0:
        return None
    quotient, digit = divmod(rest, 10)
    return digit, quotient


def digits_of(number: int) -> list[int]:
    """
    Десятичные цифры числа, от старшей к младшей.

    Raises:
        InvalidInputError: Если number не неотрицательное целое

    Examples:
        >>> digits_of(1234256)
        [1, 2, 3, 4, 2, 5, 6]
        >>> digits_of(0)
        [0]
    """
    problem = _input_problem(number)
    if problem is not None:
        raise InvalidInputError(number, problem)

    if number == 0:
        return [0]

    # unfold выдаёт цифры от младшей к старшей
    digits = list(unfold(_split_last_digit, number))
    digits.reverse()
    return digits


# Строгая версия: исключение на некорректном входе
num_to_words_pipeline = pipe(
    digits_of,
    partial(map, digit_to_word),
    partial(intersperse, DIGIT_SEPARATOR),
    "".join,
)


def num_to_words(number: Any) -> WordsResult:
    """
    Слова цифр числа через "-".

    Никогда не бросает исключение: некорректный вход отклоняется
    до разложения на цифры и возвращается как WordsErr.

    Examples:
        >>> num_to_words(1234256).unwrap()
        'one-two-three-four-two-five-six'
        >>> num_to_words(-5).is_ok()
        False
    """
    problem = _input_problem(number)
    if problem is not None:
        return WordsErr(error=InvalidInput(value=number, reason=problem))
    return WordsOk(value=num_to_words_pipeline(number))
