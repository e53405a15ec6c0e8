"""
Тесты для Digits → Words

Проверяемые инварианты:
1. digits_of(0) == [0]
2. Цифры от старшей к младшей
3. digit_to_word тотальна на 0-9, иначе InvalidDigitError
4. num_to_words никогда не бросает исключение: отрицательный вход → WordsErr
"""

from typing import get_type_hints

import pytest
from pydantic import TypeAdapter, ValidationError

from lazyfp.core.domain import (
    DIGIT_SEPARATOR,
    DIGIT_WORDS,
    InvalidDigitError,
    InvalidInput,
    InvalidInputError,
    WordsErr,
    WordsOk,
    WordsResult,
    digit_to_word,
    digits_of,
    num_to_words,
    num_to_words_pipeline,
)

# =============================================================================
# ТЕСТЫ: digit_to_word
# =============================================================================


class TestDigitToWord:
    """Тесты digit_to_word"""

    def test_all_digits(self) -> None:
        """Все цифры 0-9 имеют названия"""
        expected = [
            "zero", "one", "two", "three", "four",
            "five", "six", "seven", "eight", "nine",
        ]
        assert [digit_to_word(d) for d in range(10)] == expected
        assert list(DIGIT_WORDS) == expected

    @pytest.mark.parametrize("digit", [-1, 10, 42, -9])
    def test_out_of_range(self, digit: int) -> None:
        """Значение вне 0-9 → InvalidDigitError"""
        with pytest.raises(InvalidDigitError, match="0-9") as exc_info:
            digit_to_word(digit)
        assert exc_info.value.digit == digit

    def test_non_int_rejected(self) -> None:
        """float и bool не являются цифрами"""
        with pytest.raises(InvalidDigitError):
            digit_to_word(3.0)
        with pytest.raises(InvalidDigitError):
            digit_to_word(True)

    def test_is_value_error(self) -> None:
        """InvalidDigitError — подкласс ValueError"""
        with pytest.raises(ValueError):
            digit_to_word(11)


# =============================================================================
# ТЕСТЫ: digits_of
# =============================================================================


class TestDigitsOf:
    """Тесты digits_of"""

    def test_zero_is_single_digit(self) -> None:
        """0 → [0], а не пустой список"""
        assert digits_of(0) == [0]

    def test_multi_digit(self) -> None:
        """Порядок от старшей цифры"""
        assert digits_of(1234256) == [1, 2, 3, 4, 2, 5, 6]

    def test_trailing_and_inner_zeros(self) -> None:
        """Нули внутри и в конце сохраняются"""
        assert digits_of(1000) == [1, 0, 0, 0]
        assert digits_of(90807) == [9, 0, 8, 0, 7]

    def test_single_digit(self) -> None:
        assert digits_of(7) == [7]

    def test_large_number(self) -> None:
        """Произвольно большие int"""
        number = 10**30 + 5
        assert digits_of(number) == [1] + [0] * 29 + [5]

    def test_negative_rejected(self) -> None:
        """Отрицательное число → InvalidInputError (без зацикливания)"""
        with pytest.raises(InvalidInputError, match="non-negative") as exc_info:
            digits_of(-5)
        assert exc_info.value.value == -5

    @pytest.mark.parametrize("value", [1.5, "12", None, False])
    def test_non_int_rejected(self, value) -> None:
        """Только int"""
        with pytest.raises(InvalidInputError, match="must be an int"):
            digits_of(value)


# =============================================================================
# ТЕСТЫ: num_to_words
# =============================================================================


class TestNumToWords:
    """Тесты num_to_words и результирующих моделей"""

    def test_example_number(self) -> None:
        result = num_to_words(1234256)
        assert isinstance(result, WordsOk)
        assert result.is_ok()
        assert result.value == "one-two-three-four-two-five-six"

    def test_zero(self) -> None:
        """0 → "zero" без разделителя"""
        assert num_to_words(0).unwrap() == "zero"

    def test_separator(self) -> None:
        assert DIGIT_SEPARATOR == "-"
        assert num_to_words(10).unwrap() == "one-zero"

    def test_negative_returns_error(self) -> None:
        """Отрицательный вход → WordsErr, не исключение"""
        result = num_to_words(-5)

        assert isinstance(result, WordsErr)
        assert not result.is_ok()
        assert result.kind == "err"
        assert result.error.value == -5
        assert "non-negative" in result.error.reason

    def test_error_unwrap_raises(self) -> None:
        """unwrap() на WordsErr → InvalidInputError"""
        with pytest.raises(InvalidInputError) as exc_info:
            num_to_words(-123).unwrap()
        assert exc_info.value.value == -123

    def test_non_int_returns_error(self) -> None:
        result = num_to_words(3.5)
        assert isinstance(result, WordsErr)
        assert "must be an int" in result.error.reason

    def test_pipeline_matches(self) -> None:
        """Point-free конвейер даёт тот же результат"""
        for number in (0, 7, 1234256, 9081726354):
            assert num_to_words_pipeline(number) == num_to_words(number).unwrap()

    def test_pipeline_raises_on_negative(self) -> None:
        with pytest.raises(InvalidInputError):
            num_to_words_pipeline(-1)


class TestResultModels:
    """Тесты pydantic моделей результата"""

    def test_frozen(self) -> None:
        """Модели immutable"""
        result = num_to_words(12)
        with pytest.raises(ValidationError):
            result.value = "changed"

    def test_discriminated_union_parsing(self) -> None:
        """Разбор по полю kind"""
        adapter = TypeAdapter(WordsResult)

        ok = adapter.validate_python({"kind": "ok", "value": "four-two"})
        err = adapter.validate_python(
            {"kind": "err", "error": {"value": -1, "reason": "negative"}}
        )

        assert isinstance(ok, WordsOk)
        assert ok.unwrap() == "four-two"
        assert isinstance(err, WordsErr)
        assert err.error == InvalidInput(value=-1, reason="negative")

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TypeAdapter(WordsResult).validate_python({"kind": "maybe", "value": "x"})

    def test_model_dump_keeps_tag(self) -> None:
        """model_dump сохраняет тег"""
        dumped = num_to_words(-7).model_dump()
        assert dumped["kind"] == "err"
        assert dumped["error"]["value"] == -7

    def test_return_annotation_is_tagged_union(self) -> None:
        """num_to_words объявлен через WordsResult (с дискриминатором)"""
        hints = get_type_hints(num_to_words, include_extras=True)
        assert hints["return"] == WordsResult
