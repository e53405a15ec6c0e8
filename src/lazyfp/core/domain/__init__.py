"""
Domain models and conversions.

Contains digit-to-words conversion and its result models.
"""

from lazyfp.core.domain.digits import (
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

__all__ = [
    "DIGIT_SEPARATOR",
    "DIGIT_WORDS",
    "InvalidDigitError",
    "InvalidInput",
    "InvalidInputError",
    "WordsErr",
    "WordsOk",
    "WordsResult",
    "digit_to_word",
    "digits_of",
    "num_to_words",
    "num_to_words_pipeline",
]
