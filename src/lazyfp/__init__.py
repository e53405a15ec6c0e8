"""
lazyfp — functional programming exercises as a small library.

- Digit-to-words conversion built as a composed pipeline
- Lazy sequences of numerical approximations (Newton-Raphson square root,
  numerical differentiation with Richardson extrapolation)
"""

from lazyfp.core.domain import (
    InvalidDigitError,
    InvalidInputError,
    WordsErr,
    WordsOk,
    digit_to_word,
    digits_of,
    num_to_words,
)
from lazyfp.core.functional import compose, intersperse, pipe
from lazyfp.core.math import (
    ConvergenceMode,
    NoConvergenceError,
    derive,
    relative,
    relative_sqrt,
    repeat,
    sqrt_estimate,
    ultimate_derive,
    within,
)

__version__ = "0.1.0"

__all__ = [
    "ConvergenceMode",
    "InvalidDigitError",
    "InvalidInputError",
    "NoConvergenceError",
    "WordsErr",
    "WordsOk",
    "compose",
    "derive",
    "digit_to_word",
    "digits_of",
    "intersperse",
    "num_to_words",
    "pipe",
    "relative",
    "relative_sqrt",
    "repeat",
    "sqrt_estimate",
    "ultimate_derive",
    "within",
]
