"""
Core math modules для lazyfp

Ленивые последовательности приближений и извлечение их пределов:
Newton-Raphson для квадратного корня и численное дифференцирование
с Richardson extrapolation.
"""

# Numerical Safeguards
from lazyfp.core.math.numerical_safeguards import (
    DEFAULT_TOLERANCE,
    is_valid_float,
    is_zero,
    validate_finite,
    validate_max_terms,
    validate_positive,
)

# Streams
from lazyfp.core.math.streams import halve, repeat, take, unfold

# Convergence
from lazyfp.core.math.convergence import (
    ConvergenceMode,
    ConvergenceSettings,
    NoConvergenceError,
    converge,
    converge_with,
    is_absolutely_close,
    is_relatively_close,
    relative,
    within,
)

# Newton-Raphson
from lazyfp.core.math.newton import (
    newton_step,
    relative_sqrt,
    sqrt_approximations,
    sqrt_estimate,
)

# Differentiation
from lazyfp.core.math.differentiation import (
    derive,
    derive_improved,
    derive_third_order,
    differentiate,
    easydiff,
    eliminate_all,
    eliminate_error,
    super_accelerate,
    ultimate_derive,
)

__all__ = [
    # Numerical Safeguards — Constants
    "DEFAULT_TOLERANCE",
    # Numerical Safeguards — Validation
    "is_valid_float",
    "is_zero",
    "validate_finite",
    "validate_max_terms",
    "validate_positive",
    # Streams
    "halve",
    "repeat",
    "take",
    "unfold",
    # Convergence — Types
    "ConvergenceMode",
    "ConvergenceSettings",
    # Convergence — Exceptions
    "NoConvergenceError",
    # Convergence — Functions
    "converge",
    "converge_with",
    "is_absolutely_close",
    "is_relatively_close",
    "relative",
    "within",
    # Newton-Raphson
    "newton_step",
    "relative_sqrt",
    "sqrt_approximations",
    "sqrt_estimate",
    # Differentiation
    "derive",
    "derive_improved",
    "derive_third_order",
    "differentiate",
    "easydiff",
    "eliminate_all",
    "eliminate_error",
    "super_accelerate",
    "ultimate_derive",
]
