"""
Newton-Raphson — квадратный корень как предел ленивой последовательности

    x_{k+1} = (x_k + n / x_k) / 2

sqrt_estimate = converge(eps) ∘ repeat(newton_step(n), a0)
"""

from functools import partial
from typing import Iterator, Optional

from lazyfp.core.math.convergence import ConvergenceMode, converge
from lazyfp.core.math.numerical_safeguards import validate_positive
from lazyfp.core.math.streams import repeat


def newton_step(n: float, x: float) -> float:
    """
    Следующее приближение sqrt(n) из текущего x.

    Examples:
        >>> newton_step(9.0, 1.0)
        5.0
    """
    return (x + n / x) / 2.0


def sqrt_approximations(a0: float, n: float) -> Iterator[float]:
    """Бесконечная последовательность приближений sqrt(n) начиная с a0."""
    validate_positive(a0, "a0")
    validate_positive(n, "n")
    return repeat(partial(newton_step, n), a0)


def sqrt_estimate(
    a0: float,
    eps: float,
    n: float,
    mode: ConvergenceMode = ConvergenceMode.ABSOLUTE,
    max_terms: Optional[int] = None,
) -> float:
    """
    Оценка sqrt(n) методом Newton-Raphson.

    Args:
        a0: Начальное приближение (> 0; ноль дал бы деление на ноль на первом шаге)
        eps: Толерантность
        n: Аргумент корня (> 0)
        mode: Критерий остановки
        max_terms: Лимит членов (None — без лимита)

    Returns:
        Оценка sqrt(n)

    Raises:
        ValueError: Некорректные a0 / n / eps
        NoConvergenceError: Достигнут max_terms

    Examples:
        >>> round(sqrt_estimate(1.0, 1e-4, 9.0), 6)
        3.0
    """
    return converge(eps, sqrt_approximations(a0, n), mode, max_terms)


def relative_sqrt(
    a0: float,
    eps: float,
    n: float,
    max_terms: Optional[int] = None,
) -> float:
    """sqrt_estimate с относительным критерием."""
    return sqrt_estimate(a0, eps, n, ConvergenceMode.RELATIVE, max_terms)
