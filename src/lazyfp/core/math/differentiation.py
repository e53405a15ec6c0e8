"""
Numerical Differentiation — ленивые приближения производной и Richardson extrapolation

По мотивам John Hughes, "Why Functional Programming Matters" (1989), §4.2.

Базовая последовательность:
    h0, h0/2, h0/4, ...  →  easydiff(f, x, h) = (f(x+h) - f(x)) / h

Погрешность easydiff ~ A·h^n. Для соседних приближений (a, b) с шагами
h и h/2 комбинация

    (b·2^n - a) / (2^n - 1)

уничтожает ведущий член погрешности порядка n (eliminate_error).
super_accelerate применяет eliminate_error с порядками 1, 2, 3, ...
и берёт первый член каждой последовательности.

ИНВАРИАНТЫ:
1. Все последовательности ленивые; ни один член базовой
   последовательности не вычисляется дважды (itertools.tee)
2. k-й член super_accelerate требует ровно k+1 членов базовой последовательности
"""

from itertools import takewhile, tee
from typing import Callable, Iterable, Iterator, Optional

from lazyfp.core.math.convergence import ConvergenceMode, converge
from lazyfp.core.math.numerical_safeguards import (
    validate_finite,
    validate_positive,
)
from lazyfp.core.math.streams import halve, repeat

RealFunction = Callable[[float], float]


# =============================================================================
# БАЗОВАЯ ПОСЛЕДОВАТЕЛЬНОСТЬ
# =============================================================================


def easydiff(f: RealFunction, x: float, h: float) -> float:
    """
    Правая разностная производная.

    Examples:
        >>> easydiff(lambda t: t * t, 3.0, 1.0)
        7.0
    """
    return (f(x + h) - f(x)) / h


def differentiate(h0: float, f: RealFunction, x: float) -> Iterator[float]:
    """
    Последовательность easydiff с шагами h0, h0/2, h0/4, ...

    Заканчивается, когда шаг исчезает в float (h == 0.0).

    Raises:
        ValueError: Если h0 не положительный или x не конечный
    """
    validate_positive(h0, "h0")
    validate_finite(x, "x")
    steps = takewhile(_is_nonzero_step, repeat(halve, h0))
    return (easydiff(f, x, h) for h in steps)


def _is_nonzero_step(h: float) -> bool:
    return h > 0.0


# =============================================================================
# RICHARDSON EXTRAPOLATION
# =============================================================================


def eliminate_error(order: float, values: Iterable[float]) -> Iterator[float]:
    """
    Устранение ведущего члена погрешности порядка order.

    Каждый выходной член строится из пары соседних входных (a, b):
        (b·2^order - a) / (2^order - 1)

    Выходная последовательность на один член короче входной.

    Args:
        order: Порядок устраняемой погрешности (> 0)
        values: Последовательность приближений с шагом, делящимся пополам

    Raises:
        ValueError: Если order не положительный
    """
    validate_positive(order, "order")
    return _eliminate(2.0**order, values)


def _eliminate(factor: float, values: Iterable[float]) -> Iterator[float]:
    iterator = iter(values)
    try:
        a = next(iterator)
    except StopIteration:
        return
    for b in iterator:
        yield (b * factor - a) / (factor - 1.0)
        a = b


def eliminate_all(
    values: Iterable[float], start_order: int = 1
) -> Iterator[Iterator[float]]:
    """
    Последовательность последовательностей:
        values, eliminate_error(1, values), eliminate_error(2, eliminate_error(1, values)), ...

    Каждая выданная последовательность — независимая копия (tee);
    чтение её головы не сдвигает следующие уровни.
    """
    validate_positive(start_order, "start_order")
    return _eliminate_all(values, start_order)


def _eliminate_all(values: Iterable[float], order: int) -> Iterator[Iterator[float]]:
    while True:
        current, values = tee(values)
        yield current
        values = eliminate_error(order, values)
        order += 1


def super_accelerate(values: Iterable[float]) -> Iterator[float]:
    """
    Первый член каждой последовательности из eliminate_all.

    Заканчивается, когда очередной уровень пуст (конечный вход).
    """
    for sequence in eliminate_all(values):
        head = next(sequence, None)
        if head is None:
            return
        yield head


# =============================================================================
# ОЦЕНКИ ПРОИЗВОДНОЙ
# =============================================================================


def derive(
    eps: float,
    h0: float,
    f: RealFunction,
    x: float,
    mode: ConvergenceMode = ConvergenceMode.ABSOLUTE,
    max_terms: Optional[int] = None,
) -> float:
    """
    Производная f в точке x без ускорения.

    Args:
        eps: Толерантность
        h0: Начальный шаг (> 0)
        f: Дифференцируемая функция одного аргумента
        x: Точка
        mode: Критерий остановки
        max_terms: Лимит членов (None — без лимита)

    Examples:
        >>> round(derive(1e-4, 10.0, lambda t: t * t + 3.0 * t + 1.0, 3.0), 3)
        9.0
    """
    return converge(eps, differentiate(h0, f, x), mode, max_terms)


def derive_improved(
    eps: float,
    h0: float,
    f: RealFunction,
    x: float,
    mode: ConvergenceMode = ConvergenceMode.ABSOLUTE,
    max_terms: Optional[int] = None,
) -> float:
    """Производная с устранением погрешности первого порядка."""
    return converge(
        eps, eliminate_error(1, differentiate(h0, f, x)), mode, max_terms
    )


def derive_third_order(
    eps: float,
    h0: float,
    f: RealFunction,
    x: float,
    mode: ConvergenceMode = ConvergenceMode.ABSOLUTE,
    max_terms: Optional[int] = None,
) -> float:
    """Производная с последовательным устранением погрешностей порядков 1, 2, 3."""
    values = differentiate(h0, f, x)
    for order in (1, 2, 3):
        values = eliminate_error(order, values)
    return converge(eps, values, mode, max_terms)


def ultimate_derive(
    eps: float,
    h0: float,
    f: RealFunction,
    x: float,
    mode: ConvergenceMode = ConvergenceMode.ABSOLUTE,
    max_terms: Optional[int] = None,
) -> float:
    """
    Производная через super_accelerate.

    Сходится за существенно меньшее число членов базовой
    последовательности, чем derive.
    """
    return converge(
        eps, super_accelerate(differentiate(h0, f, x)), mode, max_terms
    )
