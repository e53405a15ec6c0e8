"""
Streams — ленивые бесконечные последовательности

По мотивам John Hughes, "Why Functional Programming Matters" (1989).

Генераторы вычисляют каждый член только по запросу потребителя:
- repeat(f, a): a, f(a), f(f(a)), ...
- unfold(f, seed): обобщённое развёртывание состояния

ИНВАРИАНТЫ:
1. Член вычисляется ровно один раз и только из предыдущего
2. Нет упреждающей выборки: остановка потребителя останавливает вычисления
3. Перезапуск возможен только повторным вызовом с тем же seed
"""

from itertools import islice
from typing import Callable, Iterable, Iterator, Optional, Tuple, TypeVar

T = TypeVar("T")
S = TypeVar("S")


def repeat(f: Callable[[T], T], a: T) -> Iterator[T]:
    """
    Бесконечная последовательность повторных применений f.

    Args:
        f: Функция обновления (следующий член из предыдущего)
        a: Начальное значение

    Yields:
        a, f(a), f(f(a)), ...

    Examples:
        >>> take(4, repeat(halve, 8.0))
        [8.0, 4.0, 2.0, 1.0]
    """
    while True:
        yield a
        a = f(a)


def unfold(f: Callable[[S], Optional[Tuple[T, S]]], seed: S) -> Iterator[T]:
    """
    Развёртывание последовательности из состояния.

    f(state) возвращает (value, next_state) или None для остановки.
    repeat(g, a) эквивалентен unfold(lambda s: (s, g(s)), a).

    Examples:
        >>> list(unfold(lambda n: (n, n - 1) if n > 0 else None, 3))
        [3, 2, 1]
    """
    state = seed
    while True:
        step = f(state)
        if step is None:
            return
        value, state = step
        yield value


def halve(x: float) -> float:
    """x / 2"""
    return x / 2.0


def take(n: int, values: Iterable[T]) -> list[T]:
    """Первые n членов последовательности (потребляет ровно n)."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return list(islice(values, n))
