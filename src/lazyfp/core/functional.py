"""Lightweight functional helpers: list interspersing and function composition."""

from typing import Any, Callable, Iterable, TypeVar

T = TypeVar("T")


def intersperse(separator: T, items: Iterable[T]) -> list[T]:
    """
    Insert ``separator`` between every pair of adjacent elements.

    A new list is returned; ``items`` is not modified. Empty input gives an
    empty list, a single element comes back alone.

    Examples:
        >>> intersperse(0, [1, 2, 3])
        [1, 0, 2, 0, 3]
        >>> intersperse("-", ["one"])
        ['one']
    """
    result: list[T] = []
    for item in items:
        if result:
            result.append(separator)
        result.append(item)
    return result


def compose(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose unary callables from right to left: ``compose(f, g)(x) == f(g(x))``."""

    def _inner(value: Any) -> Any:
        for fn in reversed(functions):
            value = fn(value)
        return value

    return _inner


def pipe(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose unary callables from left to right: ``pipe(f, g)(x) == g(f(x))``."""
    return compose(*reversed(functions))


__all__ = ["compose", "intersperse", "pipe"]
