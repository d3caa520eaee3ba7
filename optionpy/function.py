from __future__ import annotations
from functools import reduce
from typing import Any, Callable, TypeVar

A = TypeVar("A")


def identity(a: A) -> A:
    return a


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    # pipe(x, f, g) == g(f(x))
    return reduce(lambda acc, f: f(acc), fns, value)


def flow(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    if not fns:
        return identity
    return lambda value: pipe(value, *fns)
