"""
Option: a value that may be absent.

An ``Option[A]`` is either ``Some(value)`` or ``NONE``. Nothing else is an
Option: the hierarchy is closed and instances are immutable.

Absence is only decided at the edge, by ``from_nullable`` (and
``chain_nullable``), which treat ``None`` and ``UNDEFINED`` as missing.
``Some`` never inspects its payload, so ``Some(None)`` is a present value
that happens to be ``None``.

Combinators come in two forms with the same semantics:

    map(f)(option)        # curried, for pipe()/flow()
    option.map(f)         # method chaining

Callbacks run at most once and only for a ``Some``; ``NONE`` short-circuits.
Exceptions raised by callbacks propagate unchanged.

Laws (for any ``x``, ``f``, ``g``, ``k``):

    map(identity)(o) == o
    map(flow(f, g))(o) == map(g)(map(f)(o))
    chain(some)(o) == o
    chain(k)(some(x)) == k(x)
    chain(g)(chain(f)(o)) == chain(lambda a: chain(g)(f(a)))(o)
    chain_nullable(f)(o) == chain(lambda a: from_nullable(f(a)))(o)
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


class _Undefined:
    __slots__ = ()
    def __repr__(self) -> str: return "UNDEFINED"
    def __bool__(self) -> bool: return False


# Missing value distinct from ``None``.
UNDEFINED = _Undefined()


def _is_nullable(v: Any) -> bool:
    return v is None or v is UNDEFINED


class Option(Generic[T]):
    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(f"Option is closed: cannot subclass it as {cls.__qualname__}")

    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        if self.is_some():
            return Some(f(self.value))  # type: ignore[attr-defined]
        return NONE

    def chain(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.is_some():
            return f(self.value)  # type: ignore[attr-defined]
        return NONE

    flat_map = chain

    def chain_nullable(self, f: Callable[[T], Optional[U]]) -> "Option[U]":
        return self.chain(lambda a: from_nullable(f(a)))

    def filter(self, p: Callable[[T], bool]) -> "Option[T]":
        if self.is_some() and p(self.value):  # type: ignore[attr-defined]
            return self
        return NONE

    def alt(self, that: Callable[[], "Option[T]"]) -> "Option[T]":
        return self if self.is_some() else that()

    def exists(self, p: Callable[[T], bool]) -> bool:
        return self.is_some() and bool(p(self.value))  # type: ignore[attr-defined]

    def fold(self, on_none: Callable[[], U], on_some: Callable[[T], U]) -> U:
        if self.is_some():
            return on_some(self.value)  # type: ignore[attr-defined]
        return on_none()

    def get_or_else(self, on_none: Callable[[], U]) -> Union[T, U]:
        return self.value if self.is_some() else on_none()  # type: ignore[attr-defined]

    def get_or_null(self) -> Optional[T]:
        return self.value if self.is_some() else None  # type: ignore[attr-defined]

    def get_or_undefined(self) -> Union[T, _Undefined]:
        return self.value if self.is_some() else UNDEFINED  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Some(Option[T]):
    value: T
    def is_some(self) -> bool: return True
    def __iter__(self) -> Iterator[T]: return iter((self.value,))


class _None(Option[Any]):
    __slots__ = ()
    def __repr__(self) -> str: return "NONE"
    def __eq__(self, other: object) -> bool:
        return isinstance(other, _None) if isinstance(other, Option) else NotImplemented
    def __reduce__(self) -> str: return "NONE"
    def __hash__(self) -> int: return hash(_None)
    def is_some(self) -> bool: return False
    def __iter__(self) -> Iterator[Any]: return iter(())


NONE: Option[Any] = _None()


# constructors

def none() -> Option[Any]:
    return NONE


def some(value: T) -> Option[T]:
    return Some(value)


def from_nullable(value: Union[T, None, _Undefined]) -> Option[T]:
    return NONE if _is_nullable(value) else Some(value)  # type: ignore[arg-type]


def from_predicate(p: Callable[[T], bool]) -> Callable[[T], Option[T]]:
    return lambda value: Some(value) if p(value) else NONE


# predicates

def is_none(option: Option[T]) -> bool:
    return option.is_none()


def is_some(option: Option[T]) -> bool:
    return option.is_some()


# extraction

def get_or_null(option: Option[T]) -> Optional[T]:
    return option.get_or_null()


def get_or_undefined(option: Option[T]) -> Union[T, _Undefined]:
    return option.get_or_undefined()


def get_or_else(on_none: Callable[[], U]) -> Callable[[Option[T]], Union[T, U]]:
    return lambda option: option.get_or_else(on_none)


def fold(on_none: Callable[[], U], on_some: Callable[[T], U]) -> Callable[[Option[T]], U]:
    return lambda option: option.fold(on_none, on_some)


def exists(p: Callable[[T], bool]) -> Callable[[Option[T]], bool]:
    return lambda option: option.exists(p)


# transformation (these shadow the ``map``/``filter`` builtins in this module)

def map(f: Callable[[T], U]) -> Callable[[Option[T]], Option[U]]:
    return lambda option: option.map(f)


def chain(f: Callable[[T], Option[U]]) -> Callable[[Option[T]], Option[U]]:
    return lambda option: option.chain(f)


def chain_nullable(f: Callable[[T], Optional[U]]) -> Callable[[Option[T]], Option[U]]:
    return lambda option: option.chain_nullable(f)


def filter(p: Callable[[T], bool]) -> Callable[[Option[T]], Option[T]]:
    return lambda option: option.filter(p)


def alt(that: Callable[[], Option[T]]) -> Callable[[Option[T]], Option[T]]:
    return lambda option: option.alt(that)
