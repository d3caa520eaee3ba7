"""
Call sites built from Option combinators.

Each function starts from a value that may be missing, moves it into an
Option with ``from_nullable`` and only leaves the Option world at the end.
"""
from __future__ import annotations
from dataclasses import dataclass
from collections.abc import Mapping
from typing import Any, List, Optional, Union

from . import option as O
from .function import pipe


@dataclass(frozen=True)
class Horse:
    name: str
    color: str  # "white" | "brown" | "black"
    legs: int


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def describe_horse(maybe_horse: Union[Horse, Mapping[str, Any], None]) -> str:
    return pipe(
        maybe_horse,
        O.from_nullable,
        O.map(lambda horse: f"{_field(horse, 'name')} is a {_field(horse, 'color')} horse and has {_field(horse, 'legs')} legs"),
        O.get_or_else(lambda: "this horse doesn't exist"),
    )


def _square_numbers(xs: List[float]) -> List[float]:
    return [n * n for n in xs]


def _sum_numbers(xs: List[float]) -> float:
    return sum(xs, 0)


def calculate_sum_of_squares(maybe_list: Optional[List[float]]) -> float:
    return pipe(
        maybe_list,
        O.from_nullable,
        O.map(_square_numbers),
        O.map(_sum_numbers),
        O.get_or_else(lambda: 0),
    )


def get_house_number(person: Mapping[str, Any]) -> Optional[int]:
    # person.company?.address?.street?.number
    return pipe(
        _field(person, "company"),
        O.from_nullable,
        O.chain_nullable(lambda company: _field(company, "address")),
        O.chain_nullable(lambda address: _field(address, "street")),
        O.chain_nullable(lambda street: _field(street, "number")),
        O.get_or_null,
    )
