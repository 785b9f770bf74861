"""Free-function form of the option combinators.

Each function takes the option as its first argument and delegates to the
method of the same name, so ``ops.map(o, f)`` is ``o.map(f)``. Meant to be
used qualified: ``map``, ``filter`` and ``zip`` shadow builtins here.
"""
from __future__ import annotations
from typing import Any, Callable, Tuple, TypeVar

from .option import Option, none, some

T = TypeVar("T")
U = TypeVar("U")

__all__ = [
    "none", "some", "is_some", "is_none",
    "unwrap", "unwrap_or", "unwrap_or_else", "expect",
    "map", "map_or", "map_or_else", "inspect",
    "and_", "and_then", "filter", "or_", "or_else", "xor",
    "replace", "zip", "flatten",
]


def is_some(o: Option[Any]) -> bool: return o.is_some()
def is_none(o: Option[Any]) -> bool: return o.is_none()


def unwrap(o: Option[T]) -> T: return o.unwrap()
def unwrap_or(o: Option[T], default: T) -> T: return o.unwrap_or(default)
def unwrap_or_else(o: Option[T], default: Callable[[], T]) -> T: return o.unwrap_or_else(default)
def expect(o: Option[T], message: str) -> T: return o.expect(message)


def map(o: Option[T], f: Callable[[T], U]) -> Option[U]:
    return o.map(f)


def map_or(o: Option[T], default: U, f: Callable[[T], U]) -> U:
    return o.map_or(default, f)


def map_or_else(o: Option[T], default: Callable[[], U], f: Callable[[T], U]) -> U:
    return o.map_or_else(default, f)


def inspect(o: Option[T], f: Callable[[T], Any]) -> Option[T]:
    return o.inspect(f)


def and_(a: Option[Any], b: Option[U]) -> Option[U]: return a.and_(b)
def and_then(a: Option[T], f: Callable[[T], Option[U]]) -> Option[U]: return a.and_then(f)
def filter(a: Option[T], pred: Callable[[T], bool]) -> Option[T]: return a.filter(pred)
def or_(a: Option[T], b: Option[T]) -> Option[T]: return a.or_(b)
def or_else(a: Option[T], f: Callable[[], Option[T]]) -> Option[T]: return a.or_else(f)
def xor(a: Option[T], b: Option[T]) -> Option[T]: return a.xor(b)


def replace(a: Option[T], value: T) -> Option[T]:
    return a.replace(value)


def zip(a: Option[T], b: Option[U]) -> Option[Tuple[T, U]]:
    return a.zip(b)


def flatten(o: Option[Any]) -> Option[Any]:
    return o.flatten()
