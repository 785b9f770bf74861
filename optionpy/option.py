from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, Tuple, TypeVar

from .logger import get_logger

T = TypeVar("T")
U = TypeVar("U")


class InvalidState(Exception):
    pass


def _absent(message: str, op: str) -> InvalidState:
    get_logger().debug(message, op=op)
    return InvalidState(message)


class Option(Generic[T]):
    """A value that is either present (``Some``) or absent (``NONE``).

    Every combinator returns a new option and leaves its inputs alone.
    Callbacks run at most once and only on the branch that needs them.
    """

    __slots__ = ()

    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    # extraction

    def unwrap(self) -> T:
        if self.is_some():
            return self.value  # type: ignore[attr-defined]
        raise _absent("the value is none", "unwrap")

    def expect(self, message: str) -> T:
        if self.is_some():
            return self.value  # type: ignore[attr-defined]
        raise _absent(message, "expect")

    def unwrap_or(self, default: T) -> T:
        return self.value if self.is_some() else default  # type: ignore[attr-defined]

    get_or_else = unwrap_or

    def unwrap_or_else(self, default: Callable[[], T]) -> T:
        if self.is_some():
            return self.value  # type: ignore[attr-defined]
        return default()

    def to_nullable(self) -> Optional[T]:
        return self.value if self.is_some() else None  # type: ignore[attr-defined]

    # transformation

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        if self.is_some():
            return Some(f(self.value))  # type: ignore[attr-defined]
        return NONE

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        if self.is_some():
            return f(self.value)  # type: ignore[attr-defined]
        return default

    def map_or_else(self, default: Callable[[], U], f: Callable[[T], U]) -> U:
        if self.is_some():
            return f(self.value)  # type: ignore[attr-defined]
        return default()

    def inspect(self, f: Callable[[T], Any]) -> "Option[T]":
        if self.is_some():
            f(self.value)  # type: ignore[attr-defined]
        return self

    # composition

    def and_(self, other: "Option[U]") -> "Option[U]":
        return other if self.is_some() else NONE

    def and_then(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.is_some():
            return f(self.value)  # type: ignore[attr-defined]
        return NONE

    flat_map = and_then

    def filter(self, pred: Callable[[T], bool]) -> "Option[T]":
        if self.is_some() and pred(self.value):  # type: ignore[attr-defined]
            return self
        return NONE

    def or_(self, other: "Option[T]") -> "Option[T]":
        return self if self.is_some() else other

    def or_else(self, f: Callable[[], "Option[T]"]) -> "Option[T]":
        return self if self.is_some() else f()

    def xor(self, other: "Option[T]") -> "Option[T]":
        if self.is_some() and other.is_none():
            return self
        if self.is_none() and other.is_some():
            return other
        return NONE

    def __and__(self, other: Any) -> Any:
        if not isinstance(other, Option):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other: Any) -> Any:
        if not isinstance(other, Option):
            return NotImplemented
        return self.or_(other)

    def __xor__(self, other: Any) -> Any:
        if not isinstance(other, Option):
            return NotImplemented
        return self.xor(other)

    # structure

    def replace(self, value: T) -> "Option[T]":
        # absence stays absent
        return Some(value) if self.is_some() else NONE

    def zip(self, other: "Option[U]") -> "Option[Tuple[T, U]]":
        if self.is_some() and other.is_some():
            return Some((self.value, other.value))  # type: ignore[attr-defined]
        return NONE

    def flatten(self) -> "Option[Any]":
        cur: Option[Any] = self
        while cur.is_some() and isinstance(cur.value, Option):  # type: ignore[attr-defined]
            cur = cur.value  # type: ignore[attr-defined]
        return cur

    def __iter__(self) -> Iterator[T]:
        if self.is_some():
            yield self.value  # type: ignore[attr-defined]


@dataclass(frozen=True, eq=False)
class Some(Option[T]):
    value: T
    def is_some(self) -> bool: return True

    # payload == only, no identity shortcut
    def __eq__(self, other: object) -> bool:
        return isinstance(other, Some) and self.value == other.value

    def __hash__(self) -> int: return hash((Some, self.value))


class _None(Option[Any]):
    __slots__ = ()
    _instance: Optional["_None"] = None

    def __new__(cls) -> "_None":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str: return "None"
    def is_some(self) -> bool: return False

    def __eq__(self, other: object) -> bool: return isinstance(other, _None)
    def __hash__(self) -> int: return hash(_None)
    def __reduce__(self) -> str: return "NONE"
    def __copy__(self) -> "_None": return self
    def __deepcopy__(self, _memo: dict) -> "_None": return self


NONE: Option[Any] = _None()


def none() -> Option[Any]:
    return NONE


def some(value: T) -> Option[T]:
    return Some(value)


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE
