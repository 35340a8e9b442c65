from __future__ import annotations
import inspect
import logging
import operator
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Iterator, Optional, TypeVar, Union

from .errors import DEFAULT_UNWRAP_MESSAGE, NoneValueError, UnwrapError

T = TypeVar("T")
U = TypeVar("U")

# Async callbacks may hand back a plain value instead of an awaitable.
MaybeAwaitable = Union[Awaitable[T], T]

log = logging.getLogger(__name__)


async def _resolve(x: MaybeAwaitable[T]) -> T:
    if inspect.isawaitable(x):
        return await x
    return x  # type: ignore[return-value]


def _absorbed(op: str, ex: Exception) -> None:
    log.debug("%s: callback raised %r, falling back", op, ex)


def _flattened(op: str, out: Any) -> "Option[Any]":
    if isinstance(out, Option):
        return out
    if out is not None:
        log.debug("%s: callback returned %s instead of an Option, returning NONE", op, type(out).__name__)
    return NONE


class Option(Generic[T]):
    """A value that may be absent.

    ``Some(value)`` holds exactly one value that is never None, ``NONE`` holds
    nothing. Instances are immutable; every combinator returns either a new
    Option or the instance it was called on.

    ``map``, ``filter``, ``flat_map`` and ``satisfies`` (and their async
    forms) never raise because of their callback: an ``Exception`` from it
    turns the result into ``NONE`` (``False`` for ``satisfies``). ``fold``
    falls back to ``on_none`` when ``on_some`` raises; errors from ``on_none``,
    ``reduce``, ``get_or_else``, ``or_else`` and ``equals`` propagate.
    """

    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    def __iter__(self) -> Iterator[T]:
        if self.is_some():
            yield self.value  # type: ignore[attr-defined]

    # -- extraction

    def unwrap(self, error: Union[str, BaseException, None] = None) -> T:
        """Return the value, or raise if there is none.

        ``error`` may be a message for the ``UnwrapError`` or an exception
        instance, which is raised as-is.
        """
        if self.is_some():
            return self.value  # type: ignore[attr-defined]
        if isinstance(error, BaseException):
            raise error
        raise UnwrapError(DEFAULT_UNWRAP_MESSAGE if error is None else error)

    def get_or_else(self, fallback: Callable[[], T]) -> T:
        """Return the value, calling ``fallback`` only when there is none."""
        return self.value if self.is_some() else fallback()  # type: ignore[attr-defined]

    async def get_or_else_async(self, fallback: Callable[[], MaybeAwaitable[T]]) -> T:
        if self.is_some():
            return self.value  # type: ignore[attr-defined]
        return await _resolve(fallback())

    def or_else(self, fallback: Callable[[], "Option[T]"]) -> "Option[T]":
        """Return self if it holds a value, otherwise the Option ``fallback`` produces."""
        return self if self.is_some() else fallback()

    async def or_else_async(self, fallback: Callable[[], MaybeAwaitable["Option[T]"]]) -> "Option[T]":
        if self.is_some():
            return self
        return await _resolve(fallback())

    def to_nullable(self) -> Optional[T]:
        return self.value if self.is_some() else None  # type: ignore[attr-defined]

    # Python has a single None, so both projections coincide.
    to_undefined = to_nullable

    # -- transformation

    def satisfies(self, predicate: Callable[[T], bool]) -> bool:
        if self.is_none():
            return False
        try:
            return bool(predicate(self.value))  # type: ignore[attr-defined]
        except Exception as ex:
            log.debug("satisfies: predicate raised %r, returning False", ex)
            return False

    async def satisfies_async(self, predicate: Callable[[T], MaybeAwaitable[bool]]) -> bool:
        if self.is_none():
            return False
        try:
            return bool(await _resolve(predicate(self.value)))  # type: ignore[attr-defined]
        except Exception as ex:
            log.debug("satisfies_async: predicate raised %r, returning False", ex)
            return False

    def map(self, f: Callable[[T], Optional[U]]) -> "Option[U]":
        if self.is_none():
            return self  # type: ignore[return-value]
        try:
            return from_nullable(f(self.value))  # type: ignore[attr-defined]
        except Exception as ex:
            _absorbed("map", ex)
            return NONE

    async def map_async(self, f: Callable[[T], MaybeAwaitable[Optional[U]]]) -> "Option[U]":
        if self.is_none():
            return self  # type: ignore[return-value]
        try:
            return from_nullable(await _resolve(f(self.value)))  # type: ignore[attr-defined]
        except Exception as ex:
            _absorbed("map_async", ex)
            return NONE

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        if self.is_none():
            return self
        try:
            keep = bool(predicate(self.value))  # type: ignore[attr-defined]
        except Exception as ex:
            _absorbed("filter", ex)
            return NONE
        return self if keep else NONE

    async def filter_async(self, predicate: Callable[[T], MaybeAwaitable[bool]]) -> "Option[T]":
        if self.is_none():
            return self
        try:
            keep = bool(await _resolve(predicate(self.value)))  # type: ignore[attr-defined]
        except Exception as ex:
            _absorbed("filter_async", ex)
            return NONE
        return self if keep else NONE

    def flat_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.is_none():
            return self  # type: ignore[return-value]
        try:
            out = f(self.value)  # type: ignore[attr-defined]
        except Exception as ex:
            _absorbed("flat_map", ex)
            return NONE
        return _flattened("flat_map", out)

    async def flat_map_async(self, f: Callable[[T], MaybeAwaitable["Option[U]"]]) -> "Option[U]":
        if self.is_none():
            return self  # type: ignore[return-value]
        try:
            out = await _resolve(f(self.value))  # type: ignore[attr-defined]
        except Exception as ex:
            _absorbed("flat_map_async", ex)
            return NONE
        return _flattened("flat_map_async", out)

    def reduce(self, initial: U, reducer: Callable[[U, T], U]) -> U:
        if self.is_none():
            return initial
        return reducer(initial, self.value)  # type: ignore[attr-defined]

    async def reduce_async(self, initial: U, reducer: Callable[[U, T], MaybeAwaitable[U]]) -> U:
        if self.is_none():
            return initial
        return await _resolve(reducer(initial, self.value))  # type: ignore[attr-defined]

    def fold(self, on_some: Callable[[T], U], on_none: Callable[[], U]) -> U:
        if self.is_some():
            try:
                return on_some(self.value)  # type: ignore[attr-defined]
            except Exception as ex:
                _absorbed("fold", ex)
        return on_none()

    async def fold_async(
        self,
        on_some: Callable[[T], MaybeAwaitable[U]],
        on_none: Callable[[], MaybeAwaitable[U]],
    ) -> U:
        if self.is_some():
            try:
                return await _resolve(on_some(self.value))  # type: ignore[attr-defined]
            except Exception as ex:
                _absorbed("fold_async", ex)
        return await _resolve(on_none())

    # Older name for fold.
    match = fold
    match_async = fold_async

    # -- equality

    def equals(self, other: "Option[T]", comparator: Callable[[T, T], bool] = operator.eq) -> bool:
        """Compare two Options; ``comparator`` only runs when both hold a value."""
        if self.is_some() and other.is_some():
            return bool(comparator(self.value, other.value))  # type: ignore[attr-defined]
        return self.is_none() and other.is_none()

    async def equals_async(
        self,
        other: "Option[T]",
        comparator: Callable[[T, T], MaybeAwaitable[bool]] = operator.eq,
    ) -> bool:
        if self.is_some() and other.is_some():
            return bool(await _resolve(comparator(self.value, other.value)))  # type: ignore[attr-defined]
        return self.is_none() and other.is_none()


@dataclass(frozen=True)
class Some(Option[T]):
    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise NoneValueError()

    def is_some(self) -> bool: return True


class _None(Option[Any]):
    __slots__ = ()
    def __repr__(self) -> str: return "NONE"
    def __eq__(self, other: object) -> bool: return isinstance(other, _None)
    def __hash__(self) -> int: return hash(_None)
    def is_some(self) -> bool: return False


NONE: Option[Any] = _None()


def some(value: T) -> Option[T]:
    """Wrap a value that is known to be present; raises NoneValueError on None."""
    return Some(value)


def none() -> Option[Any]:
    return NONE


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE


def from_throwing(fn: Callable[[], Optional[T]]) -> Option[T]:
    """Call ``fn``; NONE if it raises or returns None."""
    try:
        return from_nullable(fn())
    except Exception as ex:
        _absorbed("from_throwing", ex)
        return NONE


async def from_throwing_async(fn: Callable[[], MaybeAwaitable[Optional[T]]]) -> Option[T]:
    try:
        return from_nullable(await _resolve(fn()))
    except Exception as ex:
        _absorbed("from_throwing_async", ex)
        return NONE
