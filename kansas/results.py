"""Result variants returned by services instead of raising store errors."""
from dataclasses import dataclass
from typing import Any, Awaitable, Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """The operation succeeded and produced a value."""

    value: T


@dataclass(frozen=True)
class NotFound:
    """The record does not exist."""


@dataclass(frozen=True)
class Conflict:
    """The change clashes with another record."""

    detail: str


@dataclass(frozen=True)
class Failed:
    """The backing store raised."""

    error: Exception


Result = Union[Found[T], NotFound, Conflict, Failed]


def from_lookup(value: Optional[T]) -> Union[Found[T], NotFound]:
    """Wrap a store lookup, mapping None to NotFound."""
    return NotFound() if value is None else Found(value)


async def capture(awaitable: Awaitable[Any]) -> Result:
    """
    Await a store call and turn its outcome into a result variant.

    Any exception becomes Failed; None becomes NotFound.
    """
    try:
        value = await awaitable
    except Exception as e:
        return Failed(e)
    return from_lookup(value)
