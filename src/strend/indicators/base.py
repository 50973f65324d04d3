"""Shared contract for streaming indicator components."""
from __future__ import annotations

from typing import Protocol, TypeVar

In_contra = TypeVar("In_contra", contravariant=True)
Out_co = TypeVar("Out_co", covariant=True)


class InvalidParameter(ValueError):
    """Raised at construction time when an indicator parameter is out of range."""


class StreamingTransform(Protocol[In_contra, Out_co]):
    """A stateful transform fed one input at a time.

    Implementations must be fed in chronological order. ``reset()`` returns the
    transform to its freshly constructed state.
    """

    def next(self, value: In_contra) -> Out_co: ...

    def reset(self) -> None: ...


def check_period(period: int) -> int:
    if period < 1:
        raise InvalidParameter(f"period must be >= 1, got {period}")
    return period
