"""Two-case result type returned by every public store operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value (``None`` for unit results)."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_ng(self) -> bool:
        return False


@dataclass(frozen=True)
class Ng(Generic[E]):
    """Failed outcome carrying the error instead of raising it."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_ng(self) -> bool:
        return True


Result = Union[Ok[T], Ng[E]]
