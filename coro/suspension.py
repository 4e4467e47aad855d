from __future__ import annotations

from collections.abc import Generator
from dataclasses import dataclass
from typing import TYPE_CHECKING
from typing import Self

if TYPE_CHECKING:
    from .coro import Coro


@dataclass(eq=False, kw_only=True)
class Suspension:
    """A single pending hand-off from a procedure back to its Coro."""

    coro: Coro

    def __await__(self) -> Generator[Self, bool, bool]:
        if not self.coro._suspendable():
            # Stopping: every suspension is refused without a hand-off.
            return False
        return (yield self)
