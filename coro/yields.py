from __future__ import annotations

from collections.abc import AsyncIterator
from collections.abc import Callable
from collections.abc import Iterator
from itertools import count
from typing import TYPE_CHECKING

from .suspension import Suspension

if TYPE_CHECKING:
    from .coro import Coro


class Yield:
    """The suspend point handed to a procedure by its Coro.

    ``await y()`` hands control back to the driver. It evaluates to True
    when the driver resumed the procedure, or False when the Coro is
    being stopped and the procedure should return without doing more work.
    """

    def __init__(self, coro: Coro, /):
        self.__coro = coro

    def __repr__(self):
        return f"<{type(self).__name__} of {self.__coro.id}>"

    def __call__(self) -> Suspension:
        self.__coro._check_usable()
        return Suspension(coro=self.__coro)

    async def skip(self, n: int, /) -> bool:
        """Suspend n times, giving up early if the Coro is stopped."""
        for _ in range(n):
            if not await self():
                return False
        return True

    async def until(
        self, predicate: Callable[[], bool], /, *, suspend_first: bool = False
    ) -> bool:
        """Suspend until the predicate holds.

        Returns True once the predicate is true, or False if the Coro
        was stopped first.
        """
        if suspend_first and not await self():
            return False
        while not predicate():
            if not await self():
                return False
        return True

    async def while_(
        self, predicate: Callable[[], bool], /, *, suspend_first: bool = False
    ) -> bool:
        """Suspend as long as the predicate holds."""
        if suspend_first and not await self():
            return False
        while predicate():
            if not await self():
                return False
        return True

    def seq(self, n: int, /) -> Seq:
        """Count from 0 to n - 1, suspending between each number."""
        return Seq(self, iter(range(n)))

    def count(self) -> Seq:
        """Count up from 0 forever, suspending between each number."""
        return Seq(self, count())


class Seq(AsyncIterator[int]):
    """A single-pass async iterator that suspends between its values.

    Nothing is suspended before the first value or after the last one.
    Breaking out of ``async for`` ends it without another suspension,
    and so does a stop of the Coro.
    """

    def __init__(self, suspend: Yield, indexes: Iterator[int], /):
        self.__suspend = suspend
        self.__indexes = indexes
        self.__produced = False
        self.__done = False

    async def __anext__(self) -> int:
        if self.__done:
            raise StopAsyncIteration

        index = next(self.__indexes, None)
        if index is None or (self.__produced and not await self.__suspend()):
            self.__done = True
            raise StopAsyncIteration

        self.__produced = True
        return index
