from collections.abc import Awaitable
from collections.abc import Callable
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass
from dataclasses import field
from enum import StrEnum
from itertools import count
from threading import Lock
from typing import Any
from typing import cast

from .config import Start
from .config import default_start
from .event import Event
from .suspension import Suspension
from .yields import Yield

type Procedure[R] = Callable[[Yield], Awaitable[R] | R]


class State(StrEnum):
    SUSPENDED = "suspended"
    EXHAUSTED = "exhausted"


class CoroRunning(RuntimeError):
    """The Coro was advanced or stopped while it was already running."""


class YieldError(RuntimeError):
    """A suspend point was used where it is not valid."""


class YieldAfterExhausted(YieldError):
    """A suspend point was used after its Coro finished."""


class YieldOutsideCoro(YieldError):
    """A suspend point was awaited while its Coro was not running."""


class ForeignAwait(TypeError):
    """A procedure awaited something that is not its own suspend point."""


@dataclass(eq=False, kw_only=True)
class CoroStarted(Event): ...


@dataclass(eq=False, kw_only=True)
class CoroResumed(Event): ...


@dataclass(eq=False, kw_only=True)
class CoroSuspended(Event): ...


@dataclass(eq=False, kw_only=True)
class CoroStopped(Event): ...


@dataclass(eq=False, kw_only=True)
class CoroCompleted(Event): ...


@dataclass(eq=False, kw_only=True)
class CoroSucceeded(CoroCompleted):
    value: Any = field(repr=False)


@dataclass(eq=False, kw_only=True)
class CoroErrored(CoroCompleted):
    exception: BaseException = field(repr=False)


class Coro[R]:
    """A procedure that can be paused at its suspend points and resumed.

    The procedure is called with a :class:`Yield` and runs only while the
    driver is inside :meth:`next` or :meth:`stop`. No thread or event loop
    is involved: the procedure's coroutine is driven with ``send()``.
    """

    __counter = count(1).__next__

    def __init__(
        self,
        fn: Procedure[R],
        /,
        *,
        start: Start | None = None,
        name: str | None = None,
        observer: Callable[[Event], None] | None = None,
    ):
        self.name = name or getattr(fn, "__name__", type(fn).__name__)
        self.id = f"{self.name}-{Coro.__counter()}"
        self.__fn: Procedure[R] | None = fn
        self.__observer = observer
        self.__yield = Yield(self)
        self.__generator: Generator[Any, bool, R] | None = None
        self.__state = State.SUSPENDED
        self.__lock = Lock()
        self.__running = False
        self.__stopping = False
        self.__value: R | None = None

        if (Start(start) if start else default_start()) is Start.EAGER:
            self.next()

    def __repr__(self):
        return f"<{type(self).__name__} {self.id!r} {self.__state}>"

    def __enter__(self):
        return self

    def __exit__(self, *args: Any):
        self.stop()

    @property
    def state(self) -> State:
        return self.__state

    @property
    def exhausted(self) -> bool:
        return self.__state is State.EXHAUSTED

    @property
    def value(self) -> R | None:
        """The procedure's return value, once it has returned."""
        return self.__value

    def next(self) -> bool:
        """Run the procedure until it suspends (True) or finishes (False)."""
        with self.__run():
            if self.__state is State.EXHAUSTED:
                return False
            if self.__fn is not None:
                return self.__start()
            self.__publish(CoroResumed(id=self.id))
            return self.__send(True)

    def stop(self):
        """Stop the procedure at its current suspend point.

        The procedure is resumed one last time with its suspension
        evaluating to False, and it runs to its end in this call.
        """
        with self.__run():
            if self.__state is State.EXHAUSTED:
                return
            self.__publish(CoroStopped(id=self.id))
            self.__stopping = True
            if self.__fn is not None:
                # Never started, so there is nothing to unwind.
                self.__release()
                return
            self.__send(False)

    def _check_usable(self):
        if self.__state is State.EXHAUSTED:
            raise YieldAfterExhausted(f"{self.id} has already finished.")

    def _suspendable(self) -> bool:
        self._check_usable()
        if not self.__running:
            raise YieldOutsideCoro(f"{self.id} is not running.")
        return not self.__stopping

    @contextmanager
    def __run(self):
        if not self.__lock.acquire(blocking=False):
            raise CoroRunning(f"{self.id} is already running.")
        self.__running = True
        try:
            yield
        finally:
            self.__running = False
            self.__lock.release()

    def __start(self) -> bool:
        self.__publish(CoroStarted(id=self.id))
        fn, self.__fn = cast(Procedure[R], self.__fn), None
        try:
            result = fn(self.__yield)
        except BaseException as exception:
            self.__release()
            self.__publish(CoroErrored(id=self.id, exception=exception))
            raise

        if not isinstance(result, Awaitable):
            self.__value = result
            self.__release()
            self.__publish(CoroSucceeded(id=self.id, value=result))
            return False

        self.__generator = cast(Generator[Any, bool, R], result.__await__())
        return self.__send(cast(bool, None))

    def __send(self, value: bool) -> bool:
        generator = cast(Generator[Any, bool, R], self.__generator)
        try:
            suspension = generator.send(value)
        except StopIteration as stop:
            self.__value = stop.value
            self.__release()
            self.__publish(CoroSucceeded(id=self.id, value=stop.value))
            return False
        except BaseException as exception:
            self.__release()
            self.__publish(CoroErrored(id=self.id, exception=exception))
            raise

        if not isinstance(suspension, Suspension) or suspension.coro is not self:
            error = ForeignAwait(f"{self.id} awaited {suspension!r}.")
            # Suspensions refuse to hand off while the coroutine is closed.
            self.__stopping = True
            try:
                generator.close()
            except Exception as exception:
                self.__release()
                self.__publish(CoroErrored(id=self.id, exception=error))
                raise error from exception
            self.__release()
            self.__publish(CoroErrored(id=self.id, exception=error))
            raise error

        self.__publish(CoroSuspended(id=self.id))
        return True

    def __release(self):
        self.__fn = None
        self.__generator = None
        self.__state = State.EXHAUSTED

    def __publish(self, event: Event):
        if self.__observer is not None:
            self.__observer(event)
