from collections.abc import Callable
from contextlib import suppress
from functools import partial
from typing import Any

from textual.app import App
from textual.app import ComposeResult
from textual.timer import Timer
from textual.widgets import DataTable
from textual.widgets import Footer
from textual.widgets import Header

from .config import Start
from .coro import Coro
from .coro import CoroErrored
from .coro import CoroSucceeded
from .event import Event


class Monitor(App):
    """TUI for stepping a sample procedure and watching its events."""

    TITLE = "Coro Monitor"
    BINDINGS = [
        ("n", "step", "Step"),
        ("s", "stop", "Stop"),
        ("q", "quit", "Quit"),
    ]

    def __init__(
        self, name: str, procedure: Callable[..., Any], *, interval: float = 0.5
    ):
        super().__init__()
        self.__interval = interval
        self.__timer: Timer | None = None
        self.__tick = 0
        self.__live = False
        self.coro = Coro(
            partial(procedure, say=self.__say),
            start=Start.LAZY,
            name=name,
            observer=self.__observe,
        )

    def __say(self, line: str):
        if not self.__live:
            return
        self.query_one(DataTable).add_row(str(self.__tick), "Output", line)

    def __observe(self, event: Event):
        if not self.__live:
            return
        match event:
            case CoroSucceeded(value=value):
                detail = repr(value)
            case CoroErrored(exception=exception):
                detail = repr(exception)
            case _:
                detail = ""
        self.query_one(DataTable).add_row(
            str(self.__tick), type(event).__name__, detail
        )

    def compose(self) -> ComposeResult:
        yield Header()
        yield DataTable(cursor_type="row", zebra_stripes=True)
        yield Footer()

    def on_mount(self):
        self.query_one(DataTable).add_columns("Tick", "Kind", "Detail")
        self.__live = True
        self.sub_title = f"{self.coro.id} {self.coro.state}"
        if self.__interval > 0:
            self.__timer = self.set_interval(self.__interval, self.action_step)

    def on_unmount(self) -> None:
        self.__live = False
        # Nothing is left on screen to report an unwinding error to.
        with suppress(Exception):
            self.coro.stop()

    def __drive(self, advance: Callable[[], bool | None]) -> bool:
        try:
            return bool(advance())
        except Exception as exception:
            self.notify(
                repr(exception), title=f"{self.coro.id} errored", severity="error"
            )
            return False
        finally:
            self.sub_title = f"{self.coro.id} {self.coro.state}"

    def action_step(self):
        if self.__drive(self.coro.next):
            self.__tick += 1
        elif self.__timer is not None:
            self.__timer.stop()

    def action_stop(self):
        self.__drive(self.coro.stop)
        if self.__timer is not None:
            self.__timer.stop()
