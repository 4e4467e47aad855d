from collections.abc import Callable
from functools import partial
from typing import Annotated
from typing import Any

from typer import Argument
from typer import BadParameter
from typer import Option
from typer import Typer

from .config import Start
from .coro import Coro
from .monitor import Monitor
from .samples import SAMPLES

app = Typer()


def parse_sample(name: str) -> str:
    if name not in SAMPLES:
        raise BadParameter(
            f"Unknown sample {name!r}. Choose from: {', '.join(sorted(SAMPLES))}"
        )
    return name


def sample_argument():
    return Argument(
        parser=parse_sample,
        help="Name of the sample procedure. See the 'samples' command.",
        metavar="SAMPLE",
    )


@app.command()
def samples():
    """Show all sample procedures."""
    name_width = max(len("Name"), max(len(name) for name in SAMPLES))
    print(f"{'Name':<{name_width}} | Summary")
    print(f"{'-' * name_width}-+-{'-' * len('Summary')}")
    for name, procedure in sorted(SAMPLES.items()):
        summary = (procedure.__doc__ or "").strip().splitlines()
        print(f"{name:<{name_width}} | {summary[0] if summary else ''}")


@app.command()
def run(
    name: Annotated[str, sample_argument()],
    start: Annotated[
        Start | None,
        Option(help="Start policy. Defaults to CORO_START or [tool.coro]."),
    ] = None,
    steps: Annotated[
        int | None,
        Option(help="Stop the procedure after this many suspensions.", min=0),
    ] = None,
    trace: Annotated[bool, Option(help="Print lifecycle events.")] = False,
):
    """Drive a sample one tick at a time.

    Each line the sample says is prefixed with the driver's tick,
    which counts the suspensions so far.
    """
    t = 0

    def say(line: str):
        print(t, line)

    observer: Callable[[Any], None] | None = print if trace else None
    procedure = partial(SAMPLES[name], say=say)
    with Coro(procedure, start=start, name=name, observer=observer) as co:
        while (steps is None or t < steps) and co.next():
            t += 1


@app.command()
def monitor(
    name: Annotated[str, sample_argument()],
    interval: Annotated[
        float,
        Option(help="Seconds between steps. Use 0 to step with the 'n' key."),
    ] = 0.5,
):
    """Step a sample in a live view of its output and events."""
    Monitor(name, SAMPLES[name], interval=interval).run()


if __name__ == "__main__":
    app()
