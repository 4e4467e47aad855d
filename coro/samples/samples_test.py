from functools import partial

from coro import Coro
from coro import Start

from .basic import basic
from .countdown import countdown
from .game import game


def trace(procedure, *, start: Start = Start.LAZY, steps: int | None = None):
    """Drive a sample, prefixing what it says with the current tick."""
    t = 0
    lines: list[str] = []
    with Coro(
        partial(procedure, say=lambda line: lines.append(f"{t} {line}")),
        start=start,
    ) as co:
        while (steps is None or t < steps) and co.next():
            t += 1
    return lines


def test_basic():
    assert trace(basic) == [
        "0 Hello",
        "1 World",
        "2 !",
    ]


def test_basic_eager():
    """An eager start says the first line before the driver's loop."""
    assert trace(basic, start=Start.EAGER) == [
        "0 Hello",
        "0 World",
        "1 !",
    ]


def test_basic_stopped_says_nothing_more():
    assert trace(basic, steps=1) == ["0 Hello"]


def test_game_interleaves_rival_and_player():
    assert trace(game) == [
        "0 Rival AI's turn",
        "0 Rival AI is thinking...",
        "1 Rival AI is still thinking...",
        "2 Rival AI has finished thinking.",
        "2 Rival AI chose: rock",
        "2 Player's turn",
        "2 Waiting for player input...",
        "3 Waiting for player input...",
        "4 Waiting for player input...",
        "5 Received player input.",
        "5 Player chose: paper",
        "5 Choice: rock vs paper",
    ]


def test_game_stopped_during_players_turn():
    assert trace(game, steps=3) == [
        "0 Rival AI's turn",
        "0 Rival AI is thinking...",
        "1 Rival AI is still thinking...",
        "2 Rival AI has finished thinking.",
        "2 Rival AI chose: rock",
        "2 Player's turn",
        "2 Waiting for player input...",
    ]


def test_countdown():
    assert trace(countdown) == [
        "0 T-3",
        "1 T-2",
        "2 T-1",
        "6 Ignition",
        "8 Liftoff!",
    ]


def test_countdown_stopped_while_warming_up():
    assert trace(countdown, steps=5) == [
        "0 T-3",
        "1 T-2",
        "2 T-1",
    ]
