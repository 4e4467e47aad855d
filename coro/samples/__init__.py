from collections.abc import Callable
from typing import Any

from .basic import basic
from .countdown import countdown
from .game import game

SAMPLES: dict[str, Callable[..., Any]] = {
    "basic": basic,
    "countdown": countdown,
    "game": game,
}
