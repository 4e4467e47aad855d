import os
import tomllib
from enum import StrEnum
from functools import cache
from pathlib import Path


class Start(StrEnum):
    """When a Coro first runs its procedure."""

    LAZY = "lazy"
    """At the first call to ``next()``."""

    EAGER = "eager"
    """At construction, up to the first suspend point."""


def pyproject() -> Path | None:
    for path in [cwd := Path.cwd(), *cwd.parents]:
        candidate = path / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def config() -> dict:
    """Read the ``[tool.coro]`` table of the nearest pyproject.toml."""
    if path := pyproject():
        with path.open("rb") as f:
            data = tomllib.load(f)
        return data.get("tool", {}).get("coro", {})
    return {}


@cache
def default_start() -> Start:
    """Resolve the start policy for Coros that don't choose one.

    CORO_START wins over ``start`` in ``[tool.coro]``, which wins over lazy.
    """
    value = os.environ.get("CORO_START") or config().get("start") or Start.LAZY
    try:
        return Start(value)
    except ValueError:
        raise ValueError(
            f"Start policy must be 'lazy' or 'eager', got: {value}"
        ) from None
