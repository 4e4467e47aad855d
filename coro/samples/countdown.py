from collections.abc import Callable

from coro import Yield


async def countdown(
    y: Yield, say: Callable[[str], None] = print, *, seconds: int = 3
):
    """Count down, wait for the engines to warm up, then lift off."""
    async for i in y.seq(seconds):
        say(f"T-{seconds - i}")

    heat = 0

    def warm() -> bool:
        nonlocal heat
        heat += 25
        return heat >= 100

    if not await y.until(warm, suspend_first=True):
        return
    say("Ignition")

    if not await y.skip(2):
        return
    say("Liftoff!")
