from collections.abc import Callable

from coro import Yield


async def basic(y: Yield, say: Callable[[str], None] = print):
    """Say "Hello", "World" and "!", one per tick."""
    say("Hello")
    if not await y():
        return
    say("World")
    if not await y():
        return
    say("!")


if __name__ == "__main__":
    from coro import Coro

    t = 0
    co = Coro(lambda y: basic(y, lambda line: print(t, line)))
    while co.next():
        t += 1
