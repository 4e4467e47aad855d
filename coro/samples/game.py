"""Two linear procedures taking turns through a single suspend point.

The rival thinks for a while, then the player takes some time to answer.
Neither knows about the other or about the driver's tick counter.
"""

from collections.abc import Callable

from coro import Yield

type Say = Callable[[str], None]


async def rival_ai(y: Yield, say: Say) -> str | None:
    say("Rival AI is thinking...")
    if not await y():
        return None
    say("Rival AI is still thinking...")
    if not await y():
        return None
    say("Rival AI has finished thinking.")
    return "rock"


async def player_input(y: Yield, say: Say) -> str | None:
    for _ in range(3):
        say("Waiting for player input...")
        if not await y():
            return None
    say("Received player input.")
    return "paper"


async def game(y: Yield, say: Say = print):
    """Let the rival AI and then the player take their turns."""
    say("Rival AI's turn")
    rival_choice = await rival_ai(y, say)
    if rival_choice is None:
        return
    say(f"Rival AI chose: {rival_choice}")

    say("Player's turn")
    player_choice = await player_input(y, say)
    if player_choice is None:
        return
    say(f"Player chose: {player_choice}")
    say(f"Choice: {rival_choice} vs {player_choice}")
