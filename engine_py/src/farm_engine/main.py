#!/usr/bin/env python3
"""Play a seeded all-bot game and print the narration"""

import logging
import os

from .bots import play_bot_game
from .engine import GameSession

logger = logging.getLogger(__name__)


def main():
    seed = int(os.getenv("FARM_SEED", 42))
    max_turns = int(os.getenv("FARM_MAX_TURNS", 200))

    # Configure logging
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "warning").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    session = GameSession(seed=seed)
    results = play_bot_game(session, max_turns=max_turns)

    for result in results:
        for event in result.events:
            print(event.message)

    state = session.state
    if state.is_game_over:
        print(f"Winner: {state.winner.value} after {state.turn_number} turns")
    else:
        print(f"No winner after {state.turn_number} turns")
    for player in state.players:
        status = "active" if player.active else "eliminated"
        print(f"  {player.name}: {player.role.value} as {player.character.name}, "
              f"{player.health}/{player.max_health} HP, {status}")


if __name__ == "__main__":
    main()
