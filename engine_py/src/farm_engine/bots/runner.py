"""
Drive a whole game with bots in every seat.
"""

import logging
from typing import Dict, List, Optional

from .base import BaseBot
from .greedy import GreedyBot
from ..engine import CommandResult, GameSession

logger = logging.getLogger(__name__)

DEFAULT_NAMES = ["Napoleon", "Snowball", "Boxer", "Squealer"]


def run_action(session: GameSession, bot: BaseBot) -> Optional[CommandResult]:
    action = bot.choose_action(session.state)
    if action is None:
        return None
    logger.debug("Bot %s -> %r", bot.player_id, action)
    if action.type == 'begin_turn':
        return session.begin_turn()
    if action.type == 'play_card':
        return session.play_card(action.data['card_id'], action.data['target_id'])
    if action.type == 'use_skill':
        return session.use_skill(**action.data)
    return session.end_turn()


def play_bot_game(
    session: GameSession,
    names: Optional[List[str]] = None,
    bots: Optional[Dict[int, BaseBot]] = None,
    max_turns: int = 200,
    max_actions: int = 5000,
) -> List[CommandResult]:
    """
    Start a game on `session` and let bots play it out.

    Stops when the game is over, after `max_turns` turns, or after
    `max_actions` commands, whichever comes first.

    Returns:
        Every command result in order, starting with start_game
    """
    names = names or DEFAULT_NAMES
    results = [session.start_game(names)]
    if bots is None:
        bots = {seat: GreedyBot(seat, session.rules) for seat in range(len(names))}

    for _ in range(max_actions):
        state = session.state
        if state.is_game_over or state.turn_number > max_turns:
            break
        result = run_action(session, bots[state.current_player.id])
        if result is None:
            break
        results.append(result)

    return results
