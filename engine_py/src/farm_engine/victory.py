"""
Win condition evaluation.
"""

from typing import Optional

from .constants import EVENT_SHOWDOWN, EVENT_VICTORY
from .models import GameState, Role, Winner

VICTORY_MESSAGES = {
    Winner.REBELS: "REBELS WIN! The Tyrant has fallen!",
    Winner.TYRANT_AND_LOYALISTS: "TYRANT AND LOYALISTS WIN! All enemies of the Farm have been defeated!",
}


def find_winner(state: GameState) -> Optional[Winner]:
    """
    Return the winning side if a terminal condition holds, in priority order.
    """
    active_roles = [p.role for p in state.active_players()]

    if Role.TYRANT not in active_roles:
        return Winner.REBELS

    if Role.REBEL not in active_roles and Role.COLLABORATOR not in active_roles:
        return Winner.TYRANT_AND_LOYALISTS

    return None


def is_showdown(state: GameState) -> bool:
    """Only the Tyrant and the Collaborator are left standing."""
    active_roles = sorted(p.role.value for p in state.active_players())
    return active_roles == sorted([Role.TYRANT.value, Role.COLLABORATOR.value])


def check_victory(state: GameState) -> bool:
    """
    Evaluate win conditions and record the result on the state.

    The showdown is narrated once and never ends the game by itself.

    Returns:
        True if the game is over
    """
    if state.is_game_over:
        return True

    winner = find_winner(state)
    if winner is not None:
        state.is_game_over = True
        state.winner = winner
        state.add_event(EVENT_VICTORY, VICTORY_MESSAGES[winner], winner=winner.value)
        return True

    if is_showdown(state) and not state.showdown_announced:
        state.showdown_announced = True
        state.add_event(EVENT_SHOWDOWN, "Collaborator vs. Tyrant Showdown!")

    return False
