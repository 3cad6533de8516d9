"""
Turn and phase transitions: Draw -> Action -> Discard -> next active player.
"""

import random

from . import deck, registry
from .constants import (
    EVENT_DRAW, EVENT_DRAW_SKIPPED, EVENT_HAND_TRIMMED, EVENT_TURN_STARTED,
)
from .errors import ConsistencyError
from .models import Flag, GameState, Phase
from .rules import RuleConfig
from .skills import draw_bonus


def next_active_index(state: GameState, after: int) -> int:
    """
    Find the next active seat after `after`, wrapping around the table.

    Raises:
        ConsistencyError: If nobody is left to take a turn
    """
    seats = len(state.players)
    for step in range(1, seats + 1):
        index = (after + step) % seats
        if state.players[index].active:
            return index
    raise ConsistencyError("No active player left to take a turn")


def start_turn(state: GameState, index: int):
    """Hand the turn to the player at `index`; their Draw phase is now pending."""
    player = state.players[index]
    if not player.active:
        raise ConsistencyError(f"{player.name} is eliminated and cannot take a turn")

    state.current_player_index = index
    state.phase = Phase.DRAW
    state.draw_resolved = False
    state.attack_played_this_turn = False
    state.skill_used_this_turn = False
    state.turn_number += 1
    state.add_event(
        EVENT_TURN_STARTED,
        f"{player.name}'s turn begins.",
        player_id=player.id,
        turn=state.turn_number,
    )


def resolve_draw_phase(state: GameState, rules: RuleConfig, rng: random.Random) -> bool:
    """
    Run the current player's Draw phase if it has not run yet.

    Returns:
        True if the phase ran, False if it had already been resolved this turn
    """
    if state.draw_resolved:
        return False

    player = state.current_player
    if player.flags.skip_next_draw:
        registry.set_flag(state, player.id, Flag.SKIP_NEXT_DRAW, False)
        state.add_event(
            EVENT_DRAW_SKIPPED,
            f"{player.name} skips the draw phase (Commandment).",
            player_id=player.id,
        )
    else:
        count = rules.base_draw + draw_bonus(player)
        cards = deck.draw(state, count, rng)
        registry.add_to_hand(state, player.id, cards)
        state.add_event(
            EVENT_DRAW,
            f"{player.name} draws {len(cards)} cards.",
            player_id=player.id,
            requested=count,
            drawn=len(cards),
        )

    state.draw_resolved = True
    state.phase = Phase.ACTION
    return True


def trim_hand(state: GameState, rules: RuleConfig):
    """Discard from the front of the current hand down to the hand limit."""
    player = state.current_player
    excess = len(player.hand) - rules.hand_limit
    if excess <= 0:
        return

    discarded = registry.take_from_front(state, player.id, excess)
    deck.discard(state, discarded)
    state.add_event(
        EVENT_HAND_TRIMMED,
        f"{player.name} discarded {excess} cards.",
        player_id=player.id,
        card_ids=[c.id for c in discarded],
    )


def end_turn(state: GameState, rules: RuleConfig, rng: random.Random) -> GameState:
    """
    Finish the current turn: Discard phase, then pass to the next active player.
    """
    resolve_draw_phase(state, rules, rng)

    state.phase = Phase.DISCARD
    trim_hand(state, rules)
    registry.set_flag(state, state.current_player.id, Flag.SKIP_NEXT_ATTACK, False)

    start_turn(state, next_active_index(state, state.current_player_index))
    return state
