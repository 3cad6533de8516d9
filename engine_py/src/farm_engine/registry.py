"""
Player lookup and mutation primitives.

Nothing here decides *when* something should happen; callers apply the game
rules and use these helpers to change player state.
"""

from typing import List

from . import deck
from .constants import EVENT_ELIMINATED
from .errors import CardNotFound, InvalidTarget
from .models import Card, Flag, GameState, Player


def get_player(state: GameState, player_id: int) -> Player:
    player = state.get_player(player_id)
    if player is None:
        raise InvalidTarget(f"No player with id {player_id}")
    return player


def adjust_health(state: GameState, player_id: int, delta: int) -> int:
    """Change a player's health by `delta`, clamped to [0, max_health]."""
    player = get_player(state, player_id)
    player.health = max(0, min(player.max_health, player.health + delta))
    return player.health


def add_to_hand(state: GameState, player_id: int, cards: List[Card]):
    get_player(state, player_id).hand.extend(cards)


def remove_from_hand(state: GameState, player_id: int, card_id: int) -> Card:
    player = get_player(state, player_id)
    for index, card in enumerate(player.hand):
        if card.id == card_id:
            return player.hand.pop(index)
    raise CardNotFound(f"{player.name} does not hold card {card_id}")


def take_from_front(state: GameState, player_id: int, count: int) -> List[Card]:
    """Remove up to `count` cards from the front of a player's hand."""
    player = get_player(state, player_id)
    taken = player.hand[:count]
    del player.hand[:count]
    return taken


def set_flag(state: GameState, player_id: int, flag: Flag, value: bool):
    setattr(get_player(state, player_id).flags, flag.value, value)


def eliminate(state: GameState, player_id: int) -> bool:
    """
    Knock a player out and discard their whole hand.

    Returns False (and changes nothing) if the player was already out.
    """
    player = get_player(state, player_id)
    if not player.active:
        return False

    player.active = False
    hand, player.hand = player.hand, []
    deck.discard(state, hand)
    state.add_event(
        EVENT_ELIMINATED,
        f"{player.name} ({player.role.value}) has been ELIMINATED!",
        player_id=player.id,
        role=player.role.value,
        discarded=len(hand),
    )
    return True
