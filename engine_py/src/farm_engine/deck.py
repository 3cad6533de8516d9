"""
Deck construction, shuffling, drawing and discarding.
"""

import random
from typing import Iterable, List, Optional

from .constants import CARD_PROTOTYPES, EVENT_RESHUFFLE
from .models import Card, CardPrototype, GameState


def create_deck(prototypes: Optional[List[CardPrototype]] = None) -> List[Card]:
    """Create an unshuffled deck, numbering cards in catalog order."""
    if prototypes is None:
        prototypes = CARD_PROTOTYPES

    deck = []
    for proto in prototypes:
        for _ in range(proto.count):
            deck.append(Card(id=len(deck), name=proto.name, kind=proto.kind,
                             effect_text=proto.effect_text))

    return deck


def shuffle_deck(cards: List, rng: random.Random) -> List:
    """
    Shuffle a list in place with Fisher-Yates.

    Args:
        cards: Cards (or roles) to shuffle
        rng: Seeded random source owned by the session

    Returns:
        The same list, shuffled
    """
    for i in range(len(cards) - 1, 0, -1):
        j = rng.randint(0, i)
        cards[i], cards[j] = cards[j], cards[i]
    return cards


def draw(state: GameState, count: int, rng: random.Random) -> List[Card]:
    """
    Take up to `count` cards from the top of the draw pile.

    When the draw pile runs out the whole discard pile is shuffled into a new
    draw pile. If both piles are empty the result is simply shorter than asked.
    """
    drawn = []
    for _ in range(count):
        if not state.draw_pile:
            if not state.discard_pile:
                break
            recycle_discard_pile(state, rng)
        drawn.append(state.draw_pile.pop())
    return drawn


def recycle_discard_pile(state: GameState, rng: random.Random):
    state.draw_pile = shuffle_deck(state.discard_pile, rng)
    state.discard_pile = []
    state.add_event(
        EVENT_RESHUFFLE,
        "Deck is empty. Shuffling discard pile.",
        cards=len(state.draw_pile),
    )


def discard(state: GameState, cards: Iterable[Card]):
    state.discard_pile.extend(cards)


def validate_deck_integrity(state: GameState, expected_ids: Iterable[int]) -> bool:
    """
    Validate that all cards are accounted for and no duplicates exist.

    Args:
        state: Game state to validate
        expected_ids: Card ids of the deck the game started with

    Returns:
        True if deck integrity is valid
    """
    all_ids = state.all_card_ids()
    return (
        len(all_ids) == len(set(all_ids)) and  # No duplicates
        sorted(all_ids) == sorted(expected_ids)  # Correct cards
    )
