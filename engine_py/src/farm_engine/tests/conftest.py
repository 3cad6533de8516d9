"""
Pytest fixtures and state builders for engine tests.
"""

from typing import Dict, List, Optional

import pytest

from farm_engine.constants import CHARACTERS
from farm_engine.engine import GameSession
from farm_engine.models import Card, CardKind, GameState, Phase, Player, Role

KIND_NAMES = {
    CardKind.ATTACK: "The Gun",
    CardKind.DEFENSE: "Dodge",
    CardKind.HEALTH: "Apple Ration",
    CardKind.DISRUPTION: "The Dogs",
    CardKind.CONTROL: "Seven Commandments",
    CardKind.SPECIAL: "Old Major's Dream",
}

CHARACTER_FOR_ROLE = {
    Role.TYRANT: "Napoleon",
    Role.LOYALIST: "Boxer",
    Role.REBEL: "Snowball",
    Role.COLLABORATOR: "Squealer",
}

SEATING = [Role.TYRANT, Role.LOYALIST, Role.REBEL, Role.COLLABORATOR]


class CardFactory:
    """Hands out cards with ids that are unique within one test."""

    def __init__(self):
        self.next_id = 0

    def __call__(self, kind: CardKind, count: int = 1) -> List[Card]:
        cards = []
        for _ in range(count):
            cards.append(Card(id=self.next_id, name=KIND_NAMES[kind], kind=kind))
            self.next_id += 1
        return cards

    def one(self, kind: CardKind) -> Card:
        return self(kind)[0]


def character(name: str):
    return next(c for c in CHARACTERS if c.name == name)


def build_state(
    hands: Optional[List[List[Card]]] = None,
    roles: Optional[List[Role]] = None,
    health: Optional[Dict[int, int]] = None,
    draw_pile: Optional[List[Card]] = None,
    discard_pile: Optional[List[Card]] = None,
    current: int = 0,
    phase: Phase = Phase.ACTION,
) -> GameState:
    """
    Build a four-seat game mid-turn (Draw already resolved unless `phase` is DRAW).
    """
    roles = roles or SEATING
    hands = hands or [[] for _ in roles]
    players = []
    for seat, role in enumerate(roles):
        char = character(CHARACTER_FOR_ROLE[role])
        players.append(Player(
            id=seat,
            name=f"P{seat}",
            role=role,
            character=char,
            health=char.base_health,
            max_health=char.base_health,
            hand=list(hands[seat]),
        ))
    for seat, value in (health or {}).items():
        players[seat].health = value

    return GameState(
        players=players,
        draw_pile=list(draw_pile or []),
        discard_pile=list(discard_pile or []),
        current_player_index=current,
        phase=phase,
        draw_resolved=phase != Phase.DRAW,
        turn_number=1,
    )


def hand_ids(player: Player) -> List[int]:
    return [c.id for c in player.hand]


@pytest.fixture
def cards():
    return CardFactory()


@pytest.fixture
def session_for():
    """Resume a session from a built state."""
    def _make(state: GameState, seed: int = 7) -> GameSession:
        return GameSession.from_state(state, seed=seed)
    return _make


@pytest.fixture
def started_session():
    session = GameSession(seed=42)
    session.start_game(["Alice", "Bob", "Charlie", "Dana"])
    return session
