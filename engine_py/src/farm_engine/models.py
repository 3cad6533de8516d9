"""Game models and data structures"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional


class CardKind(str, Enum):
    ATTACK = "Attack"
    DEFENSE = "Defense"
    HEALTH = "Health"
    DISRUPTION = "Disruption"
    CONTROL = "Control"
    SPECIAL = "Special"


class Role(str, Enum):
    TYRANT = "Tyrant"
    LOYALIST = "Loyalist"
    REBEL = "Rebel"
    COLLABORATOR = "Collaborator"


class Phase(str, Enum):
    DRAW = "Draw"
    ACTION = "Action"
    DISCARD = "Discard"


class SkillKind(str, Enum):
    ACTIVE = "Active"
    PASSIVE = "Passive"


class SkillEffect(str, Enum):
    """Capability tag used to look up what a character skill does."""
    PROPAGANDA = "propaganda"
    BONUS_DRAW = "bonus_draw"
    WORK_HARDER = "work_harder"
    REVISING_HISTORY = "revising_history"


class Winner(str, Enum):
    REBELS = "Rebels"
    TYRANT_AND_LOYALISTS = "Tyrant and Loyalists"


class Flag(str, Enum):
    SKIP_NEXT_DRAW = "skip_next_draw"
    SKIP_NEXT_ATTACK = "skip_next_attack"


@dataclass(frozen=True)
class Card:
    id: int
    name: str
    kind: CardKind
    effect_text: str = ""


@dataclass(frozen=True)
class CardPrototype:
    """Catalog entry: how many copies of a card go into a fresh deck."""
    name: str
    kind: CardKind
    count: int
    effect_text: str = ""


@dataclass(frozen=True)
class SkillDefinition:
    name: str
    kind: SkillKind
    effect: SkillEffect
    description: str = ""


@dataclass(frozen=True)
class CharacterDefinition:
    name: str
    base_health: int
    role_pool: FrozenSet[Role]
    skill: SkillDefinition


@dataclass
class StatusFlags:
    skip_next_draw: bool = False
    skip_next_attack: bool = False


@dataclass
class Player:
    id: int
    name: str
    role: Role
    character: CharacterDefinition
    health: int
    max_health: int
    hand: List[Card] = field(default_factory=list)
    active: bool = True
    flags: StatusFlags = field(default_factory=StatusFlags)

    def has_card(self, card_id: int) -> bool:
        return any(card.id == card_id for card in self.hand)

    def find_card(self, card_id: int) -> Optional[Card]:
        for card in self.hand:
            if card.id == card_id:
                return card
        return None


@dataclass
class LogEvent:
    """One line of the game narration."""
    seq: int
    kind: str
    message: str
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass
class GameState:
    players: List[Player] = field(default_factory=list)
    draw_pile: List[Card] = field(default_factory=list)  # top of the pile is the end of the list
    discard_pile: List[Card] = field(default_factory=list)
    current_player_index: int = 0
    phase: Phase = Phase.DRAW
    attack_played_this_turn: bool = False
    skill_used_this_turn: bool = False
    draw_resolved: bool = False
    turn_number: int = 0
    is_game_over: bool = False
    winner: Optional[Winner] = None
    showdown_announced: bool = False
    version: int = 0
    game_log: List[LogEvent] = field(default_factory=list)

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    def get_player(self, player_id: int) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def active_players(self) -> List[Player]:
        return [p for p in self.players if p.active]

    def all_card_ids(self) -> List[int]:
        """Every card id across the three zones, duplicates included."""
        ids = [c.id for c in self.draw_pile]
        ids.extend(c.id for c in self.discard_pile)
        for player in self.players:
            ids.extend(c.id for c in player.hand)
        return ids

    def add_event(self, kind: str, message: str, **data) -> LogEvent:
        event = LogEvent(seq=len(self.game_log), kind=kind, message=message, data=data)
        self.game_log.append(event)
        return event

    def increment_version(self):
        self.version += 1
