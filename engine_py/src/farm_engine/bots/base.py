"""
Base bot interface and utilities.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..models import Card, GameState, Player
from ..validate import validate_play


class BotAction:
    """Represents a bot action."""

    def __init__(self, action_type: str, **kwargs):
        self.type = action_type
        self.data = kwargs

    def __repr__(self) -> str:
        return f"BotAction({self.type!r}, {self.data!r})"

    @classmethod
    def begin_turn(cls) -> 'BotAction':
        """Create a begin-turn (draw) action."""
        return cls('begin_turn')

    @classmethod
    def play(cls, card_id: int, target_id: Optional[int] = None) -> 'BotAction':
        """Create a play action."""
        return cls('play_card', card_id=card_id, target_id=target_id)

    @classmethod
    def skill(cls, target_id: Optional[int] = None, card_id: Optional[int] = None,
              option: Optional[str] = None) -> 'BotAction':
        """Create a skill action."""
        return cls('use_skill', target_id=target_id, card_id=card_id, option=option)

    @classmethod
    def end_turn(cls) -> 'BotAction':
        """Create an end-turn action."""
        return cls('end_turn')

    def to_command(self) -> dict:
        """Command message understood by commands.handle_command."""
        return {'type': self.type, **self.data}


class BaseBot(ABC):
    """Abstract base class for bot players."""

    def __init__(self, player_id: int):
        self.player_id = player_id

    @abstractmethod
    def choose_action(self, state: GameState) -> Optional[BotAction]:
        """
        Choose an action based on the current game state.

        Args:
            state: Current game state

        Returns:
            BotAction to take, or None if it is not this bot's turn
        """
        pass

    def get_player(self, state: GameState) -> Optional[Player]:
        return state.get_player(self.player_id)

    def get_player_hand(self, state: GameState) -> List[Card]:
        """Get this bot's current hand."""
        player = self.get_player(state)
        return player.hand if player else []

    def is_my_turn(self, state: GameState) -> bool:
        """Check if it's this bot's turn."""
        return (
            not state.is_game_over and
            state.current_player.id == self.player_id
        )

    def get_opponents(self, state: GameState) -> List[Player]:
        """Other players still in the game."""
        return [p for p in state.active_players() if p.id != self.player_id]

    def get_valid_plays(self, state: GameState) -> List[Tuple[Card, Optional[int]]]:
        """
        Get every legal (card, target) pair for this bot's hand.

        Args:
            state: Current game state

        Returns:
            List of playable cards with the target to use (None for untargeted)
        """
        valid_plays = []
        targets = [None] + [p.id for p in self.get_opponents(state)]
        for card in self.get_player_hand(state):
            for target_id in targets:
                if validate_play(state, self.player_id, card.id, target_id).valid:
                    valid_plays.append((card, target_id))
                    break
        return valid_plays
