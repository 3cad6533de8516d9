"""
Rules engine for the Animal Farm social-deduction card game.
"""

from .engine import CommandResult, GameSession
from .errors import (
    ActionNotAllowed, CardNotFound, ConsistencyError, GameError, GameOver,
    InvalidPlayerCount, InvalidTarget,
)
from .models import Card, CardKind, GameState, Phase, Player, Role, Winner
from .rules import RuleConfig, create_rules, default_rules

__all__ = [
    "ActionNotAllowed",
    "Card",
    "CardKind",
    "CardNotFound",
    "CommandResult",
    "ConsistencyError",
    "GameError",
    "GameOver",
    "GameSession",
    "GameState",
    "InvalidPlayerCount",
    "InvalidTarget",
    "Phase",
    "Player",
    "Role",
    "RuleConfig",
    "Winner",
    "create_rules",
    "default_rules",
]
