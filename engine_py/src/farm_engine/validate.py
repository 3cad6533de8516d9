"""
Legality checks for card plays and skills.
"""

from typing import Optional

from .effects import get_behavior
from .errors import (
    ACTION_NOT_ALLOWED, CARD_NOT_FOUND, GAME_OVER, INVALID_TARGET, raise_error,
)
from .models import GameState, Player, SkillKind
from .rules import RuleConfig
from .skills import SKILL_BEHAVIORS


class ValidationResult:
    """Result of a legality check."""

    def __init__(
        self,
        valid: bool,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
    ):
        self.valid = valid
        self.error_code = error_code
        self.error_message = error_message

    @classmethod
    def success(cls) -> 'ValidationResult':
        """Create a successful validation result."""
        return cls(valid=True)

    @classmethod
    def error(cls, error_code: str, error_message: str) -> 'ValidationResult':
        """Create an error validation result."""
        return cls(valid=False, error_code=error_code, error_message=error_message)

    def raise_for_error(self):
        """Raise the matching GameError if validation failed."""
        if not self.valid:
            raise_error(self.error_code, self.error_message)


def validate_target(state: GameState, player: Player, target_id: Optional[int]) -> ValidationResult:
    """A target must be another, still active, player."""
    if target_id is None:
        return ValidationResult.error(INVALID_TARGET, "This action requires a target")

    target = state.get_player(target_id)
    if target is None:
        return ValidationResult.error(INVALID_TARGET, f"No player with id {target_id}")
    if target.id == player.id:
        return ValidationResult.error(INVALID_TARGET, "You cannot target yourself")
    if not target.active:
        return ValidationResult.error(INVALID_TARGET, f"{target.name} has been eliminated")

    return ValidationResult.success()


def validate_play(
    state: GameState,
    player_id: int,
    card_id: int,
    target_id: Optional[int] = None,
) -> ValidationResult:
    """
    Validate a card play attempt.

    Args:
        state: Current game state
        player_id: ID of player attempting the play
        card_id: Card being played
        target_id: Optional target player

    Returns:
        ValidationResult with validation outcome
    """
    if state.is_game_over:
        return ValidationResult.error(GAME_OVER, "The game is over")

    player = state.get_player(player_id)
    if player is None or not player.active:
        return ValidationResult.error(ACTION_NOT_ALLOWED, "Player cannot act")

    card = player.find_card(card_id)
    if card is None:
        return ValidationResult.error(
            CARD_NOT_FOUND,
            f"{player.name} does not hold card {card_id}"
        )

    behavior = get_behavior(card.kind)
    if not behavior.playable:
        return ValidationResult.error(
            ACTION_NOT_ALLOWED,
            f"{card.name} can only be played in response to an attack"
        )

    if behavior.is_attack and player.flags.skip_next_attack:
        return ValidationResult.error(
            ACTION_NOT_ALLOWED,
            f"{player.name} cannot attack this turn"
        )

    if behavior.limited_per_turn and state.attack_played_this_turn:
        return ValidationResult.error(
            ACTION_NOT_ALLOWED,
            f"You can only play one '{card.name}' attack per turn."
        )

    if behavior.requires_target:
        return validate_target(state, player, target_id)

    return ValidationResult.success()


def validate_skill(
    state: GameState,
    player_id: int,
    rules: RuleConfig,
    target_id: Optional[int] = None,
    card_id: Optional[int] = None,
    option: Optional[str] = None,
) -> ValidationResult:
    """Validate an active skill use."""
    if state.is_game_over:
        return ValidationResult.error(GAME_OVER, "The game is over")

    player = state.get_player(player_id)
    if player is None or not player.active:
        return ValidationResult.error(ACTION_NOT_ALLOWED, "Player cannot act")

    skill = player.character.skill
    if skill.kind != SkillKind.ACTIVE or skill.effect not in SKILL_BEHAVIORS:
        return ValidationResult.error(
            ACTION_NOT_ALLOWED,
            f"{skill.name} is not an active skill"
        )
    if state.skill_used_this_turn:
        return ValidationResult.error(
            ACTION_NOT_ALLOWED,
            f"{skill.name} can only be used once per turn"
        )

    behavior = SKILL_BEHAVIORS[skill.effect]
    if option is not None and option not in behavior.options:
        return ValidationResult.error(
            ACTION_NOT_ALLOWED,
            f"Unknown option '{option}' for {skill.name}"
        )

    if behavior.requires_card:
        if card_id is None:
            return ValidationResult.error(CARD_NOT_FOUND, f"{skill.name} needs a card to give")
        if not player.has_card(card_id):
            return ValidationResult.error(
                CARD_NOT_FOUND,
                f"{player.name} does not hold card {card_id}"
            )

    if behavior.requires_target:
        result = validate_target(state, player, target_id)
        if not result.valid:
            return result
        if behavior.check_target:
            message = behavior.check_target(state.get_player(target_id), rules)
            if message:
                return ValidationResult.error(INVALID_TARGET, message)

    return ValidationResult.success()
