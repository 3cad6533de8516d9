"""
Game rule configuration and validation.
"""

from pydantic import BaseModel, Field, field_validator

from .constants import BASE_DRAW, HAND_LIMIT, PLAYER_COUNT, STARTING_HAND_SIZE


class RuleConfig(BaseModel):
    """Configuration for game rules and settings."""

    player_count: int = Field(
        default=PLAYER_COUNT,
        ge=PLAYER_COUNT,
        le=PLAYER_COUNT,
        description="Number of players; only the 4-role game is supported"
    )
    hand_limit: int = Field(
        default=HAND_LIMIT,
        ge=0,
        description="Maximum hand size enforced at the end of the Discard phase"
    )
    starting_hand_size: int = Field(
        default=STARTING_HAND_SIZE,
        ge=0,
        description="Cards dealt to each player at setup"
    )
    base_draw: int = Field(
        default=BASE_DRAW,
        ge=0,
        description="Cards drawn in each Draw phase before passive modifiers"
    )
    attack_damage: int = Field(
        default=1,
        ge=1,
        description="Damage dealt by an undodged attack"
    )
    heal_amount: int = Field(
        default=1,
        ge=1,
        description="Health restored by a Health card"
    )
    disruption_discard: int = Field(
        default=2,
        ge=1,
        description="Cards a Disruption target discards"
    )
    propaganda_draw: int = Field(default=2, ge=0)
    propaganda_discard: int = Field(default=1, ge=0)
    work_harder_draw: int = Field(default=3, ge=0)
    work_harder_heal: int = Field(default=1, ge=1)
    revising_history_max_health: int = Field(
        default=2,
        ge=1,
        description="Revising History may only target players with health below this"
    )

    @field_validator('starting_hand_size')
    @classmethod
    def validate_starting_hand(cls, v, info):
        """Validate the opening hand fits in the hand limit."""
        hand_limit = info.data.get('hand_limit', HAND_LIMIT)
        if v > hand_limit:
            raise ValueError(f'starting_hand_size ({v}) must be <= hand_limit ({hand_limit})')
        return v

    def validate_player_count(self, player_count: int) -> bool:
        """Check if a player count is valid for this configuration."""
        return player_count == self.player_count


# Default configuration instance
default_rules = RuleConfig()


def create_rules(**overrides) -> RuleConfig:
    """Create a RuleConfig with optional overrides."""
    config_dict = default_rules.model_dump()
    config_dict.update(overrides)
    return RuleConfig(**config_dict)
