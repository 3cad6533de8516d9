"""
Card effects and the capability table that dispatches them.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from . import deck, registry
from .constants import (
    EVENT_CARD_PLAYED, EVENT_DAMAGE, EVENT_DODGE, EVENT_FORCED_DISCARD,
    EVENT_HEAL, EVENT_SKIP_DRAW_SET,
)
from .models import Card, CardKind, Flag, GameState, Player
from .rules import RuleConfig

Resolver = Callable[[GameState, Player, Optional[Player], Card, RuleConfig], None]


@dataclass(frozen=True)
class CardBehavior:
    """What a card kind needs and does when played in the Action phase."""
    resolve: Optional[Resolver]
    requires_target: bool = False
    global_effect: bool = False
    self_effect: bool = False
    is_attack: bool = False
    limited_per_turn: bool = False

    @property
    def playable(self) -> bool:
        return self.resolve is not None


def apply_damage(state: GameState, player: Player, amount: int):
    """Damage a player and eliminate them the moment they hit 0."""
    health = registry.adjust_health(state, player.id, -amount)
    state.add_event(
        EVENT_DAMAGE,
        f"{player.name} takes {amount} damage. HP: {health}.",
        player_id=player.id,
        amount=amount,
        health=health,
    )
    if health == 0:
        registry.eliminate(state, player.id)


def find_dodge(player: Player) -> Optional[Card]:
    for card in player.hand:
        if card.kind == CardKind.DEFENSE:
            return card
    return None


def dodge_or_damage(state: GameState, defender: Player, damage: int, source: str):
    """
    Spend the defender's first Defense card if they hold one, otherwise deal damage.
    """
    dodge = find_dodge(defender)
    if dodge is not None:
        registry.remove_from_hand(state, defender.id, dodge.id)
        deck.discard(state, [dodge])
        state.add_event(
            EVENT_DODGE,
            f"{defender.name} played {dodge.name} and avoided {source}.",
            player_id=defender.id,
            card_id=dodge.id,
        )
    else:
        apply_damage(state, defender, damage)


def resolve_attack(state: GameState, player: Player, target: Optional[Player],
                   card: Card, rules: RuleConfig):
    dodge_or_damage(state, target, rules.attack_damage, "the attack")


def resolve_global_attack(state: GameState, player: Player, target: Optional[Player],
                          card: Card, rules: RuleConfig):
    for other in state.players:
        if other.id != player.id and other.active:
            dodge_or_damage(state, other, rules.attack_damage, card.name)


def resolve_heal(state: GameState, player: Player, target: Optional[Player],
                 card: Card, rules: RuleConfig):
    health = registry.adjust_health(state, player.id, rules.heal_amount)
    state.add_event(
        EVENT_HEAL,
        f"{player.name} heals to {health} HP.",
        player_id=player.id,
        health=health,
    )


def forced_discard(state: GameState, target: Player, count: int):
    """Target discards the first `count` cards of their hand."""
    discarded = registry.take_from_front(state, target.id, count)
    deck.discard(state, discarded)
    state.add_event(
        EVENT_FORCED_DISCARD,
        f"{target.name} was forced to discard {len(discarded)} cards.",
        player_id=target.id,
        card_ids=[c.id for c in discarded],
    )


def resolve_disruption(state: GameState, player: Player, target: Optional[Player],
                       card: Card, rules: RuleConfig):
    forced_discard(state, target, rules.disruption_discard)


def resolve_control(state: GameState, player: Player, target: Optional[Player],
                    card: Card, rules: RuleConfig):
    registry.set_flag(state, target.id, Flag.SKIP_NEXT_DRAW, True)
    state.add_event(
        EVENT_SKIP_DRAW_SET,
        f"{target.name} will skip their next draw phase.",
        player_id=target.id,
    )


CARD_BEHAVIORS: Dict[CardKind, CardBehavior] = {
    CardKind.ATTACK: CardBehavior(resolve_attack, requires_target=True,
                                  is_attack=True, limited_per_turn=True),
    CardKind.SPECIAL: CardBehavior(resolve_global_attack, global_effect=True, is_attack=True),
    CardKind.HEALTH: CardBehavior(resolve_heal, self_effect=True),
    CardKind.DISRUPTION: CardBehavior(resolve_disruption, requires_target=True),
    CardKind.CONTROL: CardBehavior(resolve_control, requires_target=True),
    # Defense cards are only ever spent reactively by dodge_or_damage
    CardKind.DEFENSE: CardBehavior(None),
}


def get_behavior(kind: CardKind) -> CardBehavior:
    return CARD_BEHAVIORS[kind]


def play_card(
    state: GameState,
    player_id: int,
    card_id: int,
    target_id: Optional[int],
    rules: RuleConfig,
) -> GameState:
    """
    Apply an already validated card play.

    The card leaves the hand and lands on the discard pile before its effect
    runs. The state is mutated in place and returned.

    Args:
        state: Working copy of the game state
        player_id: Player playing the card
        card_id: Card being played
        target_id: Target player, ignored for cards that take no target
        rules: Active rule configuration

    Returns:
        The updated state
    """
    player = registry.get_player(state, player_id)
    card = registry.remove_from_hand(state, player_id, card_id)
    deck.discard(state, [card])

    behavior = get_behavior(card.kind)
    target = registry.get_player(state, target_id) if behavior.requires_target else None

    if behavior.limited_per_turn:
        state.attack_played_this_turn = True

    suffix = f" on {target.name}" if target else ""
    state.add_event(
        EVENT_CARD_PLAYED,
        f"{player.name} plays {card.name}{suffix}.",
        player_id=player.id,
        card_id=card.id,
        card=card.name,
        card_kind=card.kind.value,
        target_id=target.id if target else None,
    )

    behavior.resolve(state, player, target, card, rules)
    return state
