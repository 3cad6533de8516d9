"""
Character skills.

Skills are looked up by their effect tag, never by character name, so a roster
can rename or reshuffle characters without touching the engine.
"""

import random
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from . import deck, registry
from .constants import EVENT_CARD_SWAPPED, EVENT_DRAW, EVENT_HEAL, EVENT_SKILL_USED
from .effects import forced_discard
from .models import Flag, GameState, Player, SkillEffect, SkillKind
from .rules import RuleConfig

OPTION_HEAL = "heal"
OPTION_DRAW = "draw"

# Extra cards drawn in the Draw phase, keyed by passive skill effect
PASSIVE_DRAW_BONUS: Dict[SkillEffect, int] = {
    SkillEffect.BONUS_DRAW: 1,
}


def draw_bonus(player: Player) -> int:
    skill = player.character.skill
    if skill.kind != SkillKind.PASSIVE:
        return 0
    return PASSIVE_DRAW_BONUS.get(skill.effect, 0)


def _draw_into_hand(state: GameState, player: Player, count: int, rng: random.Random):
    cards = deck.draw(state, count, rng)
    registry.add_to_hand(state, player.id, cards)
    state.add_event(
        EVENT_DRAW,
        f"{player.name} draws {len(cards)} cards.",
        player_id=player.id,
        requested=count,
        drawn=len(cards),
    )


def propaganda(state: GameState, player: Player, target: Optional[Player],
               card_id: Optional[int], option: Optional[str],
               rules: RuleConfig, rng: random.Random):
    _draw_into_hand(state, player, rules.propaganda_draw, rng)
    forced_discard(state, target, rules.propaganda_discard)


def work_harder(state: GameState, player: Player, target: Optional[Player],
                card_id: Optional[int], option: Optional[str],
                rules: RuleConfig, rng: random.Random):
    if option == OPTION_DRAW:
        _draw_into_hand(state, player, rules.work_harder_draw, rng)
        registry.set_flag(state, player.id, Flag.SKIP_NEXT_ATTACK, True)
        return
    health = registry.adjust_health(state, player.id, rules.work_harder_heal)
    state.add_event(
        EVENT_HEAL,
        f"{player.name} heals to {health} HP.",
        player_id=player.id,
        health=health,
    )


def revising_history(state: GameState, player: Player, target: Optional[Player],
                     card_id: Optional[int], option: Optional[str],
                     rules: RuleConfig, rng: random.Random):
    taken = registry.take_from_front(state, target.id, 1)
    given = registry.remove_from_hand(state, player.id, card_id)
    registry.add_to_hand(state, target.id, [given])
    registry.add_to_hand(state, player.id, taken)
    state.add_event(
        EVENT_CARD_SWAPPED,
        f"{player.name} swaps a card with {target.name}.",
        player_id=player.id,
        target_id=target.id,
        given=given.id,
        taken=[c.id for c in taken],
    )


def _weakened(target: Player, rules: RuleConfig) -> Optional[str]:
    if target.health >= rules.revising_history_max_health:
        return f"{target.name} must have fewer than {rules.revising_history_max_health} HP"
    return None


SkillHandler = Callable[..., None]


@dataclass(frozen=True)
class SkillBehavior:
    resolve: SkillHandler
    requires_target: bool = False
    requires_card: bool = False
    options: Tuple[str, ...] = ()
    check_target: Optional[Callable[[Player, RuleConfig], Optional[str]]] = None


SKILL_BEHAVIORS: Dict[SkillEffect, SkillBehavior] = {
    SkillEffect.PROPAGANDA: SkillBehavior(propaganda, requires_target=True),
    SkillEffect.WORK_HARDER: SkillBehavior(work_harder, options=(OPTION_HEAL, OPTION_DRAW)),
    SkillEffect.REVISING_HISTORY: SkillBehavior(revising_history, requires_target=True,
                                                requires_card=True, check_target=_weakened),
}


def use_skill(
    state: GameState,
    player_id: int,
    target_id: Optional[int],
    card_id: Optional[int],
    option: Optional[str],
    rules: RuleConfig,
    rng: random.Random,
) -> GameState:
    """Apply an already validated active skill."""
    player = registry.get_player(state, player_id)
    skill = player.character.skill
    behavior = SKILL_BEHAVIORS[skill.effect]
    target = registry.get_player(state, target_id) if behavior.requires_target else None
    if behavior.options and option is None:
        option = behavior.options[0]

    state.skill_used_this_turn = True
    suffix = f" on {target.name}" if target else ""
    state.add_event(
        EVENT_SKILL_USED,
        f"{player.name} uses {skill.name}{suffix}.",
        player_id=player.id,
        skill=skill.name,
        target_id=target.id if target else None,
        option=option,
    )

    behavior.resolve(state, player, target, card_id, option, rules, rng)
    return state
