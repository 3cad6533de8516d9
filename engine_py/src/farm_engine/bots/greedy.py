"""
Greedy bot implementation with basic heuristics.
"""

from typing import List, Optional

from .base import BaseBot, BotAction
from ..models import Card, CardKind, GameState, Player, SkillKind
from ..rules import RuleConfig, default_rules
from ..skills import OPTION_DRAW, OPTION_HEAL, SKILL_BEHAVIORS
from ..validate import validate_skill

# Order in which a bot prefers to spend its cards
PLAY_PRIORITY = [
    CardKind.HEALTH,
    CardKind.SPECIAL,
    CardKind.ATTACK,
    CardKind.DISRUPTION,
    CardKind.CONTROL,
]


class GreedyBot(BaseBot):
    """
    Greedy bot that plays every useful card it can.

    Strategy:
    - Heal when damaged
    - Attack the weakest opponent
    - Disrupt the opponent with the biggest hand
    - Use the character skill when it is legal and looks useful
    """

    def __init__(self, player_id: int, rules: RuleConfig = default_rules):
        super().__init__(player_id)
        self.rules = rules

    def choose_action(self, state: GameState) -> Optional[BotAction]:
        """Choose the best action for the current state."""
        if not self.is_my_turn(state):
            return None

        if not state.draw_resolved:
            return BotAction.begin_turn()

        skill_action = self._choose_skill(state)
        if skill_action is not None:
            return skill_action

        play = self._choose_play(state)
        if play is not None:
            return play

        return BotAction.end_turn()

    def _choose_play(self, state: GameState) -> Optional[BotAction]:
        player = self.get_player(state)
        playable = [card for card, _ in self.get_valid_plays(state)]

        for kind in PLAY_PRIORITY:
            cards = [c for c in playable if c.kind == kind]
            if not cards:
                continue
            card = cards[0]
            if kind == CardKind.HEALTH:
                if player.health < player.max_health:
                    return BotAction.play(card.id)
                continue
            if kind in (CardKind.ATTACK, CardKind.SPECIAL):
                return BotAction.play(card.id, self._weakest_opponent(state).id
                                      if kind == CardKind.ATTACK else None)
            if kind == CardKind.DISRUPTION:
                return BotAction.play(card.id, self._richest_opponent(state).id)
            if kind == CardKind.CONTROL:
                return BotAction.play(card.id, self._next_opponent(state).id)

        return None

    def _choose_skill(self, state: GameState) -> Optional[BotAction]:
        player = self.get_player(state)
        skill = player.character.skill
        if (skill.kind != SkillKind.ACTIVE or skill.effect not in SKILL_BEHAVIORS
                or state.skill_used_this_turn):
            return None

        behavior = SKILL_BEHAVIORS[skill.effect]
        target = self._weakest_opponent(state)
        candidates: List[BotAction] = []
        if behavior.options:
            if player.health < player.max_health:
                candidates.append(BotAction.skill(option=OPTION_HEAL))
            if state.attack_played_this_turn:
                candidates.append(BotAction.skill(option=OPTION_DRAW))
        elif behavior.requires_card:
            giveaway = self._least_useful_card(player)
            if giveaway is not None:
                candidates.append(BotAction.skill(target_id=target.id, card_id=giveaway.id))
        elif behavior.requires_target:
            candidates.append(BotAction.skill(target_id=target.id))

        for action in candidates:
            result = validate_skill(state, self.player_id, self.rules, **action.data)
            if result.valid:
                return action
        return None

    def _weakest_opponent(self, state: GameState) -> Player:
        return min(self.get_opponents(state), key=lambda p: (p.health, p.id))

    def _richest_opponent(self, state: GameState) -> Player:
        return max(self.get_opponents(state), key=lambda p: (len(p.hand), -p.id))

    def _next_opponent(self, state: GameState) -> Player:
        opponents = self.get_opponents(state)
        after = [p for p in opponents if p.id > self.player_id]
        return (after or opponents)[0]

    def _least_useful_card(self, player: Player) -> Optional[Card]:
        for card in player.hand:
            if card.kind != CardKind.DEFENSE:
                return card
        return player.hand[0] if player.hand else None
