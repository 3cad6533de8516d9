"""
Tests for card effects applied directly to a game state.
"""

from farm_engine import effects
from farm_engine.constants import (
    EVENT_CARD_PLAYED, EVENT_DAMAGE, EVENT_DODGE, EVENT_ELIMINATED,
)
from farm_engine.models import CardKind
from farm_engine.rules import create_rules, default_rules

from conftest import build_state, hand_ids


def kinds(state):
    return [e.kind for e in state.game_log]


def test_attack_without_dodge_deals_damage(cards):
    """Test an undodged attack deals 1 damage."""
    gun = cards.one(CardKind.ATTACK)
    state = build_state(hands=[[gun], [], [], []])

    effects.play_card(state, 0, gun.id, 2, default_rules)

    assert state.players[2].health == 2
    assert state.players[0].hand == []
    assert state.discard_pile == [gun]
    assert state.attack_played_this_turn
    assert kinds(state) == [EVENT_CARD_PLAYED, EVENT_DAMAGE]
    assert state.game_log[0].message == "P0 plays The Gun on P2."
    assert state.game_log[0].data["card_kind"] == "Attack"
    assert state.game_log[0].kind == EVENT_CARD_PLAYED
    assert state.game_log[1].message == "P2 takes 1 damage. HP: 2."


def test_attack_is_dodged_with_first_defense_card(cards):
    """Test the first Dodge in hand cancels an attack."""
    gun = cards.one(CardKind.ATTACK)
    apple = cards.one(CardKind.HEALTH)
    first, second = cards(CardKind.DEFENSE, 2)
    state = build_state(hands=[[gun], [apple, first, second], [], []])

    effects.play_card(state, 0, gun.id, 1, default_rules)

    assert state.players[1].health == 5
    assert hand_ids(state.players[1]) == [apple.id, second.id]
    assert state.discard_pile == [gun, first]
    assert kinds(state) == [EVENT_CARD_PLAYED, EVENT_DODGE]
    assert state.game_log[1].message == "P1 played Dodge and avoided the attack."


def test_lethal_attack_eliminates_and_discards_hand(cards):
    """Test a lethal attack eliminates the target and discards their hand."""
    gun = cards.one(CardKind.ATTACK)
    held = cards(CardKind.CONTROL, 2)
    state = build_state(hands=[[gun], [], held, []], health={2: 1})

    effects.play_card(state, 0, gun.id, 2, default_rules)

    target = state.players[2]
    assert target.health == 0
    assert not target.active
    assert target.hand == []
    assert state.discard_pile == [gun] + held
    assert kinds(state)[-1] == EVENT_ELIMINATED
    assert state.game_log[-1].message == "P2 (Rebel) has been ELIMINATED!"


def test_special_hits_every_other_active_player(cards):
    """Test Old Major's Dream hits every other active player."""
    dream = cards.one(CardKind.SPECIAL)
    dodge = cards.one(CardKind.DEFENSE)
    state = build_state(hands=[[], [dream], [dodge], []])
    state.current_player_index = 1
    state.players[3].active = False

    effects.play_card(state, 1, dream.id, None, default_rules)

    assert state.players[0].health == 3
    assert state.players[1].health == 5
    assert state.players[2].health == 3
    assert state.players[2].hand == []
    assert state.players[3].health == 3
    assert not state.attack_played_this_turn
    assert kinds(state) == [EVENT_CARD_PLAYED, EVENT_DAMAGE, EVENT_DODGE]


def test_health_heals_self_up_to_max(cards):
    """Test healing never exceeds max health."""
    apples = cards(CardKind.HEALTH, 2)
    state = build_state(hands=[apples, [], [], []], health={0: 3})

    effects.play_card(state, 0, apples[0].id, None, default_rules)
    assert state.players[0].health == 4

    effects.play_card(state, 0, apples[1].id, None, default_rules)
    assert state.players[0].health == 4
    assert state.game_log[-1].message == "P0 heals to 4 HP."


def test_health_ignores_supplied_target(cards):
    """Test a Health card always heals its player."""
    apple = cards.one(CardKind.HEALTH)
    state = build_state(hands=[[apple], [], [], []], health={0: 2, 1: 2})

    effects.play_card(state, 0, apple.id, 1, default_rules)

    assert state.players[0].health == 3
    assert state.players[1].health == 2
    assert state.game_log[0].message == "P0 plays Apple Ration."


def test_disruption_discards_from_front(cards):
    """Test The Dogs discards the target's first two cards."""
    dogs = cards.one(CardKind.DISRUPTION)
    target_hand = cards(CardKind.ATTACK, 3)
    state = build_state(hands=[[dogs], target_hand, [], []])

    effects.play_card(state, 0, dogs.id, 1, default_rules)

    assert hand_ids(state.players[1]) == [target_hand[2].id]
    assert state.discard_pile == [dogs] + target_hand[:2]
    assert state.game_log[-1].message == "P1 was forced to discard 2 cards."


def test_disruption_on_short_hand(cards):
    """Test The Dogs on a hand with fewer than two cards."""
    dogs = cards.one(CardKind.DISRUPTION)
    single = cards.one(CardKind.HEALTH)
    state = build_state(hands=[[dogs], [], [single], []])

    effects.play_card(state, 0, dogs.id, 2, default_rules)
    assert state.players[2].hand == []

    more_dogs = cards.one(CardKind.DISRUPTION)
    state.players[0].hand.append(more_dogs)
    effects.play_card(state, 0, more_dogs.id, 2, default_rules)
    assert state.game_log[-1].data["card_ids"] == []


def test_control_sets_skip_draw_flag(cards):
    """Test Seven Commandments marks the target to skip a draw."""
    control = cards.one(CardKind.CONTROL)
    state = build_state(hands=[[control], [], [], []])

    effects.play_card(state, 0, control.id, 3, default_rules)

    assert state.players[3].flags.skip_next_draw
    assert state.game_log[-1].message == "P3 will skip their next draw phase."


def test_attack_damage_follows_rules(cards):
    """Test attack damage comes from the rule config."""
    gun = cards.one(CardKind.ATTACK)
    state = build_state(hands=[[gun], [], [], []])

    effects.play_card(state, 0, gun.id, 1, create_rules(attack_damage=2))

    assert state.players[1].health == 3


def test_behavior_table():
    """Test the card behavior table."""
    assert not effects.get_behavior(CardKind.DEFENSE).playable
    assert effects.get_behavior(CardKind.ATTACK).limited_per_turn
    assert effects.get_behavior(CardKind.SPECIAL).is_attack
    assert not effects.get_behavior(CardKind.SPECIAL).limited_per_turn
    for kind in (CardKind.ATTACK, CardKind.DISRUPTION, CardKind.CONTROL):
        assert effects.get_behavior(kind).requires_target
