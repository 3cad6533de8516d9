"""
Tests for Draw phase resolution, hand trimming and turn order.
"""

import random

import pytest

from farm_engine import turns
from farm_engine.constants import EVENT_DRAW, EVENT_DRAW_SKIPPED, EVENT_TURN_STARTED
from farm_engine.errors import ConsistencyError
from farm_engine.models import CardKind, Phase, Role
from farm_engine.rules import default_rules

from conftest import build_state, hand_ids


def test_draw_phase_draws_base_amount(cards):
    """Test the Draw phase draws two cards."""
    pile = cards(CardKind.ATTACK, 5)
    state = build_state(draw_pile=pile, phase=Phase.DRAW)

    assert turns.resolve_draw_phase(state, default_rules, random.Random(0))

    assert hand_ids(state.players[0]) == [pile[4].id, pile[3].id]
    assert state.phase == Phase.ACTION
    assert state.draw_resolved
    assert state.game_log[-1].message == "P0 draws 2 cards."


def test_draw_phase_only_runs_once(cards):
    """Test the Draw phase runs once per turn."""
    state = build_state(draw_pile=cards(CardKind.ATTACK, 5), phase=Phase.DRAW)
    rng = random.Random(0)

    turns.resolve_draw_phase(state, default_rules, rng)
    assert not turns.resolve_draw_phase(state, default_rules, rng)
    assert len(state.players[0].hand) == 2


def test_passive_skill_draws_extra_card(cards):
    """Test Windmill Plans draws an extra card."""
    state = build_state(draw_pile=cards(CardKind.HEALTH, 5), current=2, phase=Phase.DRAW)

    turns.resolve_draw_phase(state, default_rules, random.Random(0))

    # Snowball sits in seat 2
    assert len(state.players[2].hand) == 3
    assert state.game_log[-1].data == {"player_id": 2, "requested": 3, "drawn": 3}


def test_skip_draw_consumes_flag(cards):
    """Test a skipped draw clears the flag."""
    state = build_state(draw_pile=cards(CardKind.HEALTH, 5), current=1, phase=Phase.DRAW)
    state.players[1].flags.skip_next_draw = True

    turns.resolve_draw_phase(state, default_rules, random.Random(0))

    assert state.players[1].hand == []
    assert not state.players[1].flags.skip_next_draw
    assert len(state.draw_pile) == 5
    assert state.game_log[-1].kind == EVENT_DRAW_SKIPPED
    assert state.game_log[-1].message == "P1 skips the draw phase (Commandment)."


def test_draw_from_exhausted_piles(cards):
    """Test the Draw phase with too few cards left."""
    state = build_state(draw_pile=cards(CardKind.HEALTH, 1), phase=Phase.DRAW)

    turns.resolve_draw_phase(state, default_rules, random.Random(0))

    assert len(state.players[0].hand) == 1
    assert state.game_log[-1].kind == EVENT_DRAW
    assert state.game_log[-1].data["drawn"] == 1


def test_trim_hand_discards_from_front(cards):
    """Test trimming discards the oldest cards."""
    held = cards(CardKind.ATTACK, 6)
    state = build_state(hands=[held, [], [], []])

    turns.trim_hand(state, default_rules)

    assert hand_ids(state.players[0]) == [c.id for c in held[2:]]
    assert state.discard_pile == held[:2]
    assert state.game_log[-1].message == "P0 discarded 2 cards."


def test_trim_hand_within_limit_does_nothing(cards):
    """Test a hand within the limit is not trimmed."""
    state = build_state(hands=[cards(CardKind.ATTACK, 4), [], [], []])

    turns.trim_hand(state, default_rules)

    assert len(state.players[0].hand) == 4
    assert state.game_log == []


def test_end_turn_passes_to_next_active_seat(cards):
    """Test ending a turn passes to the next active player."""
    state = build_state(draw_pile=cards(CardKind.HEALTH, 10))
    state.players[1].active = False
    state.attack_played_this_turn = True

    turns.end_turn(state, default_rules, random.Random(0))

    assert state.current_player_index == 2
    assert state.phase == Phase.DRAW
    assert not state.draw_resolved
    assert not state.attack_played_this_turn
    assert state.turn_number == 2
    assert state.game_log[-1].kind == EVENT_TURN_STARTED
    assert state.game_log[-1].message == "P2's turn begins."


def test_end_turn_wraps_around(cards):
    """Test turn order wraps around the table."""
    state = build_state(draw_pile=cards(CardKind.HEALTH, 10), current=3)

    turns.end_turn(state, default_rules, random.Random(0))

    assert state.current_player_index == 0


def test_end_turn_resolves_pending_draw_before_discard(cards):
    """Test end_turn draws before trimming."""
    held = cards(CardKind.ATTACK, 4)
    pile = cards(CardKind.HEALTH, 2)
    state = build_state(hands=[held, [], [], []], draw_pile=pile, phase=Phase.DRAW)

    turns.end_turn(state, default_rules, random.Random(0))

    # Drew two on top of four, then trimmed the oldest two
    assert hand_ids(state.players[0]) == [held[2].id, held[3].id, pile[1].id, pile[0].id]


def test_end_turn_clears_skip_attack(cards):
    """Test end_turn clears the attack ban."""
    state = build_state(draw_pile=cards(CardKind.HEALTH, 10))
    state.players[0].flags.skip_next_attack = True

    turns.end_turn(state, default_rules, random.Random(0))

    assert not state.players[0].flags.skip_next_attack


def test_next_active_index_with_nobody_left():
    """Test turn order with nobody left is an error."""
    state = build_state(roles=[Role.TYRANT, Role.LOYALIST, Role.REBEL, Role.COLLABORATOR])
    for player in state.players:
        player.active = False

    with pytest.raises(ConsistencyError):
        turns.next_active_index(state, 0)
