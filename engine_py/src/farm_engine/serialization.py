"""
State serialization and sanitization utilities.
"""

from typing import Any, Dict, List, Optional

import orjson

from .models import Card, GameState, LogEvent, Player


def serialize_card(card: Card) -> Dict[str, Any]:
    return {
        "id": card.id,
        "name": card.name,
        "kind": card.kind.value,
        "effect": card.effect_text,
    }


def serialize_event(event: LogEvent) -> Dict[str, Any]:
    return {
        "seq": event.seq,
        "kind": event.kind,
        "message": event.message,
        "data": event.data,
    }


def serialize_player(player: Player, reveal: bool = True) -> Dict[str, Any]:
    """
    Serialize one player. Without `reveal` the hand and role are hidden,
    except that an eliminated player's role is public.
    """
    data = {
        "id": player.id,
        "name": player.name,
        "character": player.character.name,
        "skill": player.character.skill.name,
        "health": player.health,
        "max_health": player.max_health,
        "active": player.active,
        "hand_count": len(player.hand),
        "flags": {
            "skip_next_draw": player.flags.skip_next_draw,
            "skip_next_attack": player.flags.skip_next_attack,
        },
        "role": player.role.value if reveal or not player.active else None,
    }
    if reveal:
        data["hand"] = [serialize_card(c) for c in player.hand]
    return data


def _base_state(state: GameState) -> Dict[str, Any]:
    return {
        "version": state.version,
        "turn_number": state.turn_number,
        "current_player": state.current_player_index,
        "phase": state.phase.value,
        "draw_resolved": state.draw_resolved,
        "attack_played_this_turn": state.attack_played_this_turn,
        "skill_used_this_turn": state.skill_used_this_turn,
        "is_game_over": state.is_game_over,
        "winner": state.winner.value if state.winner else None,
        "showdown": state.showdown_announced,
        "draw_pile_count": len(state.draw_pile),
        "discard_pile_count": len(state.discard_pile),
    }


def snapshot_state(state: GameState) -> Dict[str, Any]:
    """Full, unsanitized view of the state, including pile contents."""
    snapshot = _base_state(state)
    snapshot["players"] = [serialize_player(p) for p in state.players]
    snapshot["draw_pile"] = [serialize_card(c) for c in state.draw_pile]
    snapshot["discard_pile"] = [serialize_card(c) for c in state.discard_pile]
    snapshot["log"] = [serialize_event(e) for e in state.game_log]
    return snapshot


def sanitize_state(state: GameState, viewer_id: Optional[int] = None) -> Dict[str, Any]:
    """
    Sanitize game state for a presentation layer.

    Args:
        state: Game state to sanitize
        viewer_id: ID of the player viewing the state (to show their cards and role)

    Returns:
        Sanitized state dictionary safe for JSON transmission
    """
    sanitized = _base_state(state)
    sanitized["players"] = [
        serialize_player(p, reveal=(p.id == viewer_id or state.is_game_over))
        for p in state.players
    ]
    # Only the top discard is public
    sanitized["top_discard"] = (
        serialize_card(state.discard_pile[-1]) if state.discard_pile else None
    )
    return sanitized


def serialize_events(events: List[LogEvent]) -> List[Dict[str, Any]]:
    return [serialize_event(e) for e in events]


def dumps_snapshot(data: Dict[str, Any]) -> bytes:
    return orjson.dumps(data)


def loads_snapshot(raw: bytes) -> Dict[str, Any]:
    return orjson.loads(raw)
