"""
State diff computation for incremental snapshot updates.
"""

import copy
from typing import Any, Dict, List, Optional

from .models import GameState
from .serialization import sanitize_state

TOP_LEVEL_FIELDS = [
    "version", "turn_number", "current_player", "phase", "draw_resolved",
    "attack_played_this_turn", "skill_used_this_turn", "is_game_over", "winner",
    "showdown", "draw_pile_count", "discard_pile_count", "top_discard",
]

PLAYER_FIELDS = [
    "health", "max_health", "active", "hand_count", "flags", "role", "hand",
]


def compute_diff(
    old_state: Optional[GameState],
    new_state: GameState,
    viewer_id: Optional[int] = None
) -> List[Dict[str, Any]]:
    """
    Compute a JSON Patch-style diff between two states.

    Args:
        old_state: Previous game state
        new_state: New game state
        viewer_id: ID of the player viewing the state

    Returns:
        List of patch operations
    """
    if old_state is None:
        # First state, no diff needed
        return []

    old_sanitized = sanitize_state(old_state, viewer_id)
    new_sanitized = sanitize_state(new_state, viewer_id)

    ops = []

    for field in TOP_LEVEL_FIELDS:
        old_value = old_sanitized.get(field)
        new_value = new_sanitized.get(field)
        if old_value != new_value:
            ops.append({"op": "replace", "path": f"/{field}", "value": new_value})

    for index, new_player in enumerate(new_sanitized["players"]):
        old_player = old_sanitized["players"][index]
        if old_player == new_player:
            continue
        for field in PLAYER_FIELDS:
            old_value = old_player.get(field)
            new_value = new_player.get(field)
            if old_value == new_value:
                continue
            if new_value is None and field in old_player and field not in new_player:
                ops.append({"op": "remove", "path": f"/players/{index}/{field}"})
            else:
                ops.append({
                    "op": "replace",
                    "path": f"/players/{index}/{field}",
                    "value": new_value
                })

    return ops


def apply_diff(state: Dict[str, Any], ops: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Apply a diff to a sanitized state dictionary.

    Args:
        state: Current state dictionary
        ops: List of patch operations to apply

    Returns:
        Updated state dictionary
    """
    new_state = copy.deepcopy(state)

    for op in ops:
        path_parts = [p for p in op["path"].split("/") if p]
        if op["op"] in ("replace", "add"):
            _set_nested_value(new_state, path_parts, op.get("value"))
        elif op["op"] == "remove":
            _remove_nested_value(new_state, path_parts)

    return new_state


def _resolve(container: Any, key: str) -> Any:
    if isinstance(container, list):
        return container[int(key)]
    return container.setdefault(key, {})


def _set_nested_value(obj: Dict[str, Any], path: List[str], value: Any):
    """Set a value at a nested path; numeric segments index into lists."""
    current = obj
    for key in path[:-1]:
        current = _resolve(current, key)

    if not path:
        return
    if isinstance(current, list):
        current[int(path[-1])] = value
    else:
        current[path[-1]] = value


def _remove_nested_value(obj: Dict[str, Any], path: List[str]):
    """Remove a value at a nested path in a dictionary."""
    current = obj
    for key in path[:-1]:
        if isinstance(current, list):
            current = current[int(key)]
        elif key in current:
            current = current[key]
        else:
            return  # Path doesn't exist

    if path and isinstance(current, dict) and path[-1] in current:
        del current[path[-1]]


def should_send_full_state(ops: List[Dict[str, Any]], threshold: int = 10) -> bool:
    """
    Determine if a full snapshot should be sent instead of a diff.

    Args:
        ops: List of patch operations
        threshold: Maximum number of operations before sending full state

    Returns:
        True if full state should be sent
    """
    return len(ops) > threshold
