"""
Command message models for presentation layers, and their dispatch.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from .engine import CommandResult, GameSession
from .errors import INVALID_COMMAND, GameError
from .serialization import sanitize_state, serialize_events

logger = logging.getLogger(__name__)


class CommandType(str, Enum):
    """Inbound command types."""
    START_GAME = "start_game"
    BEGIN_TURN = "begin_turn"
    PLAY_CARD = "play_card"
    USE_SKILL = "use_skill"
    END_TURN = "end_turn"


# Inbound command models
class BaseCommand(BaseModel):
    """Base command model."""
    type: CommandType


class StartGameCommand(BaseCommand):
    """Start a game with the given seats."""
    type: CommandType = CommandType.START_GAME
    player_names: List[str] = Field(..., min_length=1)


class BeginTurnCommand(BaseCommand):
    """Resolve the pending Draw phase."""
    type: CommandType = CommandType.BEGIN_TURN


class PlayCardCommand(BaseCommand):
    """Play one card, optionally at a target."""
    type: CommandType = CommandType.PLAY_CARD
    card_id: int = Field(..., ge=0)
    target_id: Optional[int] = None


class UseSkillCommand(BaseCommand):
    """Use the current player's active skill."""
    type: CommandType = CommandType.USE_SKILL
    target_id: Optional[int] = None
    card_id: Optional[int] = None
    option: Optional[str] = None


class EndTurnCommand(BaseCommand):
    """End the current turn."""
    type: CommandType = CommandType.END_TURN


Command = Union[
    StartGameCommand,
    BeginTurnCommand,
    PlayCardCommand,
    UseSkillCommand,
    EndTurnCommand,
]

COMMAND_MODELS = {
    CommandType.START_GAME: StartGameCommand,
    CommandType.BEGIN_TURN: BeginTurnCommand,
    CommandType.PLAY_CARD: PlayCardCommand,
    CommandType.USE_SKILL: UseSkillCommand,
    CommandType.END_TURN: EndTurnCommand,
}


# Outbound reply models
class ResultReply(BaseModel):
    """Successful command reply."""
    type: Literal["result"] = "result"
    command: CommandType
    state: Dict[str, Any]
    events: List[Dict[str, Any]]


class ErrorReply(BaseModel):
    """Rejected command reply."""
    type: Literal["error"] = "error"
    code: str
    message: str


Reply = Union[ResultReply, ErrorReply]


def parse_command(data: Dict[str, Any]) -> Command:
    """
    Parse raw command data into the appropriate command model.

    Args:
        data: Raw command data from a presentation layer

    Returns:
        Parsed command model

    Raises:
        ValueError: If the command type is invalid or data is malformed
    """
    command_type = data.get("type")

    if not command_type:
        raise ValueError("Missing command type")

    try:
        command_type = CommandType(command_type)
    except ValueError:
        raise ValueError(f"Invalid command type: {command_type}")

    try:
        return COMMAND_MODELS[command_type](**data)
    except ValidationError as e:
        raise ValueError(f"Invalid command data: {e}")


def execute_command(session: GameSession, command: Command) -> CommandResult:
    """Run a parsed command against the session."""
    if isinstance(command, StartGameCommand):
        return session.start_game(command.player_names)
    if isinstance(command, BeginTurnCommand):
        return session.begin_turn()
    if isinstance(command, PlayCardCommand):
        return session.play_card(command.card_id, command.target_id)
    if isinstance(command, UseSkillCommand):
        return session.use_skill(command.target_id, command.card_id, command.option)
    return session.end_turn()


def handle_command(
    session: GameSession,
    data: Dict[str, Any],
    viewer_id: Optional[int] = None,
) -> Reply:
    """
    Parse, run and answer one command.

    The state in a successful reply is sanitized for `viewer_id`, defaulting to
    whoever holds the turn after the command.
    """
    try:
        command = parse_command(data)
    except ValueError as e:
        logger.info("Invalid command: %s", e)
        return create_error_reply(INVALID_COMMAND, str(e))

    try:
        result = execute_command(session, command)
    except GameError as e:
        return create_error_reply(e.code, e.message)

    if viewer_id is None:
        viewer_id = result.state.current_player.id
    return ResultReply(
        command=command.type,
        state=sanitize_state(result.state, viewer_id),
        events=serialize_events(result.events),
    )


def create_error_reply(code: str, message: str) -> ErrorReply:
    """Create an error reply."""
    return ErrorReply(code=code, message=message)
