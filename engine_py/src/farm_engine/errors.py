# engine_py/src/farm_engine/errors.py

from typing import Optional


class GameError(Exception):
    """Base exception for game-related errors."""
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        self.code = code or self.code
        self.message = message
        super().__init__(f"[{self.code}] {message}")


# Specific error codes
INVALID_PLAYER_COUNT = "INVALID_PLAYER_COUNT"
CARD_NOT_FOUND = "CARD_NOT_FOUND"
INVALID_TARGET = "INVALID_TARGET"
ACTION_NOT_ALLOWED = "ACTION_NOT_ALLOWED"
GAME_OVER = "GAME_OVER"
CONSISTENCY_ERROR = "CONSISTENCY_ERROR"
INVALID_COMMAND = "INVALID_COMMAND"


class InvalidPlayerCount(GameError):
    code = INVALID_PLAYER_COUNT


class CardNotFound(GameError):
    code = CARD_NOT_FOUND


class InvalidTarget(GameError):
    code = INVALID_TARGET


class ActionNotAllowed(GameError):
    code = ACTION_NOT_ALLOWED


class GameOver(GameError):
    code = GAME_OVER


class ConsistencyError(GameError):
    """A broken invariant. The session that raised it must not be used again."""
    code = CONSISTENCY_ERROR


ERRORS_BY_CODE = {
    cls.code: cls
    for cls in (InvalidPlayerCount, CardNotFound, InvalidTarget,
                ActionNotAllowed, GameOver, ConsistencyError)
}


# Helper function to raise common errors
def raise_error(code: str, message: str):
    raise ERRORS_BY_CODE.get(code, GameError)(message, code)
