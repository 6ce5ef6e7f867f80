"""
Custom exception hierarchy for the tic-tac-toe engine and services.

Provides typed errors that can be handled consistently across
the core engine, services, and API layer.
"""

from enum import Enum


class MoveError(str, Enum):
    """Reasons a move can be rejected by the engine."""

    INVALID_POSITION = "InvalidPosition"
    INVALID_PLAYER = "InvalidPlayer"
    GAME_NOT_ACTIVE = "GameNotActive"
    POSITION_OCCUPIED = "PositionOccupied"
    WRONG_TURN = "WrongTurn"


class TicTacToeError(Exception):
    """Base exception for all game-related errors."""


class InvalidMoveError(TicTacToeError):
    """Move is not legal in the current state."""

    def __init__(self, code: MoveError, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class GameNotFoundError(TicTacToeError):
    """Game does not exist."""

    def __init__(self, game_id: str):
        super().__init__(f"Game not found: {game_id}")
        self.game_id = game_id


class PersistenceError(TicTacToeError):
    """Database operation failed."""
