"""
Core domain layer for tic-tac-toe.

Exposes the move engine and its error types.
"""

from tictactoe.core.exceptions import (
    GameNotFoundError,
    InvalidMoveError,
    MoveError,
    PersistenceError,
    TicTacToeError,
)
from tictactoe.core.game import (
    GameState,
    GameStatus,
    apply_move,
    create_game,
    legal_positions,
    validate_move,
)

__all__ = [
    "GameState",
    "GameStatus",
    "create_game",
    "apply_move",
    "legal_positions",
    "validate_move",
    "GameNotFoundError",
    "InvalidMoveError",
    "MoveError",
    "PersistenceError",
    "TicTacToeError",
]
