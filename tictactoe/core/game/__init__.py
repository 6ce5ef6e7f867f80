from tictactoe.core.game.game import GameState, GameStatus, create_game
from tictactoe.core.game.rules import apply_move, legal_positions, validate_move

__all__ = [
    "GameState",
    "GameStatus",
    "create_game",
    "apply_move",
    "legal_positions",
    "validate_move",
]
