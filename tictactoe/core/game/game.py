"""
Game state and creation.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from tictactoe.core.game.board import board_to_string, empty_board


class GameStatus(str, Enum):
    """Lifecycle status of a game. Won and Draw are terminal."""

    ACTIVE = "Active"
    WON = "Won"
    DRAW = "Draw"


def new_etag() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class GameState:
    """
    Immutable snapshot of a tic-tac-toe game.

    `current_player` is whose turn it is while the game is active. Once the
    game is won it holds the winner; after a draw it holds the last mover.
    Every mutation produces a new instance with a fresh `etag`.
    """

    id: str
    board: Tuple[str, ...] = field(default_factory=empty_board)
    current_player: str = "X"
    status: GameStatus = GameStatus.ACTIVE
    etag: str = field(default_factory=new_etag)

    @property
    def is_active(self) -> bool:
        return self.status == GameStatus.ACTIVE

    @property
    def board_string(self) -> str:
        return board_to_string(self.board)

    def __repr__(self) -> str:
        return (
            f"GameState(id='{self.id}', board='{self.board_string}', "
            f"current_player='{self.current_player}', status={self.status.value})"
        )


def create_game() -> GameState:
    """Create a fresh game: empty board, X to move, Active."""
    return GameState(id=str(uuid.uuid4()))
