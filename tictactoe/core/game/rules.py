"""
High-level rules API for applying moves.
This module provides the public interface for move validation and legal move detection.
"""

import dataclasses
from typing import Any, List

from tictactoe.core.exceptions import InvalidMoveError, MoveError
from tictactoe.core.game.board import (
    BOARD_SIZE,
    EMPTY,
    MARKS,
    empty_positions,
    find_winning_line,
    is_full,
    other_mark,
)
from tictactoe.core.game.game import GameState, GameStatus, new_etag


def validate_move(game: GameState, position: Any, player: Any) -> None:
    """
    Check a proposed move against the current state.

    Preconditions are checked in a fixed order and the first failure wins,
    so every rejected move has exactly one reason.

    Raises:
        InvalidMoveError: with the code of the first failed precondition
    """
    if isinstance(position, bool) or not isinstance(position, int) or not 0 <= position < BOARD_SIZE:
        raise InvalidMoveError(MoveError.INVALID_POSITION, "Position must be between 0 and 8")

    if player not in MARKS:
        raise InvalidMoveError(MoveError.INVALID_PLAYER, "Player must be X or O")

    if game.status != GameStatus.ACTIVE:
        raise InvalidMoveError(MoveError.GAME_NOT_ACTIVE, f"Game is not active ({game.status.value})")

    if game.board[position] != EMPTY:
        raise InvalidMoveError(MoveError.POSITION_OCCUPIED, f"Position {position} is already occupied")

    if player != game.current_player:
        raise InvalidMoveError(MoveError.WRONG_TURN, f"It is {game.current_player}'s turn")


def apply_move(game: GameState, position: int, player: str) -> GameState:
    """
    Apply a move and return the resulting state.

    The input state is never modified. Win lines are checked before the
    full-board check, so a last move that completes a line is a win.

    Args:
        game: Current game state
        position: Cell index 0..8
        player: "X" or "O"

    Returns:
        New GameState with the mark placed, status updated and a fresh etag

    Raises:
        InvalidMoveError: if any precondition fails
    """
    validate_move(game, position, player)

    board = list(game.board)
    board[position] = player

    if find_winning_line(board) is not None:
        status = GameStatus.WON
        current_player = player  # Winner stays as current player
    elif is_full(board):
        status = GameStatus.DRAW
        current_player = game.current_player
    else:
        status = GameStatus.ACTIVE
        current_player = other_mark(player)

    return dataclasses.replace(
        game,
        board=tuple(board),
        current_player=current_player,
        status=status,
        etag=new_etag(),
    )


def legal_positions(game: GameState) -> List[int]:
    """Positions the current player may mark; empty once the game is over."""
    if game.status != GameStatus.ACTIVE:
        return []
    return empty_positions(game.board)
