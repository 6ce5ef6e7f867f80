"""
GameService orchestrates the move engine with persistence and logging.
"""

from __future__ import annotations

import logging

from tictactoe.core import (
    GameNotFoundError,
    GameState,
    InvalidMoveError,
    apply_move,
    create_game,
)
from tictactoe.data import GameRepository

logger = logging.getLogger(__name__)


class GameService:
    """Use-case service for creating games and applying moves."""

    def __init__(self, repo: GameRepository):
        self.repo = repo

    async def create_game(self) -> GameState:
        """Create a fresh game and persist it."""
        game = create_game()
        await self.repo.save(game)
        logger.info(f"Created game {game.id}")
        return game

    async def get_game(self, game_id: str) -> GameState:
        """
        Load a game.

        Raises:
            GameNotFoundError: If no game has this id
        """
        game = await self.repo.load(game_id)
        if game is None:
            raise GameNotFoundError(game_id)
        return game

    async def make_move(self, game_id: str, position: int, player: str) -> GameState:
        """
        Load a game, apply one move and save the result.

        Nothing is written when the move is rejected.

        Raises:
            GameNotFoundError: If no game has this id
            InvalidMoveError: If the engine rejects the move
        """
        game = await self.get_game(game_id)

        try:
            updated = apply_move(game, position, player)
        except InvalidMoveError as exc:
            logger.info(f"Rejected move {player}@{position} in game {game_id}: {exc.code.value}")
            raise

        await self.repo.save(updated)

        if updated.is_active:
            logger.info(f"Game {game_id}: {player}@{position}, {updated.current_player} to move")
        else:
            logger.info(
                f"Game {game_id}: {player}@{position} ended the game "
                f"({updated.status.value}, board='{updated.board_string}')"
            )
        return updated
