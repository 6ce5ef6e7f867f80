"""
Repository pattern for game data operations.

Encapsulates all database queries for games and maps between the
engine's GameState values and GameRecord rows.
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tictactoe.core.exceptions import PersistenceError
from tictactoe.core.game.board import board_from_string
from tictactoe.core.game.game import GameState, GameStatus
from tictactoe.data.models import GameRecord

logger = logging.getLogger(__name__)


def to_record(game: GameState) -> GameRecord:
    return GameRecord(
        id=game.id,
        board=game.board_string,
        current_player=game.current_player,
        status=game.status.value,
        etag=game.etag,
    )


def to_state(record: GameRecord) -> GameState:
    """
    Rebuild a GameState from a stored row.

    Raises:
        PersistenceError: If the row does not hold a valid game
    """
    try:
        return GameState(
            id=record.id,
            board=board_from_string(record.board),
            current_player=record.current_player,
            status=GameStatus(record.status),
            etag=record.etag,
        )
    except ValueError as exc:
        raise PersistenceError(f"Corrupt game record {record.id}: {exc}") from exc


class GameRepository:
    """
    Repository for game-related database operations.

    Each save is committed before returning. Concurrent saves of the same
    game are not serialized; the last one wins.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with a database session.

        Args:
            session: Active async SQLAlchemy session
        """
        self.session = session

    async def save(self, game: GameState) -> None:
        """
        Insert or update the row for `game.id`.

        Raises:
            PersistenceError: If the write fails
        """
        try:
            await self.session.merge(to_record(game))
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error(f"Failed to save game {game.id}: {exc}")
            raise PersistenceError(f"Failed to save game {game.id}") from exc

        logger.debug(f"Saved game {game.id} (status={game.status.value}, etag={game.etag})")

    async def load(self, game_id: str) -> Optional[GameState]:
        """
        Fetch a game by id.

        Args:
            game_id: Game identifier

        Returns:
            GameState or None if not found

        Raises:
            PersistenceError: If the read fails
        """
        try:
            record = await self.session.get(GameRecord, game_id)
        except SQLAlchemyError as exc:
            logger.error(f"Failed to load game {game_id}: {exc}")
            raise PersistenceError(f"Failed to load game {game_id}") from exc

        if record is None:
            return None
        return to_state(record)

    async def count_games(self, status: Optional[str] = None) -> int:
        """
        Count stored games, optionally filtered by status.

        Raises:
            PersistenceError: If the query fails
        """
        stmt = select(func.count()).select_from(GameRecord)
        if status:
            stmt = stmt.where(GameRecord.status == status)

        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error(f"Failed to count games: {exc}")
            raise PersistenceError("Failed to count games") from exc
        return int(result.scalar_one())
