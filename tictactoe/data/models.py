"""
SQLAlchemy models for the tic-tac-toe service.

One row per game; the row is the whole game state.
"""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class GameRecord(Base):
    """Persisted game state."""

    __tablename__ = "Games"

    id: Mapped[str] = mapped_column("Id", String(64), primary_key=True)
    board: Mapped[str] = mapped_column(
        "Board",
        String(9),
        nullable=False,
        comment="9 cells, row-major, space for empty",
    )
    current_player: Mapped[str] = mapped_column("CurrentPlayer", String(1), nullable=False)
    status: Mapped[str] = mapped_column(
        "Status",
        String(16),
        nullable=False,
        index=True,
        comment="Active | Won | Draw",
    )
    etag: Mapped[str] = mapped_column("ETag", String(64), nullable=False)

    def __repr__(self) -> str:
        return f"<GameRecord(id={self.id}, board='{self.board}', status={self.status})>"
