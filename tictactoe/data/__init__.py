from tictactoe.data.config import DatabaseSettings, get_settings
from tictactoe.data.models import Base, GameRecord
from tictactoe.data.session import (
    get_session,
    init_db,
    close_db,
    session_scope,
    create_tables,
    drop_tables,
    get_engine,
)
from tictactoe.data.repository import GameRepository

__all__ = [
    "DatabaseSettings",
    "get_settings",
    "Base",
    "GameRecord",
    "get_session",
    "init_db",
    "close_db",
    "session_scope",
    "create_tables",
    "drop_tables",
    "get_engine",
    "GameRepository",
]
