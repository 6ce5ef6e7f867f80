"""Shared test fixtures for tic-tac-toe tests."""

import pytest
import pytest_asyncio

from tictactoe.core import apply_move, create_game
from tictactoe.data import close_db, create_tables, get_settings, init_db, session_scope

WIN_MOVES = [(0, "X"), (3, "O"), (1, "X"), (4, "O"), (2, "X")]
DRAW_MOVES = [
    (0, "X"), (1, "O"), (2, "X"), (4, "O"), (3, "X"),
    (5, "O"), (7, "X"), (6, "O"), (8, "X"),
]


@pytest.fixture
def fresh_game():
    """Empty board, X to move."""
    return create_game()


@pytest.fixture
def won_game():
    """X wins along the top row."""
    game = create_game()
    for position, player in WIN_MOVES:
        game = apply_move(game, position, player)
    return game


@pytest.fixture
def drawn_game():
    """Full board with no line."""
    game = create_game()
    for position, player in DRAW_MOVES:
        game = apply_move(game, position, player)
    return game


@pytest.fixture
def database_url(tmp_path, monkeypatch):
    """Point the data layer at a throwaway SQLite file."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'tictactoe-test.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    monkeypatch.setenv("DB_CREATE_TABLES", "true")
    get_settings.cache_clear()
    yield url
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def db_session(database_url):
    """Session on a freshly created schema."""
    await init_db()
    await create_tables()
    async with session_scope() as session:
        yield session
    await close_db()
