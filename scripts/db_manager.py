#!/usr/bin/env python3
"""
Database management utility script.

Usage:
    python scripts/db_manager.py init     # Create tables
    python scripts/db_manager.py reset    # Drop and recreate tables (DEV ONLY!)
    python scripts/db_manager.py test     # Test connection
    python scripts/db_manager.py stats    # Show game counts by status
"""

import asyncio
import sys

from sqlalchemy import text

from tictactoe.core import GameStatus
from tictactoe.data import (
    GameRepository,
    close_db,
    create_tables,
    drop_tables,
    get_engine,
    get_settings,
    init_db,
    session_scope,
)


async def init():
    """Initialize database connection and create tables."""
    print("Initializing database...")
    await init_db()
    await create_tables()
    print("Tables created (running Alembic migrations is recommended)")
    await close_db()


async def reset():
    """Drop all tables and recreate them (DESTRUCTIVE!)."""
    print("WARNING: This will DELETE ALL GAMES!")
    response = input("Are you sure? Type 'yes' to continue: ")

    if response.lower() != "yes":
        print("Aborted")
        return

    await init_db()
    await drop_tables()
    print("Tables dropped")
    await create_tables()
    print("Tables created")
    await close_db()


async def test():
    """Test database connection."""
    print(f"Testing database connection: {get_settings().safe_url}")

    try:
        await init_db()
        dialect = get_engine().dialect.name
        query = "SELECT sqlite_version()" if dialect == "sqlite" else "SELECT version()"

        async with session_scope() as session:
            result = await session.execute(text(query))
            print(f"Connected to {dialect}: {result.scalar()}")

        await close_db()
        print("Connection test successful")

    except Exception as e:
        print(f"Connection failed: {e}")
        await close_db()
        sys.exit(1)


async def stats():
    """Show database statistics."""
    await init_db()

    async with session_scope() as session:
        repo = GameRepository(session)
        print(f"Total games: {await repo.count_games()}")
        for status in GameStatus:
            print(f"   - {status.value}: {await repo.count_games(status.value)}")

    await close_db()


async def main():
    """Main entry point."""
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    command = sys.argv[1].lower()

    commands = {
        "init": init,
        "reset": reset,
        "test": test,
        "stats": stats,
    }

    if command not in commands:
        print(f"Unknown command: {command}")
        print(__doc__)
        sys.exit(1)

    await commands[command]()


if __name__ == "__main__":
    asyncio.run(main())
