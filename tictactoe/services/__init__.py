"""
Application services layer.

Provides use-case oriented services that glue the move engine with persistence.
"""

from .game_service import GameService

__all__ = ["GameService"]
