"""
Tic-tac-toe game service.

A deterministic move engine with async SQLAlchemy persistence and a FastAPI
transport layer.
"""

__version__ = "0.1.0"
