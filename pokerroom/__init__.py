"""
pokerroom - Multiplayer Texas Hold'em Rooms

A Texas Hold'em table server with:
- A pure, immutable betting-round state machine
- A per-room session store that serialises commands
- A FastAPI HTTP API for seating, dealing and betting

Usage:
    from pokerroom.core import HandEngine, TableConfig, ActionType
    from pokerroom.agents import BaseAgent, RandomAgent
"""

__version__ = "0.1.0"

from pokerroom.core.card import Card
from pokerroom.core.player import Seat
from pokerroom.core.rules import GamePhase, ActionType, TableConfig
from pokerroom.core.game import HandEngine, TableState

__all__ = [
    "Card",
    "Seat",
    "GamePhase",
    "ActionType",
    "TableConfig",
    "HandEngine",
    "TableState",
    "__version__",
]
