"""
pokerroom Core - Pure Python Texas Hold'em betting engine

This module contains all table logic without any network dependencies.
"""

from pokerroom.core.card import Card, Rank, Suit
from pokerroom.core.player import Seat
from pokerroom.core.rules import GamePhase, ActionType, TableConfig
from pokerroom.core.game import HandEngine, TableState, ActionRecord, legal_actions
from pokerroom.core.errors import PokerError

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Seat",
    "GamePhase",
    "ActionType",
    "TableConfig",
    "HandEngine",
    "TableState",
    "ActionRecord",
    "legal_actions",
    "PokerError",
]
