"""
Base Agent Interface for pokerroom.

An agent sits in one seat and picks actions from the legal actions the
engine offers. Agents see the same per-player view a remote client gets.

Usage:
    class MyAgent(BaseAgent):
        def act(self, table_view, legal_actions):
            return {"action": "CALL", "amount": 0}
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional


class BaseAgent(ABC):
    """
    Abstract base class for automated players.

    Attributes:
        seat_id: Seat this agent plays
        name: Display name used when seating the agent
    """

    def __init__(self, seat_id: str, name: Optional[str] = None):
        self.seat_id = seat_id
        self.name = name or f"Agent-{seat_id}"

    def observe(self, table_view: Dict[str, Any]) -> None:
        """
        Observe the table as seen from this seat.

        Called before every decision. Override to keep history.
        """
        pass

    @abstractmethod
    def act(
        self,
        table_view: Dict[str, Any],
        legal_actions: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        """
        Choose an action.

        Args:
            table_view: ``TableState.to_dict(viewer_id=self.seat_id)``
            legal_actions: List of legal action dicts, each containing:
                - type: FOLD, CHECK, CALL, BET or RAISE
                - amount: Chips owed (for CALL)
                - min/max: Suggested range (for BET/RAISE)

        Returns:
            Action dictionary, e.g. {"action": "RAISE", "amount": 40}
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.seat_id}, {self.name})"
