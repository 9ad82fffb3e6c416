"""
Seat value for a Texas Hold'em table.

A seat records one player's place at the table:
- Stack (chip count, not clamped at zero)
- Hole cards
- Chips committed on the current street
- Whether the player has folded this hand
"""

from __future__ import annotations
from typing import Tuple, Dict, Any
from dataclasses import dataclass, replace

from pokerroom.core.card import Card


@dataclass(frozen=True)
class Seat:
    """
    A player sitting at the table.

    Seats are immutable; the helpers below return updated copies.

    Attributes:
        id: Stable identity of the player
        display_name: Name shown to other players, unique per table
        stack: Current chip count
        seat_index: Position at the table, fixed at join time
        hole_cards: The player's private cards (0 or 2)
        current_street_bet: Amount committed on the current street
        folded: True once the player folded this hand
        is_dealer_button: True for the seat holding the button
    """
    id: str
    display_name: str
    stack: int
    seat_index: int
    hole_cards: Tuple[Card, ...] = ()
    current_street_bet: int = 0
    folded: bool = False
    is_dealer_button: bool = False

    def reset_for_new_hand(self, hole_cards: Tuple[Card, ...], is_dealer_button: bool) -> Seat:
        """Fresh cards, no bet, back in the hand."""
        return replace(
            self,
            hole_cards=hole_cards,
            current_street_bet=0,
            folded=False,
            is_dealer_button=is_dealer_button,
        )

    def reset_for_new_street(self) -> Seat:
        return replace(self, current_street_bet=0)

    def commit(self, amount: int) -> Seat:
        """
        Move chips from the stack to this street's bet.

        The stack is not clamped and may go below zero.
        """
        return replace(
            self,
            stack=self.stack - amount,
            current_street_bet=self.current_street_bet + amount,
        )

    def fold(self) -> Seat:
        return replace(self, folded=True)

    def to_dict(self, hide_cards: bool = True) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Args:
            hide_cards: If True, hole cards are replaced by their count
        """
        result = {
            "id": self.id,
            "name": self.display_name,
            "seat": self.seat_index,
            "stack": self.stack,
            "bet": self.current_street_bet,
            "folded": self.folded,
            "is_dealer": self.is_dealer_button,
            "card_count": len(self.hole_cards),
        }

        if not hide_cards and self.hole_cards:
            result["cards"] = [card.to_dict() for card in self.hole_cards]

        return result

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.hole_cards) if self.hole_cards else "??"
        return f"Seat {self.seat_index} {self.display_name} [{cards_str}] ${self.stack}"
