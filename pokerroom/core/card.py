"""
Card and deck helpers for Texas Hold'em.

Cards are immutable values so they can live inside frozen table state.
A deck is a plain tuple holding each of the 52 cards exactly once; dealing
returns the drawn cards together with the remaining tuple instead of
mutating anything.
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple
from enum import IntEnum


class Suit(IntEnum):
    """Card suits."""
    CLUBS = 0     # ♣
    DIAMONDS = 1  # ♦
    HEARTS = 2    # ♥
    SPADES = 3    # ♠


class Rank(IntEnum):
    """Card ranks from 2 (lowest) to Ace (highest)."""
    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12


SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}

SUIT_CHARS = {
    Suit.CLUBS: "c",
    Suit.DIAMONDS: "d",
    Suit.HEARTS: "h",
    Suit.SPADES: "s",
}

# Labels shown to players; "10" rather than "T"
RANK_LABELS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

LABEL_TO_RANK = {v: k for k, v in RANK_LABELS.items()}
LABEL_TO_RANK["T"] = Rank.TEN
CHAR_TO_SUIT = {v: k for k, v in SUIT_CHARS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}

DECK_SIZE = 52


@dataclass(frozen=True, order=True)
class Card:
    """
    A playing card represented as (rank, suit).

    Cards can be created from:
    - Rank and Suit enums: Card(Rank.ACE, Suit.SPADES)
    - String notation: Card.from_string("As"), Card.from_string("10♥")
    """
    rank: Rank
    suit: Suit

    @classmethod
    def from_string(cls, s: str) -> Card:
        """
        Create a card from string notation.

        The last character is the suit (letter or symbol), everything
        before it is the rank ("2".."10", "T", "J", "Q", "K", "A").
        """
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_part = s[:-1].upper()
        suit_part = s[-1]

        if rank_part not in LABEL_TO_RANK:
            raise ValueError(f"Invalid rank: {rank_part}")

        if suit_part.lower() in CHAR_TO_SUIT:
            suit = CHAR_TO_SUIT[suit_part.lower()]
        elif suit_part in SYMBOL_TO_SUIT:
            suit = SYMBOL_TO_SUIT[suit_part]
        else:
            raise ValueError(f"Invalid suit: {suit_part}")

        return cls(LABEL_TO_RANK[rank_part], suit)

    def __repr__(self) -> str:
        return f"Card({self.short_str})"

    def __str__(self) -> str:
        return f"{RANK_LABELS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    @property
    def short_str(self) -> str:
        """Short ASCII string like 'As', 'Th'."""
        rank = "T" if self.rank == Rank.TEN else RANK_LABELS[self.rank]
        return f"{rank}{SUIT_CHARS[self.suit]}"

    @property
    def color(self) -> str:
        """Return 'red' for hearts/diamonds, 'black' for clubs/spades."""
        return "red" if self.suit in (Suit.HEARTS, Suit.DIAMONDS) else "black"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "rank": RANK_LABELS[self.rank],
            "suit": SUIT_SYMBOLS[self.suit],
            "text": str(self),
            "color": self.color,
        }


def ordered_deck() -> Tuple[Card, ...]:
    """All 52 cards in a fixed order."""
    return tuple(Card(rank, suit) for suit in Suit for rank in Rank)


def shuffled_deck(rng: Optional[random.Random] = None) -> Tuple[Card, ...]:
    """
    A uniformly random permutation of the 52 cards.

    Args:
        rng: Random source; the module-level generator is used when omitted
    """
    cards = list(ordered_deck())
    (rng or random).shuffle(cards)
    return tuple(cards)


def deal(deck: Tuple[Card, ...], n: int = 1) -> Tuple[Tuple[Card, ...], Tuple[Card, ...]]:
    """
    Draw n cards from the top of a deck.

    Returns:
        (dealt cards, remaining deck)

    Raises:
        ValueError: If not enough cards remain.
    """
    if n > len(deck):
        raise ValueError(f"Cannot deal {n} cards, only {len(deck)} remain")
    return deck[:n], deck[n:]


def parse_cards(cards_str: str) -> List[Card]:
    """
    Parse space-separated cards, e.g. "As Kh 10d" or "A♠ K♥ 10♦".
    """
    return [Card.from_string(s) for s in cards_str.split()]
