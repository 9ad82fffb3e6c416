"""
Texas Hold'em table rules and constants.

Positions follow a fixed scheme for every table size:

1. Small blind is the seat after the dealer button, big blind the seat
   after that (for two players the button therefore posts the big blind).

2. Preflop, the seat after the big blind acts first. On later streets the
   first unfolded seat after the button acts first.

3. A street closes when action returns to the first unfolded seat after the
   last aggressor and every unfolded seat has matched the table bet.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Tuple


class GamePhase(Enum):
    """Phases of a Texas Hold'em hand."""
    WAITING = auto()      # No hand has been dealt yet
    PREFLOP = auto()      # After hole cards dealt, before flop
    FLOP = auto()         # After 3 community cards
    TURN = auto()         # After 4th community card
    RIVER = auto()        # After 5th community card
    SHOWDOWN = auto()     # Hand is over


class ActionType(Enum):
    """Possible player actions."""
    FOLD = "FOLD"
    CHECK = "CHECK"
    CALL = "CALL"
    BET = "BET"
    RAISE = "RAISE"


# Default table settings
DEFAULT_STARTING_STACK = 1000
DEFAULT_SMALL_BLIND = 5
DEFAULT_BIG_BLIND = 10
DEFAULT_MAX_SEATS = 8
MIN_PLAYERS = 2
MAX_SEATS = 8

# Cards per phase
HOLE_CARDS = 2
FLOP_CARDS = 3
TURN_CARDS = 1
RIVER_CARDS = 1
TOTAL_COMMUNITY_CARDS = 5

# Cards revealed when leaving each betting street
STREET_CARDS = {
    GamePhase.PREFLOP: FLOP_CARDS,
    GamePhase.FLOP: TURN_CARDS,
    GamePhase.TURN: RIVER_CARDS,
    GamePhase.RIVER: 0,
}

NEXT_PHASE = {
    GamePhase.PREFLOP: GamePhase.FLOP,
    GamePhase.FLOP: GamePhase.TURN,
    GamePhase.TURN: GamePhase.RIVER,
    GamePhase.RIVER: GamePhase.SHOWDOWN,
}

BETTING_PHASES = (GamePhase.PREFLOP, GamePhase.FLOP, GamePhase.TURN, GamePhase.RIVER)


@dataclass(frozen=True)
class TableConfig:
    """
    Table parameters, fixed when the room is created.

    Attributes:
        starting_stack: Chips given to each player when they sit down
        small_blind: Small blind amount
        big_blind: Big blind amount
        max_seats: Maximum number of seats at the table
        rotate_button: Move the button one seat per hand instead of
            keeping it on seat 0
    """
    starting_stack: int = DEFAULT_STARTING_STACK
    small_blind: int = DEFAULT_SMALL_BLIND
    big_blind: int = DEFAULT_BIG_BLIND
    max_seats: int = DEFAULT_MAX_SEATS
    rotate_button: bool = False

    def __post_init__(self) -> None:
        if self.starting_stack <= 0:
            raise ValueError("starting_stack must be positive")
        if self.small_blind <= 0 or self.big_blind <= 0:
            raise ValueError("Blinds must be positive")
        if self.small_blind > self.big_blind:
            raise ValueError("small_blind cannot exceed big_blind")
        if not MIN_PLAYERS <= self.max_seats <= MAX_SEATS:
            raise ValueError(f"max_seats must be {MIN_PLAYERS}-{MAX_SEATS}")


def get_blind_positions(num_seats: int, dealer_position: int) -> Tuple[int, int]:
    """
    Calculate small blind and big blind seats.

    Args:
        num_seats: Number of seats at the table
        dealer_position: Seat index of the dealer button

    Returns:
        Tuple of (small_blind_position, big_blind_position)
    """
    if num_seats < MIN_PLAYERS:
        raise ValueError("Need at least 2 players")
    sb_pos = (dealer_position + 1) % num_seats
    bb_pos = (dealer_position + 2) % num_seats
    return sb_pos, bb_pos


def get_first_to_act_preflop(num_seats: int, dealer_position: int) -> int:
    """Seat after the big blind."""
    _, bb_pos = get_blind_positions(num_seats, dealer_position)
    return (bb_pos + 1) % num_seats


def get_min_raise(current_bet: int, big_blind: int) -> int:
    """
    Suggested minimum raise target shown to players.

    Doubling the table bet, or the big blind when nothing has been bet.
    Any amount above the table bet is accepted as a raise.
    """
    return current_bet * 2 if current_bet > 0 else big_blind
