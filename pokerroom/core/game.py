"""
Texas Hold'em Hand Engine - State Machine Implementation.

This module implements the betting-round state machine for one table:
- Seating players with a fixed starting stack
- Dealing a hand and posting blinds
- Player actions (fold, check, call, bet, raise) and turn order
- Street completion and phase transitions up to showdown

The engine is pure. ``TableState`` is a frozen value and every
``HandEngine`` operation returns a new one, or raises a ``PokerError``
before anything is built. Storage and locking belong to the caller.

Hand ranking and pot distribution are not part of the engine: a hand that
reaches SHOWDOWN keeps its pot until the next hand is dealt.
"""

from __future__ import annotations
from typing import List, Dict, Optional, Tuple, Any, Union
from dataclasses import dataclass, field, replace
import logging
import random

from pokerroom.core.card import Card, shuffled_deck, deal
from pokerroom.core.player import Seat
from pokerroom.core.rules import (
    GamePhase, ActionType, TableConfig,
    get_blind_positions, get_first_to_act_preflop, get_min_raise,
    HOLE_CARDS, STREET_CARDS, NEXT_PHASE, BETTING_PHASES, MIN_PLAYERS,
)
from pokerroom.core.errors import (
    RoomFull, DuplicateName, DuplicateSeat,
    NotEnoughPlayers, HandInProgress,
    NotYourTurn, IllegalCheck, IllegalBet, IllegalRaise, UnknownSeat, HandNotActive,
    PhaseError,
)


logger = logging.getLogger(__name__)

SMALL_BLIND_ACTION = "SMALL_BLIND"
BIG_BLIND_ACTION = "BIG_BLIND"


@dataclass(frozen=True)
class ActionRecord:
    """One entry of the current hand's action log."""
    seat_id: str
    action: str
    amount: int  # Chips moved into the pot
    phase: GamePhase

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seat_id": self.seat_id,
            "action": self.action,
            "amount": self.amount,
            "phase": self.phase.name,
        }


@dataclass(frozen=True)
class TableState:
    """
    Complete state of one table.

    Attributes:
        config: Table parameters (blinds, starting stack, seat limit)
        seats: Seats ordered by seat index (join order)
        community_cards: Board cards in dealt order
        deck: Undealt remainder of this hand's shuffled deck
        pot: Chips committed this hand
        current_street_bet: Amount a player must have in to stay in
        phase: Current phase of the hand
        active_seat_index: Seat whose turn it is, None when nobody is to act
        dealer_button_index: Seat holding the dealer button
        last_aggressor_index: Last seat to bet or raise this street
        street_resolved: True once betting on this street is finished
        hand_number: Number of hands dealt at this table
        action_log: Actions taken in the current hand
    """
    config: TableConfig = field(default_factory=TableConfig)
    seats: Tuple[Seat, ...] = ()
    community_cards: Tuple[Card, ...] = ()
    deck: Tuple[Card, ...] = ()
    pot: int = 0
    current_street_bet: int = 0
    phase: GamePhase = GamePhase.WAITING
    active_seat_index: Optional[int] = None
    dealer_button_index: int = 0
    last_aggressor_index: Optional[int] = None
    street_resolved: bool = False
    hand_number: int = 0
    action_log: Tuple[ActionRecord, ...] = ()

    @property
    def small_blind(self) -> int:
        return self.config.small_blind

    @property
    def big_blind(self) -> int:
        return self.config.big_blind

    @property
    def num_seats(self) -> int:
        return len(self.seats)

    @property
    def live_seats(self) -> List[Seat]:
        """Seats that have not folded."""
        return [s for s in self.seats if not s.folded]

    @property
    def active_seat(self) -> Optional[Seat]:
        """The seat whose turn it is."""
        if self.active_seat_index is None:
            return None
        return self.seats[self.active_seat_index]

    @property
    def total_chips(self) -> int:
        """Stacks plus pot; constant for the duration of a hand."""
        return sum(s.stack for s in self.seats) + self.pot

    def is_hand_running(self) -> bool:
        """Check if a hand is currently in progress."""
        return self.phase in BETTING_PHASES

    def awaiting_action(self) -> bool:
        """True when some seat has to act before the street can advance."""
        return (
            self.is_hand_running()
            and self.active_seat_index is not None
            and not self.street_resolved
        )

    def seat_by_id(self, seat_id: str) -> Optional[Seat]:
        for seat in self.seats:
            if seat.id == seat_id:
                return seat
        return None

    def to_dict(self, viewer_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Get the table state as seen by one player.

        Hole cards are included for the viewer's own seat, and for every
        seat still in the hand once it reaches showdown.

        Args:
            viewer_id: If specified, include private info for this seat
        """
        showdown = self.phase == GamePhase.SHOWDOWN
        players = []
        for seat in self.seats:
            visible = seat.id == viewer_id or (showdown and not seat.folded)
            players.append(seat.to_dict(hide_cards=not visible))

        active = self.active_seat
        public_info = {
            "phase": self.phase.name,
            "hand_number": self.hand_number,
            "pot": self.pot,
            "current_bet": self.current_street_bet,
            "board": [c.to_dict() for c in self.community_cards],
            "dealer_position": self.dealer_button_index,
            "active_seat_index": self.active_seat_index,
            "current_player": active.id if active and self.is_hand_running() else None,
            "last_aggressor_index": self.last_aggressor_index,
            "street_resolved": self.street_resolved,
            "small_blind": self.small_blind,
            "big_blind": self.big_blind,
            "max_seats": self.config.max_seats,
            "players": players,
            "actions": [a.to_dict() for a in self.action_log],
        }

        private_info: Dict[str, Any] = {}
        viewer = self.seat_by_id(viewer_id) if viewer_id else None
        if viewer is not None:
            private_info = {
                "seat_id": viewer.id,
                "hand": [c.to_dict() for c in viewer.hole_cards],
                "is_my_turn": self.awaiting_action() and active is not None and active.id == viewer.id,
                "available_moves": [a["type"] for a in legal_actions(self, viewer.id)],
                "chips_to_call": max(0, self.current_street_bet - viewer.current_street_bet),
                "min_raise": get_min_raise(self.current_street_bet, self.big_blind),
            }

        return {
            "public_info": public_info,
            "private_info": private_info,
        }


def next_live_index(seats: Tuple[Seat, ...], start: int) -> Optional[int]:
    """
    First unfolded seat strictly after ``start``, wrapping around.

    Returns ``start`` itself when every other seat has folded, and None
    when all seats have folded.
    """
    n = len(seats)
    for step in range(1, n + 1):
        idx = (start + step) % n
        if not seats[idx].folded:
            return idx
    return None


def closing_index(state: TableState) -> Optional[int]:
    """
    Seat at which the current street closes once all bets are matched.

    This is the first unfolded seat after the last aggressor. With no
    aggressor on the street it is the first unfolded seat after the button,
    the same seat that opened the street.
    """
    anchor = state.last_aggressor_index
    if anchor is None:
        anchor = state.dealer_button_index
    return next_live_index(state.seats, anchor)


def legal_actions(state: TableState, seat_id: str) -> List[Dict[str, Any]]:
    """
    Get legal actions for a seat.

    Returns an empty list unless it is this seat's turn on an open street.

    Returns:
        List of action dicts with type and amount hints
    """
    seat = state.active_seat
    if not state.awaiting_action() or seat is None or seat.id != seat_id:
        return []

    chips_to_call = state.current_street_bet - seat.current_street_bet
    actions: List[Dict[str, Any]] = [{"type": ActionType.FOLD.value}]

    if chips_to_call == 0:
        actions.append({"type": ActionType.CHECK.value})
    else:
        actions.append({
            "type": ActionType.CALL.value,
            "amount": chips_to_call,
        })

    if state.current_street_bet == 0:
        actions.append({
            "type": ActionType.BET.value,
            "min": state.big_blind,
            "max": max(seat.stack, state.big_blind),
        })
    else:
        actions.append({
            "type": ActionType.RAISE.value,
            "min": get_min_raise(state.current_street_bet, state.big_blind),
            "max": max(seat.stack + seat.current_street_bet, state.current_street_bet + 1),
        })

    return actions


class HandEngine:
    """
    Texas Hold'em hand engine implementing a state machine.

    Usage:
        engine = HandEngine()
        state = engine.new_table(TableConfig(small_blind=5, big_blind=10))
        state = engine.seat(state, "p1", "Alice")
        state = engine.seat(state, "p2", "Bob")
        state = engine.start_hand(state)

        while state.is_hand_running():
            if state.street_resolved:
                state = engine.advance_street(state)
                continue
            seat = state.active_seat
            state = engine.act(state, seat.id, choose_action(state, seat))

    The engine itself holds nothing but its random source.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Random source for shuffling; a fresh one is used when omitted
        """
        self.rng = rng or random.Random()

    def new_table(self, config: Optional[TableConfig] = None) -> TableState:
        """Create an empty table waiting for players."""
        return TableState(config=config or TableConfig())

    # ============= Seating =============

    def seat(self, state: TableState, seat_id: str, display_name: str) -> TableState:
        """
        Seat a new player with the table's starting stack.

        A player who joins during a hand sits folded until the next deal.

        Raises:
            RoomFull: The table has no free seat
            DuplicateName: Another seat already uses this name
            DuplicateSeat: This player is already seated
        """
        if state.num_seats >= state.config.max_seats:
            raise RoomFull(f"Table is full ({state.config.max_seats} seats)")
        if any(s.display_name == display_name for s in state.seats):
            raise DuplicateName(f"Name {display_name!r} is already taken")
        if state.seat_by_id(seat_id) is not None:
            raise DuplicateSeat(f"Player {seat_id} is already seated")

        index = state.num_seats
        new_seat = Seat(
            id=seat_id,
            display_name=display_name,
            stack=state.config.starting_stack,
            seat_index=index,
            folded=state.is_hand_running(),
            is_dealer_button=(index == 0),
        )
        logger.info(f"Seated {display_name} ({seat_id}) at seat {index}")
        return replace(state, seats=state.seats + (new_seat,))

    # ============= Hand start =============

    def start_hand(self, state: TableState) -> TableState:
        """
        Shuffle, deal hole cards and post blinds.

        The button stays on seat 0 unless the table rotates it, in which
        case it moves one seat for every hand after the first.

        Raises:
            NotEnoughPlayers: Fewer than two seats
            HandInProgress: The previous hand has not reached showdown
        """
        n = state.num_seats
        if n < MIN_PLAYERS:
            raise NotEnoughPlayers(f"Need at least {MIN_PLAYERS} players, have {n}")
        if state.phase not in (GamePhase.WAITING, GamePhase.SHOWDOWN):
            raise HandInProgress(f"Hand #{state.hand_number} is still in {state.phase.name}")

        dealer = 0
        if state.config.rotate_button and state.hand_number > 0:
            dealer = (state.dealer_button_index + 1) % n

        deck = shuffled_deck(self.rng)
        seats: List[Seat] = []
        for i, seat in enumerate(state.seats):
            cards, deck = deal(deck, HOLE_CARDS)
            seats.append(seat.reset_for_new_hand(cards, is_dealer_button=(i == dealer)))

        sb_pos, bb_pos = get_blind_positions(n, dealer)
        seats[sb_pos] = seats[sb_pos].commit(state.small_blind)
        seats[bb_pos] = seats[bb_pos].commit(state.big_blind)

        hand_number = state.hand_number + 1
        logger.info(
            f"Starting hand #{hand_number}: dealer={dealer} sb={sb_pos} bb={bb_pos}"
        )

        return replace(
            state,
            seats=tuple(seats),
            community_cards=(),
            deck=deck,
            pot=state.small_blind + state.big_blind,
            current_street_bet=state.big_blind,
            phase=GamePhase.PREFLOP,
            active_seat_index=get_first_to_act_preflop(n, dealer),
            dealer_button_index=dealer,
            last_aggressor_index=bb_pos,
            street_resolved=False,
            hand_number=hand_number,
            action_log=(
                ActionRecord(seats[sb_pos].id, SMALL_BLIND_ACTION, state.small_blind, GamePhase.PREFLOP),
                ActionRecord(seats[bb_pos].id, BIG_BLIND_ACTION, state.big_blind, GamePhase.PREFLOP),
            ),
        )

    # ============= Actions =============

    def act(
        self,
        state: TableState,
        seat_id: str,
        action: Union[ActionType, str],
        amount: Optional[int] = 0,
    ) -> TableState:
        """
        Apply one player action.

        Args:
            state: Current table state
            seat_id: Seat taking the action
            action: FOLD, CHECK, CALL, BET or RAISE
            amount: Total street bet for BET/RAISE (ignored otherwise)

        Raises:
            HandNotActive: No turn is pending
            UnknownSeat: seat_id is not at this table
            NotYourTurn: Another seat is to act
            IllegalCheck / IllegalBet / IllegalRaise: Action not allowed now
        """
        action = ActionType(action)
        amount = amount or 0

        if not state.awaiting_action():
            raise HandNotActive(f"No action expected in phase {state.phase.name}")
        if state.seat_by_id(seat_id) is None:
            raise UnknownSeat(f"Unknown seat: {seat_id}")

        idx = state.active_seat_index
        seat = state.seats[idx]
        if seat.id != seat_id:
            raise NotYourTurn(f"It is {seat.display_name}'s turn")

        seats = list(state.seats)
        table_bet = state.current_street_bet
        aggressor = state.last_aggressor_index
        moved = 0

        if action == ActionType.FOLD:
            seats[idx] = seat.fold()
            remaining = [s for s in seats if not s.folded]
            if len(remaining) == 1:
                logger.info(
                    f"Hand #{state.hand_number}: everyone folded to {remaining[0].display_name}"
                )
                return replace(
                    state,
                    seats=tuple(seats),
                    phase=GamePhase.SHOWDOWN,
                    active_seat_index=None,
                    street_resolved=False,
                    action_log=state.action_log + (
                        ActionRecord(seat_id, action.value, 0, state.phase),
                    ),
                )

        elif action == ActionType.CHECK:
            if table_bet != seat.current_street_bet:
                raise IllegalCheck(
                    f"Cannot check, must call ${table_bet - seat.current_street_bet}"
                )

        elif action == ActionType.CALL:
            moved = table_bet - seat.current_street_bet
            seats[idx] = seat.commit(moved)

        elif action == ActionType.BET:
            if table_bet != 0:
                raise IllegalBet("Cannot bet when there's already a bet, use RAISE")
            if amount <= 0:
                raise IllegalBet("Bet amount must be positive")
            moved = amount
            seats[idx] = seat.commit(moved)
            table_bet = amount
            aggressor = idx

        elif action == ActionType.RAISE:
            if amount <= table_bet:
                raise IllegalRaise(f"Raise must be above the current bet of ${table_bet}")
            moved = amount - seat.current_street_bet
            seats[idx] = seat.commit(moved)
            table_bet = amount
            aggressor = idx

        new_seats = tuple(seats)
        next_idx = next_live_index(new_seats, idx)

        next_state = replace(
            state,
            seats=new_seats,
            pot=state.pot + moved,
            current_street_bet=table_bet,
            active_seat_index=next_idx,
            last_aggressor_index=aggressor,
            action_log=state.action_log + (
                ActionRecord(seat_id, action.value, moved, state.phase),
            ),
        )

        if action != ActionType.FOLD and self._is_street_complete(next_state):
            next_state = replace(next_state, street_resolved=True)
            logger.info(f"Hand #{state.hand_number}: {state.phase.name} betting complete")

        logger.debug(f"{seat.display_name} {action.value} ${moved} (pot ${next_state.pot})")
        return next_state

    def expire_turn(self, state: TableState) -> TableState:
        """
        Fold the seat whose turn it is, e.g. after a turn timer ran out.

        Raises:
            HandNotActive: No turn is pending
        """
        if not state.awaiting_action():
            raise HandNotActive(f"No action expected in phase {state.phase.name}")
        seat = state.active_seat
        logger.info(f"Turn expired for {seat.display_name}, folding")
        return self.act(state, seat.id, ActionType.FOLD)

    def _is_street_complete(self, state: TableState) -> bool:
        """Action is back at the closing seat with every bet matched."""
        if state.active_seat_index != closing_index(state):
            return False
        return all(
            s.current_street_bet == state.current_street_bet
            for s in state.seats if not s.folded
        )

    # ============= Streets =============

    def advance_street(self, state: TableState) -> TableState:
        """
        Move to the next phase once betting on the current street is done.

        Deals the flop, turn or river (after a burn card) and opens a new
        betting round; from the river the hand goes to showdown.

        Raises:
            PhaseError: No hand is running or the street is still open
        """
        if not state.is_hand_running():
            raise PhaseError(f"Cannot advance from {state.phase.name}")
        if not state.street_resolved:
            raise PhaseError(f"Betting on {state.phase.name} is not finished")

        next_phase = NEXT_PHASE[state.phase]

        if next_phase == GamePhase.SHOWDOWN:
            logger.info(f"Hand #{state.hand_number}: showdown")
            return replace(
                state,
                phase=GamePhase.SHOWDOWN,
                active_seat_index=None,
                street_resolved=False,
            )

        _burned, deck = deal(state.deck, 1)
        revealed, deck = deal(deck, STREET_CARDS[state.phase])
        community = state.community_cards + revealed
        logger.info(
            f"Hand #{state.hand_number}: {next_phase.name} "
            f"[{' '.join(str(c) for c in community)}]"
        )

        seats = tuple(s.reset_for_new_street() for s in state.seats)
        return replace(
            state,
            seats=seats,
            community_cards=community,
            deck=deck,
            current_street_bet=0,
            phase=next_phase,
            active_seat_index=next_live_index(seats, state.dealer_button_index),
            last_aggressor_index=None,
            street_resolved=False,
        )

    # ============= Queries =============

    def legal_actions(self, state: TableState, seat_id: str) -> List[Dict[str, Any]]:
        """Legal actions for ``seat_id``; empty when it is not their turn."""
        if state.seat_by_id(seat_id) is None:
            raise UnknownSeat(f"Unknown seat: {seat_id}")
        return legal_actions(state, seat_id)
