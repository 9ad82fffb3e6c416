"""
Shared helpers for building tables and scripting hands in tests.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from pokerroom.core.game import HandEngine, TableState


def seat_players(engine: HandEngine, state: TableState, count: int) -> TableState:
    """Seat ``count`` players with ids p0..pN and names Player0..PlayerN."""
    for i in range(count):
        state = engine.seat(state, f"p{i}", f"Player{i}")
    return state


def perform_actions(
    engine: HandEngine,
    state: TableState,
    actions: Iterable[Tuple[str, str, Optional[int]]],
) -> TableState:
    """Apply a scripted sequence of (seat_id, action, amount)."""
    for seat_id, action, amount in actions:
        state = engine.act(state, seat_id, action, amount)
    return state


def check_down(engine: HandEngine, state: TableState) -> TableState:
    """Check or call every remaining street through to showdown."""
    while state.is_hand_running():
        if state.street_resolved:
            state = engine.advance_street(state)
            continue
        seat = state.active_seat
        action = "CHECK" if seat.current_street_bet == state.current_street_bet else "CALL"
        state = engine.act(state, seat.id, action)
    return state
