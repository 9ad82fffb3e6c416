"""
Drive a hand through the engine with agents in every seat.
"""

from typing import Callable, Dict, Optional
import logging

from pokerroom.agents.base import BaseAgent
from pokerroom.core.game import HandEngine, TableState, legal_actions

logger = logging.getLogger(__name__)


def play_hand(
    engine: HandEngine,
    state: TableState,
    agents: Dict[str, BaseAgent],
    max_actions: int = 500,
    on_state: Optional[Callable[[TableState], None]] = None,
) -> TableState:
    """
    Deal a hand and play it until showdown.

    Streets are advanced as soon as they resolve. ``on_state`` is called
    with every intermediate state, which tests use to check invariants.

    Args:
        engine: Engine used for every transition
        state: Table in WAITING or SHOWDOWN with agents seated
        agents: Agent for each seat id
        max_actions: Safety limit on the number of actions

    Returns:
        The table at SHOWDOWN
    """
    state = engine.start_hand(state)
    if on_state:
        on_state(state)

    for _ in range(max_actions):
        if not state.is_hand_running():
            logger.debug(f"Hand #{state.hand_number} finished, pot ${state.pot}")
            return state

        if state.street_resolved:
            state = engine.advance_street(state)
        else:
            seat = state.active_seat
            agent = agents[seat.id]
            view = state.to_dict(viewer_id=seat.id)
            agent.observe(view)
            decision = agent.act(view, legal_actions(state, seat.id))
            state = engine.act(state, seat.id, decision["action"], decision.get("amount", 0))

        if on_state:
            on_state(state)

    raise RuntimeError(f"Hand #{state.hand_number} did not finish in {max_actions} actions")
