"""
Simple rule-based agents.

RandomAgent makes random legal moves, CallAgent always checks or calls.
Both are used to drive tables in simulations and tests.
"""

import random
from typing import Dict, List, Any, Optional

from pokerroom.agents.base import BaseAgent


class RandomAgent(BaseAgent):
    """
    An agent that selects random legal actions.

    The agent has configurable tendencies:
    - fold_probability: How likely to fold when possible
    - raise_probability: How likely to bet/raise instead of check/call
    """

    def __init__(
        self,
        seat_id: str,
        name: Optional[str] = None,
        fold_probability: float = 0.1,
        raise_probability: float = 0.3,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(seat_id, name or f"Random-{seat_id}")
        self.fold_probability = fold_probability
        self.raise_probability = raise_probability
        self.rng = rng or random.Random()

    def act(
        self,
        table_view: Dict[str, Any],
        legal_actions: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        if not legal_actions:
            return {"action": "FOLD", "amount": 0}

        action_types = [a["type"] for a in legal_actions]
        roll = self.rng.random()

        if "FOLD" in action_types and roll < self.fold_probability:
            return {"action": "FOLD", "amount": 0}

        raise_actions = [a for a in legal_actions if a["type"] in ("RAISE", "BET")]
        if raise_actions and roll < self.fold_probability + self.raise_probability:
            action = self.rng.choice(raise_actions)
            min_amount = action["min"]
            max_amount = max(action.get("max", min_amount), min_amount)
            return {"action": action["type"], "amount": self.rng.randint(min_amount, max_amount)}

        if "CHECK" in action_types:
            return {"action": "CHECK", "amount": 0}

        call_action = next(a for a in legal_actions if a["type"] == "CALL")
        return {"action": "CALL", "amount": call_action["amount"]}


class CallAgent(BaseAgent):
    """An agent that always checks or calls."""

    def __init__(self, seat_id: str, name: Optional[str] = None):
        super().__init__(seat_id, name or f"Caller-{seat_id}")

    def act(
        self,
        table_view: Dict[str, Any],
        legal_actions: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        action_types = [a["type"] for a in legal_actions]

        if "CHECK" in action_types:
            return {"action": "CHECK", "amount": 0}

        if "CALL" in action_types:
            call_action = next(a for a in legal_actions if a["type"] == "CALL")
            return {"action": "CALL", "amount": call_action["amount"]}

        return {"action": "FOLD", "amount": 0}
