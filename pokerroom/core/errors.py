"""
Typed errors raised by the hand engine and the session store.

Every failure is an expected condition: the caller gets a ``PokerError``
subclass with a stable ``code`` and the HTTP status the transport should
answer with. The engine raises before building any new state, so a
rejected command never changes a table.
"""


class PokerError(Exception):
    """Base class for all rejected commands."""
    code = "PokerError"
    status_code = 400

    def __init__(self, message: str = ""):
        super().__init__(message or self.code)
        self.message = message or self.code

    def to_dict(self) -> dict:
        return {"error": self.code, "detail": self.message}


# ============= Seating =============

class SeatError(PokerError):
    status_code = 409


class RoomFull(SeatError):
    code = "RoomFull"


class DuplicateName(SeatError):
    code = "DuplicateName"


class DuplicateSeat(SeatError):
    code = "DuplicateSeat"


# ============= Starting a hand =============

class StartError(PokerError):
    status_code = 409


class NotEnoughPlayers(StartError):
    code = "NotEnoughPlayers"


class HandInProgress(StartError):
    code = "HandInProgress"


# ============= Actions =============

class ActionError(PokerError):
    pass


class NotYourTurn(ActionError):
    code = "NotYourTurn"
    status_code = 403


class IllegalCheck(ActionError):
    code = "IllegalCheck"


class IllegalBet(ActionError):
    code = "IllegalBet"


class IllegalRaise(ActionError):
    code = "IllegalRaise"


class UnknownSeat(ActionError):
    code = "UnknownSeat"
    status_code = 404


class HandNotActive(ActionError):
    code = "HandNotActive"
    status_code = 409


# ============= Streets =============

class PhaseError(PokerError):
    code = "PhaseError"
    status_code = 409


# ============= Session store =============

class StoreError(PokerError):
    pass


class RoomNotFound(StoreError):
    code = "NotFound"
    status_code = 404


class RoomExists(StoreError):
    code = "RoomExists"
    status_code = 409
