"""
Pydantic schemas for API request/response validation.
"""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field

from pokerroom.core.rules import (
    ActionType, TableConfig,
    DEFAULT_STARTING_STACK, DEFAULT_SMALL_BLIND, DEFAULT_BIG_BLIND,
    DEFAULT_MAX_SEATS, MIN_PLAYERS, MAX_SEATS,
)


# ============= Request Schemas =============

class CreateRoomRequest(BaseModel):
    """Request to create a new table."""
    room_id: Optional[str] = Field(default=None, min_length=1, max_length=64)
    starting_stack: int = Field(gt=0, default=DEFAULT_STARTING_STACK)
    small_blind: int = Field(gt=0, default=DEFAULT_SMALL_BLIND)
    big_blind: int = Field(gt=0, default=DEFAULT_BIG_BLIND)
    max_seats: int = Field(ge=MIN_PLAYERS, le=MAX_SEATS, default=DEFAULT_MAX_SEATS)
    rotate_button: bool = False

    def to_config(self) -> TableConfig:
        return TableConfig(
            starting_stack=self.starting_stack,
            small_blind=self.small_blind,
            big_blind=self.big_blind,
            max_seats=self.max_seats,
            rotate_button=self.rotate_button,
        )


class SeatRequest(BaseModel):
    """Request to take a seat at a table."""
    display_name: str = Field(..., min_length=1, max_length=32)
    seat_id: Optional[str] = Field(default=None, min_length=1, max_length=64)


class ActionRequest(BaseModel):
    """Request to take a betting action."""
    seat_id: str
    action: ActionType = Field(..., description="Action type: FOLD, CHECK, CALL, BET, RAISE")
    amount: Optional[int] = Field(default=0, ge=0, description="Total street bet for BET/RAISE")


# ============= Response Schemas =============

class CardSchema(BaseModel):
    """Card representation."""
    rank: str
    suit: str
    text: str
    color: str


class PlayerPublicSchema(BaseModel):
    """Seat information visible to everyone."""
    id: str
    name: str
    seat: int
    stack: int
    bet: int
    folded: bool
    is_dealer: bool
    card_count: int
    cards: Optional[List[CardSchema]] = None


class ActionRecordSchema(BaseModel):
    seat_id: str
    action: str
    amount: int
    phase: str


class PublicInfoSchema(BaseModel):
    """Public table information."""
    phase: str
    hand_number: int
    pot: int
    current_bet: int
    board: List[CardSchema]
    dealer_position: int
    active_seat_index: Optional[int] = None
    current_player: Optional[str] = None
    last_aggressor_index: Optional[int] = None
    street_resolved: bool
    small_blind: int
    big_blind: int
    max_seats: int
    players: List[PlayerPublicSchema]
    actions: List[ActionRecordSchema]


class PrivateInfoSchema(BaseModel):
    """Private information for the requesting seat."""
    seat_id: Optional[str] = None
    hand: List[CardSchema] = []
    is_my_turn: bool = False
    available_moves: List[str] = []
    chips_to_call: int = 0
    min_raise: int = 0


class TableStateSchema(BaseModel):
    """Table state as seen by one seat (or a spectator)."""
    room_id: str
    public_info: PublicInfoSchema
    private_info: PrivateInfoSchema


class SeatResponse(TableStateSchema):
    """Table state after seating, plus the id assigned to the new seat."""
    seat_id: str


class LegalActionSchema(BaseModel):
    """Available action."""
    type: str
    amount: Optional[int] = None
    min: Optional[int] = None
    max: Optional[int] = None


class LegalActionsResponse(BaseModel):
    seat_id: str
    actions: List[LegalActionSchema]


class RoomListResponse(BaseModel):
    rooms: List[str]


class ErrorSchema(BaseModel):
    """Error response."""
    error: str
    detail: Optional[str] = None


def table_response(room_id: str, view: Dict[str, Any]) -> Dict[str, Any]:
    """Attach the room id to a ``TableState.to_dict()`` view."""
    return {"room_id": room_id, **view}
