"""
HTTP API Routes for pokerroom.

Each mutating route runs inside a store transaction for its room: read the
current state, apply one engine operation, commit the result. Engine errors
propagate as ``PokerError`` and are turned into JSON by the handler
installed in ``pokerroom.server.app``; nothing is committed in that case.
"""

from typing import Dict, Any, Optional
import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Request

from pokerroom.core.game import HandEngine
from pokerroom.server.store import SessionStore
from pokerroom.server.schemas import (
    CreateRoomRequest, SeatRequest, ActionRequest,
    TableStateSchema, SeatResponse, LegalActionsResponse, RoomListResponse,
    ErrorSchema, table_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rooms", tags=["rooms"])

ERROR_RESPONSES = {
    400: {"model": ErrorSchema},
    403: {"model": ErrorSchema},
    404: {"model": ErrorSchema},
    409: {"model": ErrorSchema},
}


def get_store(request: Request) -> SessionStore:
    """The session store attached to the application."""
    return request.app.state.store


def get_engine(request: Request) -> HandEngine:
    """The hand engine attached to the application."""
    return request.app.state.engine


@router.get("", response_model=RoomListResponse)
async def list_rooms(store: SessionStore = Depends(get_store)) -> Dict[str, Any]:
    """List the ids of all rooms."""
    return {"rooms": await store.list_rooms()}


@router.post("", status_code=201, response_model=TableStateSchema, responses=ERROR_RESPONSES)
async def create_room(
    req: CreateRoomRequest,
    store: SessionStore = Depends(get_store),
    engine: HandEngine = Depends(get_engine),
) -> Dict[str, Any]:
    """
    Create a new table.

    Blinds, starting stack and seat count default to 5/10, 1000 and 8.
    """
    try:
        config = req.to_config()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    room_id = req.room_id or f"room-{uuid.uuid4().hex[:8]}"
    state = await store.create(room_id, engine.new_table(config))
    return table_response(room_id, state.to_dict())


@router.get("/{room_id}", response_model=TableStateSchema, responses=ERROR_RESPONSES)
async def get_state(
    room_id: str,
    seat_id: Optional[str] = None,
    store: SessionStore = Depends(get_store),
) -> Dict[str, Any]:
    """
    Get the current table state.

    Pass ``seat_id`` to include that seat's hole cards and options.
    """
    state = await store.get(room_id)
    return table_response(room_id, state.to_dict(viewer_id=seat_id))


@router.post("/{room_id}/seats", status_code=201, response_model=SeatResponse, responses=ERROR_RESPONSES)
async def seat_player(
    room_id: str,
    req: SeatRequest,
    store: SessionStore = Depends(get_store),
    engine: HandEngine = Depends(get_engine),
) -> Dict[str, Any]:
    """Take a seat; a seat id is generated when none is given."""
    seat_id = req.seat_id or uuid.uuid4().hex
    async with store.transaction(room_id) as tx:
        tx.state = engine.seat(tx.state, seat_id, req.display_name)
    return {"seat_id": seat_id, **table_response(room_id, tx.state.to_dict(viewer_id=seat_id))}


@router.post("/{room_id}/start_hand", response_model=TableStateSchema, responses=ERROR_RESPONSES)
async def start_hand(
    room_id: str,
    store: SessionStore = Depends(get_store),
    engine: HandEngine = Depends(get_engine),
) -> Dict[str, Any]:
    """Shuffle, deal and post blinds."""
    async with store.transaction(room_id) as tx:
        tx.state = engine.start_hand(tx.state)
    return table_response(room_id, tx.state.to_dict())


@router.post("/{room_id}/actions", response_model=TableStateSchema, responses=ERROR_RESPONSES)
async def take_action(
    room_id: str,
    req: ActionRequest,
    store: SessionStore = Depends(get_store),
    engine: HandEngine = Depends(get_engine),
) -> Dict[str, Any]:
    """
    Take a betting action for a seat.

    When the response shows ``street_resolved`` the client should call
    ``/advance``.
    """
    async with store.transaction(room_id) as tx:
        tx.state = engine.act(tx.state, req.seat_id, req.action, req.amount)
    return table_response(room_id, tx.state.to_dict(viewer_id=req.seat_id))


@router.post("/{room_id}/advance", response_model=TableStateSchema, responses=ERROR_RESPONSES)
async def advance_street(
    room_id: str,
    store: SessionStore = Depends(get_store),
    engine: HandEngine = Depends(get_engine),
) -> Dict[str, Any]:
    """Deal the next street once betting is finished."""
    async with store.transaction(room_id) as tx:
        tx.state = engine.advance_street(tx.state)
    return table_response(room_id, tx.state.to_dict())


@router.post("/{room_id}/expire_turn", response_model=TableStateSchema, responses=ERROR_RESPONSES)
async def expire_turn(
    room_id: str,
    store: SessionStore = Depends(get_store),
    engine: HandEngine = Depends(get_engine),
) -> Dict[str, Any]:
    """Fold the seat whose turn it is (turn timer ran out)."""
    async with store.transaction(room_id) as tx:
        tx.state = engine.expire_turn(tx.state)
    return table_response(room_id, tx.state.to_dict())


@router.get("/{room_id}/legal_actions", response_model=LegalActionsResponse, responses=ERROR_RESPONSES)
async def get_legal_actions(
    room_id: str,
    seat_id: str,
    store: SessionStore = Depends(get_store),
    engine: HandEngine = Depends(get_engine),
) -> Dict[str, Any]:
    """Legal actions for a seat; empty when it is not their turn."""
    state = await store.get(room_id)
    return {"seat_id": seat_id, "actions": engine.legal_actions(state, seat_id)}
