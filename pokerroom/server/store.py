"""
Session storage for table state.

The engine never touches storage. The transport reads a room's state from a
``SessionStore``, runs an engine operation on it and writes the result back.
Mutations of one room are serialised through ``transaction()`` so two
commands arriving at the same time cannot lose each other's update.

Usage:
    store = InMemorySessionStore()
    await store.create("room-1", engine.new_table())

    async with store.transaction("room-1") as tx:
        tx.state = engine.seat(tx.state, "p1", "Alice")
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Dict, List
import asyncio
import logging

from pokerroom.core.game import TableState
from pokerroom.core.errors import RoomNotFound, RoomExists


logger = logging.getLogger(__name__)


@dataclass
class RoomTransaction:
    """Handle for one read-modify-write of a room."""
    room_id: str
    state: TableState


class SessionStore(ABC):
    """
    Keyed storage mapping a room id to its current table state.

    Implementations must serialise ``transaction()`` per room. Plain reads
    may run concurrently and see the last committed state.
    """

    @abstractmethod
    async def create(self, room_id: str, state: TableState) -> TableState:
        """Store the initial state of a new room. Raises RoomExists."""

    @abstractmethod
    async def get(self, room_id: str) -> TableState:
        """Current state of a room. Raises RoomNotFound."""

    @abstractmethod
    async def put(self, room_id: str, state: TableState) -> None:
        """Replace the state of an existing room. Raises RoomNotFound."""

    @abstractmethod
    def transaction(self, room_id: str):
        """
        Async context manager yielding a ``RoomTransaction``.

        Whatever ``tx.state`` holds when the block exits normally is
        committed; an exception discards it.
        """

    async def list_rooms(self) -> List[str]:
        return []


class InMemorySessionStore(SessionStore):
    """
    Process-local store with one asyncio lock per room.

    State values are immutable, so readers can be handed the stored object
    directly without copying.
    """

    def __init__(self):
        self._rooms: Dict[str, TableState] = {}
        self._locks: Dict[str, asyncio.Lock] = {}

    async def create(self, room_id: str, state: TableState) -> TableState:
        if room_id in self._rooms:
            raise RoomExists(f"Room {room_id} already exists")
        self._rooms[room_id] = state
        self._locks[room_id] = asyncio.Lock()
        logger.info(f"Created room {room_id}")
        return state

    async def get(self, room_id: str) -> TableState:
        try:
            return self._rooms[room_id]
        except KeyError:
            raise RoomNotFound(f"Room {room_id} not found") from None

    async def put(self, room_id: str, state: TableState) -> None:
        if room_id not in self._rooms:
            raise RoomNotFound(f"Room {room_id} not found")
        self._rooms[room_id] = state

    @asynccontextmanager
    async def transaction(self, room_id: str) -> AsyncIterator[RoomTransaction]:
        lock = self._locks.get(room_id)
        if lock is None:
            raise RoomNotFound(f"Room {room_id} not found")

        async with lock:
            tx = RoomTransaction(room_id=room_id, state=self._rooms[room_id])
            yield tx
            self._rooms[room_id] = tx.state

    async def list_rooms(self) -> List[str]:
        return list(self._rooms)

    def __contains__(self, room_id: str) -> bool:
        return room_id in self._rooms

    def __len__(self) -> int:
        return len(self._rooms)
