"""
Tests for the in-memory session store.
"""

import asyncio

import pytest
from pokerroom.core.errors import RoomNotFound, RoomExists, IllegalCheck
from pokerroom.core.game import HandEngine
from pokerroom.server.store import InMemorySessionStore


def run(coro):
    return asyncio.run(coro)


class TestInMemorySessionStore:

    def test_create_and_get(self):
        store = InMemorySessionStore()
        state = HandEngine().new_table()

        async def scenario():
            await store.create("room-1", state)
            return await store.get("room-1")

        assert run(scenario()) is state
        assert "room-1" in store
        assert len(store) == 1

    def test_get_missing_room(self):
        with pytest.raises(RoomNotFound):
            run(InMemorySessionStore().get("nope"))

    def test_create_twice(self):
        store = InMemorySessionStore()
        state = HandEngine().new_table()

        async def scenario():
            await store.create("room-1", state)
            await store.create("room-1", state)

        with pytest.raises(RoomExists):
            run(scenario())

    def test_put_requires_room(self):
        with pytest.raises(RoomNotFound):
            run(InMemorySessionStore().put("nope", HandEngine().new_table()))

    def test_list_rooms(self):
        store = InMemorySessionStore()
        engine = HandEngine()

        async def scenario():
            await store.create("a", engine.new_table())
            await store.create("b", engine.new_table())
            return await store.list_rooms()

        assert run(scenario()) == ["a", "b"]

    def test_transaction_commits(self):
        store = InMemorySessionStore()
        engine = HandEngine()

        async def scenario():
            await store.create("room-1", engine.new_table())
            async with store.transaction("room-1") as tx:
                tx.state = engine.seat(tx.state, "p0", "Alice")
            return await store.get("room-1")

        assert [s.id for s in run(scenario()).seats] == ["p0"]

    def test_transaction_discards_on_error(self):
        store = InMemorySessionStore()
        engine = HandEngine()

        async def scenario():
            await store.create("room-1", engine.new_table())
            async with store.transaction("room-1") as tx:
                tx.state = engine.seat(tx.state, "p0", "Alice")
                tx.state = engine.seat(tx.state, "p1", "Bob")
                tx.state = engine.start_hand(tx.state)
            before = await store.get("room-1")
            try:
                async with store.transaction("room-1") as tx:
                    tx.state = engine.act(tx.state, "p1", "CALL")
                    tx.state = engine.act(tx.state, "p0", "RAISE", 50)
                    engine.act(tx.state, "p1", "CHECK")
            except IllegalCheck:
                pass
            return before, await store.get("room-1")

        before, after = run(scenario())
        assert after is before
        assert after.pot == 15

    def test_transaction_missing_room(self):
        store = InMemorySessionStore()

        async def scenario():
            async with store.transaction("nope"):
                pass

        with pytest.raises(RoomNotFound):
            run(scenario())

    def test_concurrent_transactions_are_serialised(self):
        """Each seating sees the previous one's result; no update is lost."""
        store = InMemorySessionStore()
        engine = HandEngine()

        async def join(i):
            async with store.transaction("room-1") as tx:
                state = tx.state
                await asyncio.sleep(0)
                tx.state = engine.seat(state, f"p{i}", f"Player{i}")

        async def scenario():
            await store.create("room-1", engine.new_table())
            await asyncio.gather(*(join(i) for i in range(8)))
            return await store.get("room-1")

        state = run(scenario())
        assert len(state.seats) == 8
        assert sorted(s.id for s in state.seats) == sorted(f"p{i}" for i in range(8))
        assert [s.seat_index for s in state.seats] == list(range(8))
