"""
Pytest configuration and shared fixtures for pokerroom tests.
"""

import random

import pytest
from fastapi.testclient import TestClient

from pokerroom.core.card import Card, Rank, Suit
from pokerroom.core.game import HandEngine
from pokerroom.core.rules import TableConfig
from pokerroom.server.app import create_app
from pokerroom.server.store import InMemorySessionStore

from tests.helpers import seat_players


@pytest.fixture
def engine():
    """Engine with a seeded random source."""
    return HandEngine(rng=random.Random(1234))


@pytest.fixture
def empty_table(engine):
    """A table with default parameters (blinds 5/10, stack 1000, 8 seats)."""
    return engine.new_table(TableConfig())


@pytest.fixture
def two_player_table(engine, empty_table):
    """Two seated players, no hand dealt."""
    return seat_players(engine, empty_table, 2)


@pytest.fixture
def three_player_table(engine, empty_table):
    """Three seated players, no hand dealt."""
    return seat_players(engine, empty_table, 3)


@pytest.fixture
def six_player_table(engine, empty_table):
    """Six seated players, no hand dealt."""
    return seat_players(engine, empty_table, 6)


@pytest.fixture
def ace_of_spades():
    return Card(Rank.ACE, Suit.SPADES)


@pytest.fixture
def client():
    """HTTP client against a fresh app with an in-memory store."""
    app = create_app(
        store=InMemorySessionStore(),
        engine=HandEngine(rng=random.Random(99)),
    )
    with TestClient(app) as test_client:
        yield test_client
