"""
pokerroom Server - FastAPI HTTP layer and session storage
"""

from pokerroom.server.app import app, create_app
from pokerroom.server.store import SessionStore, InMemorySessionStore

__all__ = ["app", "create_app", "SessionStore", "InMemorySessionStore"]
