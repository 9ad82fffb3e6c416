"""
pokerroom Agents - automated players

This module provides the base agent interface, simple rule-based agents and
a driver that plays a hand through the engine with them.
"""

from pokerroom.agents.base import BaseAgent
from pokerroom.agents.random_agent import RandomAgent, CallAgent
from pokerroom.agents.runner import play_hand

__all__ = ["BaseAgent", "RandomAgent", "CallAgent", "play_hand"]
