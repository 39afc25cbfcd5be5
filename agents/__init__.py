"""
Automated players for Message Battleship.

This module provides:
- BaseAgent: Abstract interface for all agents
- RandomAgent: Random placement and attacks, for testing and simulations
- Registry helpers to build agents from a type key
"""

from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .registry import AGENT_REGISTRY, create_agent, register_agent, resolve_agent_class

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "AGENT_REGISTRY",
    "create_agent",
    "register_agent",
    "resolve_agent_class",
]
