"""Rigid-body physics, tick-driven game logic and a third-person camera for a rolling-ball game."""

__version__ = "0.1.0"