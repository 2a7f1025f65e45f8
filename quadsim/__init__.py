"""Headless game simulations: platformer physics, particle emitters and arcade game logic."""

__version__ = "0.1.0"