"""Lawn defense — per-frame simulation core for a lane defense game."""

__version__ = "0.1.0"
