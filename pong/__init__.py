"""Pong: a two-paddle ball game with frame-rate independent physics."""

__version__ = "1.0.0"
