"""Reactive signals, renderer interfaces, a websocket renderer and example components."""

__version__ = "0.1.0"
__all__ = ["signal", "render", "aseprite", "components"]