"""Showdown service: wraps the hand ranking engine with a WebSocket API."""

from .config import ServerConfig
from .server import ShowdownError, ShowdownServer, handle_message

__all__ = ["ServerConfig", "ShowdownError", "ShowdownServer", "handle_message"]
