from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8765
    max_message_bytes: int = 4096
