from __future__ import annotations

import asyncio
import json
import logging
from http import HTTPStatus
from typing import Any, Dict, List, Optional

from websockets.asyncio.server import ServerConnection, serve
from websockets.exceptions import ConnectionClosed
from websockets.http11 import Request, Response

from handrank import Hand, MalformedHand

from .config import ServerConfig

LOGGER = logging.getLogger("showdown_host")

PROTOCOL_VERSION = 1
HEALTH_PATHS = {"/", "/health", "/healthz"}

# ShowdownServer only speaks JSON over WebSocket; every poker rule lives
# in handrank.


class ShowdownError(Exception):
    def __init__(self, code: str, msg: str) -> None:
        super().__init__(msg)
        self.code = code
        self.msg = msg


def _require_str(message: Dict[str, Any], key: str) -> str:
    value = message.get(key)
    if not isinstance(value, str):
        raise ShowdownError("BAD_SCHEMA", f"{key} must be a string")
    return value


def _parse_hand(owner: str, cards: str) -> Hand:
    try:
        return Hand.parse(owner, cards)
    except MalformedHand as exc:
        raise ShowdownError("MALFORMED_HAND", str(exc)) from exc


def handle_rank(message: Dict[str, Any]) -> Dict[str, Any]:
    owner = message["owner"] if "owner" in message else "player"
    if not isinstance(owner, str):
        raise ShowdownError("BAD_SCHEMA", "owner must be a string")
    hand = _parse_hand(owner, _require_str(message, "cards"))
    return {"type": "ranked", "hand": hand.to_payload()}


def handle_compare(message: Dict[str, Any]) -> Dict[str, Any]:
    entries = message.get("hands")
    if not isinstance(entries, list) or len(entries) != 2:
        raise ShowdownError("BAD_SCHEMA", "compare needs exactly two hands")

    hands: List[Hand] = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise ShowdownError("BAD_SCHEMA", "each hand must be an object")
        hands.append(_parse_hand(_require_str(entry, "owner"), _require_str(entry, "cards")))

    first, second = hands
    winner = first.winner(second)
    return {
        "type": "result",
        "outcome": first.compare(second),
        "winner": winner.owner if winner is not None else None,
        "hands": [hand.to_payload() for hand in hands],
    }


HANDLERS = {
    "rank": handle_rank,
    "compare": handle_compare,
}


def handle_message(raw: Any) -> Dict[str, Any]:
    """Turn one inbound frame into the reply payload, errors included."""
    try:
        try:
            message = json.loads(raw)
        except (TypeError, ValueError, RecursionError) as exc:
            raise ShowdownError("BAD_JSON", "Message must be a JSON object") from exc
        if not isinstance(message, dict):
            raise ShowdownError("BAD_JSON", "Message must be a JSON object")

        msg_type = message.get("type")
        handler = HANDLERS.get(msg_type) if isinstance(msg_type, str) else None
        if handler is None:
            raise ShowdownError("UNKNOWN_TYPE", f"Unsupported message type: {msg_type!r}")
        reply = handler(message)
        LOGGER.debug("Handled %s request: %s", msg_type, reply)
    except ShowdownError as exc:
        LOGGER.info("Rejected request (%s): %s", exc.code, exc.msg)
        reply = {"type": "error", "code": exc.code, "msg": exc.msg}
    return {"v": PROTOCOL_VERSION, **reply}


class ShowdownServer:
    def __init__(self, config: ServerConfig) -> None:
        self.config = config
        self.requests_served = 0

    async def start(self) -> None:
        async with serve(
            self.handle_connection,
            self.config.host,
            self.config.port,
            process_request=self.process_request,
            max_size=self.config.max_message_bytes,
        ):
            LOGGER.info("Showdown server listening on %s:%s", self.config.host, self.config.port)
            await asyncio.Future()

    async def handle_connection(self, websocket: ServerConnection) -> None:
        peer = getattr(websocket, "remote_address", None)
        LOGGER.info("Client connected: %s", peer)
        try:
            async for raw in websocket:
                reply = handle_message(raw)
                self.requests_served += 1
                await websocket.send(json.dumps(reply))
        except ConnectionClosed:
            LOGGER.info("Client %s dropped the connection", peer)
        except Exception:
            LOGGER.exception("Showdown handler crashed for %s", peer)
            raise
        finally:
            LOGGER.info("Client disconnected: %s", peer)

    def process_request(self, connection: ServerConnection, request: Request) -> Optional[Response]:
        """Answer plain HTTP health checks; let WebSocket upgrades through."""
        if request.headers.get("Upgrade", "").lower() == "websocket":
            return None
        if request.path in HEALTH_PATHS:
            return connection.respond(HTTPStatus.OK, "showdown server running\n")
        return connection.respond(HTTPStatus.NOT_FOUND, "not found\n")
