import argparse
import asyncio
import logging

from .config import ServerConfig
from .server import ShowdownServer

logging.basicConfig(level=logging.INFO)


def main() -> None:
    parser = argparse.ArgumentParser(description="Poker hand showdown server")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8765)
    parser.add_argument(
        "--max-message-bytes",
        type=int,
        default=4096,
        help="Largest inbound frame accepted before the connection is closed",
    )
    args = parser.parse_args()

    config = ServerConfig(host=args.host, port=args.port, max_message_bytes=args.max_message_bytes)
    server = ShowdownServer(config)
    asyncio.run(server.start())


if __name__ == "__main__":
    main()
