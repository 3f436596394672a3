#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from websockets.asyncio.client import connect

from handrank import Hand, MalformedHand, build_deck, deal

LOGGER = logging.getLogger("compare_client")

# Sends one compare request to a showdown server, or runs it in-process
# with --local, and prints the outcome.


def build_request(owners: List[str], hands: List[str]) -> Dict[str, Any]:
    return {
        "type": "compare",
        "hands": [{"owner": owner, "cards": cards} for owner, cards in zip(owners, hands)],
    }


def random_hands(seed: Optional[int]) -> List[str]:
    deck = build_deck(seed)
    return [" ".join(card.label for card in deal(deck, 5)) for _ in range(2)]


def compare_local(owners: List[str], hands: List[str]) -> str:
    first, second = (Hand.parse(owner, cards) for owner, cards in zip(owners, hands))
    for hand in (first, second):
        LOGGER.info("%s: %s -> %s (rank %s)", hand.owner, " ".join(hand.labels), hand.reason, hand.rank)
    return first.compare(second)


async def compare_remote(url: str, owners: List[str], hands: List[str]) -> str:
    async with connect(url) as websocket:
        await websocket.send(json.dumps(build_request(owners, hands)))
        reply = json.loads(await websocket.recv())
    if reply.get("type") == "error":
        raise RuntimeError(f"{reply.get('code')}: {reply.get('msg')}")
    for hand in reply.get("hands", []):
        LOGGER.info("%s: %s -> %s (rank %s)", hand["owner"], hand["cards"], hand["reason"], hand["rank"])
    return reply["outcome"]


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare two five-card poker hands")
    parser.add_argument("hands", nargs="*", help='Two hands, e.g. "2C 3H 4S 8C AH" "2H 3D 5S 9C KD"')
    parser.add_argument("--owners", nargs=2, default=["Black", "White"], metavar=("FIRST", "SECOND"))
    parser.add_argument("--url", default="ws://127.0.0.1:8765")
    parser.add_argument("--local", action="store_true", help="Evaluate in-process instead of calling the server")
    parser.add_argument("--random", action="store_true", help="Deal two hands from a shuffled deck")
    parser.add_argument("--seed", type=int, default=None, help="Deck seed for --random")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)
    if args.random:
        args.hands = random_hands(args.seed)
    if len(args.hands) != 2:
        parser.error("exactly two hands required (or use --random)")
    return args


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    try:
        if args.local:
            outcome = compare_local(args.owners, args.hands)
        else:
            outcome = asyncio.run(compare_remote(args.url, args.owners, args.hands))
    except (MalformedHand, RuntimeError) as exc:
        LOGGER.error("%s", exc)
        return 1
    print(outcome)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
