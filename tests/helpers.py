from __future__ import annotations

from typing import Iterator, List

from handrank import Hand, build_deck, deal

# Weakest and strongest hand of each category, lowest category first.
CATEGORY_EXTREMES = [
    ("high_card", "2C 3D 4H 5S 7C", "9C JD QH KS AC"),
    ("pair", "2C 2D 3H 4S 5C", "AC AD KH QS JC"),
    ("two_pairs", "2C 2D 3H 3S 4C", "AC AD KH KS QC"),
    ("three_of_a_kind", "2C 2D 2H 3S 4C", "AC AD AH KS QC"),
    ("straight", "2C 3D 4H 5S 6C", "TC JD QH KS AC"),
    ("flush", "2C 3C 4C 5C 7C", "9H JH QH KH AH"),
    ("full_house", "2C 2D 2H 3S 3C", "AC AD AH KS KC"),
    ("four_of_a_kind", "2C 2D 2H 2S 3C", "AC AD AH AS KC"),
    ("straight_flush", "2H 3H 4H 5H 6H", "TS JS QS KS AS"),
]


def make_hand(text: str, owner: str = "Player") -> Hand:
    return Hand.parse(owner, text)


def sampled_hands(seeds: range, owner: str = "Sample") -> Iterator[Hand]:
    """Deal ten hands from each seeded deck."""
    for seed in seeds:
        deck = build_deck(seed=seed)
        for _ in range(10):
            yield Hand(owner, tuple(deal(deck, 5)))


def labels(text: str) -> List[str]:
    return text.split()
