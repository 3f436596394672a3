from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional

from .errors import InvalidToken

TWO = "2"
THREE = "3"
FOUR = "4"
FIVE = "5"
SIX = "6"
SEVEN = "7"
EIGHT = "8"
NINE = "9"
TEN = "T"
JACK = "J"
QUEEN = "Q"
KING = "K"
ACE = "A"

CLUBS = "C"
DIAMONDS = "D"
HEARTS = "H"
SPADES = "S"

VALUES = "23456789TJQKA"
SUITS = "CDHS"

VALUE_RANK = {value: idx for idx, value in enumerate(VALUES, start=2)}
VALUE_NAMES = {
    TWO: "two",
    THREE: "three",
    FOUR: "four",
    FIVE: "five",
    SIX: "six",
    SEVEN: "seven",
    EIGHT: "eight",
    NINE: "nine",
    TEN: "ten",
    JACK: "jack",
    QUEEN: "queen",
    KING: "king",
    ACE: "ace",
}
SUIT_NAMES = {
    CLUBS: "clubs",
    DIAMONDS: "diamonds",
    HEARTS: "hearts",
    SPADES: "spades",
}


@dataclass(frozen=True)
class Card:
    value: str
    suit: str

    def __post_init__(self) -> None:
        if self.value not in VALUE_RANK:
            raise InvalidToken(f"Invalid value: {self.value}")
        if self.suit not in SUIT_NAMES:
            raise InvalidToken(f"Invalid suit: {self.suit}")

    @property
    def rank(self) -> int:
        return VALUE_RANK[self.value]

    @property
    def name(self) -> str:
        return VALUE_NAMES[self.value]

    @property
    def suit_name(self) -> str:
        return SUIT_NAMES[self.suit]

    @property
    def label(self) -> str:
        return f"{self.value}{self.suit}"


def parse_label(label: str) -> Card:
    if len(label) != 2:
        raise InvalidToken(f"Invalid card token: {label!r}")
    return Card(label[0], label[1])


def build_deck(seed: Optional[int] = None) -> List[Card]:
    rng = random.Random(seed)
    deck = [Card(value, suit) for value in VALUES for suit in SUITS]
    rng.shuffle(deck)
    return deck


def deal(deck: List[Card], count: int) -> List[Card]:
    if len(deck) < count:
        raise ValueError("Not enough cards left in deck")
    cards = deck[:count]
    del deck[:count]
    return cards
