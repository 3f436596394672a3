from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Dict, List, Optional, Tuple

from .cards import Card, parse_label
from .errors import InvalidToken, MalformedHand
from .evaluator import evaluate, sort_cards
from .models import Category, HandScore

HAND_SIZE = 5


@dataclass(frozen=True)
class Hand:
    """Five cards held by one owner, kept sorted ascending by rank.

    The score is computed on first access and cached; evaluation is
    deterministic, so a racing second computation yields the same value.
    """

    owner: str
    cards: Tuple[Card, ...]

    def __post_init__(self) -> None:
        if len(self.cards) != HAND_SIZE:
            raise MalformedHand(f"Expected {HAND_SIZE} cards, got {len(self.cards)}")
        seen = set()
        for card in self.cards:
            if card in seen:
                raise MalformedHand(f"Duplicate card: {card.label}")
            seen.add(card)
        object.__setattr__(self, "cards", tuple(sort_cards(self.cards)))

    @classmethod
    def parse(cls, owner: str, text: str) -> "Hand":
        tokens = text.split()
        if len(tokens) != HAND_SIZE:
            raise MalformedHand(f"Expected {HAND_SIZE} cards, got {len(tokens)}")
        try:
            cards = tuple(parse_label(token) for token in tokens)
        except InvalidToken as exc:
            raise MalformedHand(f"Bad card in hand {text!r}: {exc}") from exc
        return cls(owner, cards)

    @cached_property
    def score(self) -> HandScore:
        return evaluate(self.cards)

    @property
    def category(self) -> Category:
        return self.score.category

    @property
    def rank(self) -> int:
        return self.score.rank

    @property
    def reason(self) -> str:
        return self.score.reason

    @property
    def labels(self) -> List[str]:
        return [card.label for card in self.cards]

    def compare(self, other: "Hand") -> str:
        if self.rank > other.rank:
            return f"{self.owner} wins with {self.reason}"
        if other.rank > self.rank:
            return f"{other.owner} wins with {other.reason}"
        return "Tie"

    def winner(self, other: "Hand") -> Optional["Hand"]:
        if self.rank == other.rank:
            return None
        return self if self.rank > other.rank else other

    def to_payload(self) -> Dict[str, object]:
        return {"owner": self.owner, "cards": " ".join(self.labels), **self.score.to_payload()}
