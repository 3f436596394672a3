"""Five-card poker hand ranking, free of I/O so servers and scripts can share it."""

from .cards import Card, SUITS, VALUES, build_deck, deal, parse_label
from .errors import InvalidToken, MalformedHand
from .evaluator import DETECTORS, evaluate
from .hand import Hand
from .models import Category, HandScore, describe_category

__all__ = [
    "Card",
    "SUITS",
    "VALUES",
    "build_deck",
    "deal",
    "parse_label",
    "InvalidToken",
    "MalformedHand",
    "DETECTORS",
    "evaluate",
    "Hand",
    "Category",
    "HandScore",
    "describe_category",
]
