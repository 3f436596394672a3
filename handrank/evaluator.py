from __future__ import annotations

from collections import Counter
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from .cards import VALUE_NAMES, VALUE_RANK, Card
from .models import Category, HandScore

# Detectors run against cards sorted ascending by rank. Each returns a
# HandScore when its category matches and None otherwise.
Detector = Callable[[Sequence[Card]], Optional[HandScore]]


def evaluate(cards: Iterable[Card]) -> HandScore:
    """Classify five cards, stopping at the highest category that matches."""
    ordered = sort_cards(cards)
    if len(ordered) != 5:
        raise ValueError(f"Expected 5 cards, got {len(ordered)}")
    for detector in DETECTORS:
        score = detector(ordered)
        if score is not None:
            return score
    raise AssertionError("high card detector must always match")


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    return sorted(cards, key=lambda card: card.rank)


def _score(category: Category, tiebreak: int, reason: str) -> HandScore:
    return HandScore(category=category, rank=category.bonus + tiebreak, reason=reason)


def _value_counts(cards: Sequence[Card]) -> Dict[str, int]:
    # Counter keeps first-seen order, so values come out ascending by rank.
    return Counter(card.value for card in cards)


def _values_with_count(cards: Sequence[Card], count: int) -> List[str]:
    return [value for value, seen in _value_counts(cards).items() if seen == count]


def _is_flush(cards: Sequence[Card]) -> bool:
    return all(left.suit == right.suit for left, right in _neighbours(cards))


def _is_straight(cards: Sequence[Card]) -> bool:
    # Ace only counts high; A-2-3-4-5 is not a run.
    return all(right.rank - left.rank == 1 for left, right in _neighbours(cards))


def _neighbours(cards: Sequence[Card]) -> Iterable[Tuple[Card, Card]]:
    return zip(cards, cards[1:])


def _rank_of(value: str) -> int:
    return VALUE_RANK[value]


def straight_flush(cards: Sequence[Card]) -> Optional[HandScore]:
    if not (_is_straight(cards) and _is_flush(cards)):
        return None
    low, high = cards[0], cards[-1]
    return _score(
        Category.STRAIGHT_FLUSH,
        high.rank,
        f"straight flush: {high.suit_name}, from {low.name} to {high.name}",
    )


def four_of_a_kind(cards: Sequence[Card]) -> Optional[HandScore]:
    quads = _values_with_count(cards, 4)
    if not quads:
        return None
    value = quads[0]
    return _score(Category.FOUR_OF_A_KIND, _rank_of(value), f"four of a kind: {VALUE_NAMES[value]}")


def full_house(cards: Sequence[Card]) -> Optional[HandScore]:
    trips = _values_with_count(cards, 3)
    pairs = _values_with_count(cards, 2)
    if len(trips) != 1 or len(pairs) != 1:
        return None
    triple, pair = trips[0], pairs[0]
    return _score(
        Category.FULL_HOUSE,
        _rank_of(triple),
        f"full house: {VALUE_NAMES[triple]} over {VALUE_NAMES[pair]}",
    )


def flush(cards: Sequence[Card]) -> Optional[HandScore]:
    if not _is_flush(cards):
        return None
    return _score(Category.FLUSH, cards[-1].rank, f"flush: {cards[-1].suit_name}")


def straight(cards: Sequence[Card]) -> Optional[HandScore]:
    if not _is_straight(cards):
        return None
    low, high = cards[0], cards[-1]
    return _score(Category.STRAIGHT, high.rank, f"straight: from {low.name} to {high.name}")


def three_of_a_kind(cards: Sequence[Card]) -> Optional[HandScore]:
    trips = _values_with_count(cards, 3)
    if not trips:
        return None
    value = trips[0]
    return _score(Category.THREE_OF_A_KIND, _rank_of(value), f"three of a kind: {VALUE_NAMES[value]}")


def two_pairs(cards: Sequence[Card]) -> Optional[HandScore]:
    pairs = _values_with_count(cards, 2)
    if len(pairs) != 2:
        return None
    first, second = pairs
    return _score(
        Category.TWO_PAIRS,
        _rank_of(first) + _rank_of(second),
        f"two pairs: {VALUE_NAMES[second]} and {VALUE_NAMES[first]}",
    )


def pair(cards: Sequence[Card]) -> Optional[HandScore]:
    pairs = _values_with_count(cards, 2)
    if len(pairs) != 1:
        return None
    value = pairs[0]
    return _score(Category.PAIR, _rank_of(value), f"pair: {VALUE_NAMES[value]}")


def high_card(cards: Sequence[Card]) -> HandScore:
    highest = cards[-1]
    return _score(Category.HIGH_CARD, highest.rank, f"high card: {highest.name}")


DETECTORS: Tuple[Detector, ...] = (
    straight_flush,
    four_of_a_kind,
    full_house,
    flush,
    straight,
    three_of_a_kind,
    two_pairs,
    pair,
    high_card,
)
