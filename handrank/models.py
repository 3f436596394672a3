from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class Category(str, Enum):
    HIGH_CARD = "high_card"
    PAIR = "pair"
    TWO_PAIRS = "two_pairs"
    THREE_OF_A_KIND = "three_of_a_kind"
    STRAIGHT = "straight"
    FLUSH = "flush"
    FULL_HOUSE = "full_house"
    FOUR_OF_A_KIND = "four_of_a_kind"
    STRAIGHT_FLUSH = "straight_flush"

    @property
    def bonus(self) -> int:
        return CATEGORY_BONUS[self]

    @property
    def band(self) -> range:
        """Every rank a hand of this category can reach."""
        low, high = CATEGORY_TIEBREAK[self]
        return range(self.bonus + low, self.bonus + high + 1)


# Each category's lowest rank exceeds the highest rank of the category below it.
CATEGORY_BONUS: Dict[Category, int] = {
    Category.HIGH_CARD: 0,
    Category.PAIR: 14,
    Category.TWO_PAIRS: 28,
    Category.THREE_OF_A_KIND: 55,
    Category.STRAIGHT: 69,
    Category.FLUSH: 83,
    Category.FULL_HOUSE: 97,
    Category.FOUR_OF_A_KIND: 111,
    Category.STRAIGHT_FLUSH: 125,
}

# Lowest and highest tiebreak reachable with five distinct cards.
CATEGORY_TIEBREAK: Dict[Category, tuple] = {
    Category.HIGH_CARD: (7, 14),
    Category.PAIR: (2, 14),
    Category.TWO_PAIRS: (5, 27),
    Category.THREE_OF_A_KIND: (2, 14),
    Category.STRAIGHT: (6, 14),
    Category.FLUSH: (7, 14),
    Category.FULL_HOUSE: (2, 14),
    Category.FOUR_OF_A_KIND: (2, 14),
    Category.STRAIGHT_FLUSH: (6, 14),
}


def describe_category(category: Category) -> str:
    return category.value


@dataclass(frozen=True)
class HandScore:
    category: Category
    rank: int
    reason: str

    def to_payload(self) -> Dict[str, object]:
        return {
            "category": describe_category(self.category),
            "rank": self.rank,
            "reason": self.reason,
        }
