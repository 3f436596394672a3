import pytest

from handrank.cards import (
    ACE,
    CLUBS,
    QUEEN,
    SEVEN,
    SPADES,
    SUITS,
    VALUES,
    Card,
    build_deck,
    deal,
    parse_label,
)


@pytest.mark.parametrize(
    "label, suit",
    [("KC", CLUBS), ("AS", SPADES)],
)
def test_parse_label_extracts_suit(label, suit):
    assert parse_label(label).suit == suit


@pytest.mark.parametrize(
    "label, value",
    [("7H", SEVEN), ("QD", QUEEN), ("AC", ACE)],
)
def test_parse_label_extracts_value(label, value):
    assert parse_label(label).value == value


@pytest.mark.parametrize(
    "label, rank",
    [("8S", 8), ("8D", 8), ("QH", 12), ("2C", 2), ("TD", 10), ("AS", 14)],
)
def test_card_rank_depends_on_value_only(label, rank):
    assert parse_label(label).rank == rank


def test_ranks_run_two_through_ace():
    ranks = [Card(value, "H").rank for value in VALUES]
    assert ranks == list(range(2, 15))


def test_card_names():
    card = parse_label("TD")
    assert card.name == "ten"
    assert card.suit_name == "diamonds"
    assert card.label == "TD"
    assert parse_label("JH").name == "jack"
    assert parse_label("6C").suit_name == "clubs"


def test_cards_are_hashable_values():
    assert parse_label("AS") == Card("A", "S")
    assert len({parse_label("AS"), Card("A", "S"), Card("A", "H")}) == 2


def test_build_deck_is_seeded_and_complete():
    deck = build_deck(seed=7)
    assert len(deck) == 52
    assert len(set(deck)) == 52
    assert {card.suit for card in deck} == set(SUITS)
    assert deck == build_deck(seed=7)
    assert deck != build_deck(seed=8)


def test_deal_takes_cards_from_top():
    deck = build_deck(seed=3)
    top = deck[:5]
    dealt = deal(deck, 5)
    assert dealt == top
    assert len(deck) == 47
    assert not set(dealt) & set(deck)
