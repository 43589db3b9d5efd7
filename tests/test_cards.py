import dataclasses

import pytest

from jokerdeck.cards import NUM_RANKS, NUM_SUITS, Card, Rank, Suit


def test_card_coerces_integers_to_enums():
    card = Card(2, 12)
    assert card.suit is Suit.DIAMONDS
    assert card.rank is Rank.ACE


def test_card_rejects_unknown_suit():
    with pytest.raises(ValueError):
        Card(NUM_SUITS, Rank.TWO)


def test_card_rejects_unknown_rank():
    with pytest.raises(ValueError):
        Card(Suit.SPADES, NUM_RANKS)


def test_card_is_immutable():
    card = Card(Suit.HEARTS, Rank.KING)
    with pytest.raises(dataclasses.FrozenInstanceError):
        card.rank = Rank.QUEEN
    assert card.rank is Rank.KING


def test_equal_cards_hash_alike():
    assert len({Card(0, 0), Card(Suit.HEARTS, Rank.TWO)}) == 1


def test_rank_order_puts_ace_highest():
    cards = [Card(Suit.SPADES, rank) for rank in (12, 0, 9, 5)]
    ranks = sorted(card.rank for card in cards)
    assert ranks[-1] is Rank.ACE
    assert ranks[0] is Rank.TWO