import random

import pytest

from jokerdeck.cards import Card, Rank, Suit
from jokerdeck import joker_effects as je
from jokerdeck.joker_effects import (
    JokerEffect,
    Rarity,
    ScoringContext,
    get_joker_registry_entry,
    get_joker_registry_size,
)


def _apply(joker_id, card=None, context=None):
    entry = get_joker_registry_entry(joker_id)
    return entry.effect(None, card, context or ScoringContext())


def _cards(*specs):
    return [Card(suit, rank) for suit, rank in specs]


PAIR = _cards((Suit.HEARTS, Rank.TWO), (Suit.CLUBS, Rank.TWO), (Suit.SPADES, Rank.NINE))
THREE = _cards((Suit.HEARTS, Rank.TWO), (Suit.CLUBS, Rank.TWO), (Suit.SPADES, Rank.TWO))
TWO_PAIR = _cards(
    (Suit.HEARTS, Rank.TWO), (Suit.CLUBS, Rank.TWO),
    (Suit.HEARTS, Rank.NINE), (Suit.CLUBS, Rank.NINE),
)
STRAIGHT = _cards(
    (Suit.HEARTS, Rank.ACE), (Suit.CLUBS, Rank.TWO), (Suit.SPADES, Rank.THREE),
    (Suit.HEARTS, Rank.FOUR), (Suit.DIAMONDS, Rank.FIVE),
)
FLUSH = _cards(
    (Suit.HEARTS, Rank.TWO), (Suit.HEARTS, Rank.FOUR), (Suit.HEARTS, Rank.SIX),
    (Suit.HEARTS, Rank.NINE), (Suit.HEARTS, Rank.KING),
)


def test_registry_size_and_bounds():
    assert get_joker_registry_size() == 30
    assert get_joker_registry_entry(-1) is None
    assert get_joker_registry_entry(get_joker_registry_size()) is None


def test_stencil_is_uncommon():
    assert get_joker_registry_entry(je.JOKER_STENCIL_ID).rarity is Rarity.UNCOMMON


def test_empty_effect_is_falsy():
    assert not JokerEffect()
    assert JokerEffect(money=1)


def test_default_joker_only_at_end():
    assert _apply(je.DEFAULT_JOKER_ID) == JokerEffect(mult=4)
    assert _apply(je.DEFAULT_JOKER_ID, Card(Suit.HEARTS, Rank.ACE)) == JokerEffect()


@pytest.mark.parametrize(
    "joker_id, suit",
    [
        (je.GREEDY_JOKER_ID, Suit.DIAMONDS),
        (je.LUSTY_JOKER_ID, Suit.HEARTS),
        (je.WRATHFUL_JOKER_ID, Suit.SPADES),
        (je.GLUTTONOUS_JOKER_ID, Suit.CLUBS),
    ],
)
def test_sinful_jokers(joker_id, suit):
    matching = _apply(joker_id, Card(suit, Rank.SEVEN))
    assert matching == _apply(je.GREEDY_JOKER_ID, Card(Suit.DIAMONDS, Rank.SEVEN))
    other = next(s for s in Suit if s != suit)
    assert _apply(joker_id, Card(other, Rank.SEVEN)) == JokerEffect()
    assert _apply(joker_id) == JokerEffect()


def test_greedy_pins_mult():
    assert _apply(je.GREEDY_JOKER_ID, Card(Suit.DIAMONDS, Rank.TWO)).mult == 3


@pytest.mark.parametrize(
    "joker_id, matching, missing",
    [
        (je.JOLLY_JOKER_ID, PAIR, FLUSH),
        (je.SLY_JOKER_ID, THREE, STRAIGHT),
        (je.ZANY_JOKER_ID, THREE, PAIR),
        (je.WILY_JOKER_ID, THREE, TWO_PAIR),
        (je.MAD_JOKER_ID, TWO_PAIR, THREE),
        (je.CLEVER_JOKER_ID, TWO_PAIR, PAIR),
        (je.CRAZY_JOKER_ID, STRAIGHT, FLUSH),
        (je.DEVIOUS_JOKER_ID, STRAIGHT, PAIR),
        (je.DROLL_JOKER_ID, FLUSH, STRAIGHT),
        (je.CRAFTY_JOKER_ID, FLUSH, THREE),
    ],
)
def test_whole_hand_jokers(joker_id, matching, missing):
    assert _apply(joker_id, context=ScoringContext(played=matching))
    assert _apply(joker_id, context=ScoringContext(played=missing)) == JokerEffect()
    card = matching[0]
    assert _apply(joker_id, card, ScoringContext(played=matching)) == JokerEffect()


def test_mult_and_chip_variants_differ_in_kind():
    jolly = _apply(je.JOLLY_JOKER_ID, context=ScoringContext(played=PAIR))
    sly = _apply(je.SLY_JOKER_ID, context=ScoringContext(played=PAIR))
    assert jolly.chips == 0 and jolly.mult > 0
    assert sly.mult == 0 and sly.chips > 0


def test_half_joker_limit():
    assert _apply(je.HALF_JOKER_ID, context=ScoringContext(played=THREE))
    assert _apply(je.HALF_JOKER_ID, context=ScoringContext(played=TWO_PAIR)) == JokerEffect()


def test_stencil_counts_empty_slots_and_stencils():
    empty = _apply(je.JOKER_STENCIL_ID, context=ScoringContext(joker_ids=()))
    assert empty.xmult == je.MAX_JOKERS_HELD_SIZE
    one_stencil = _apply(
        je.JOKER_STENCIL_ID, context=ScoringContext(joker_ids=(je.JOKER_STENCIL_ID,))
    )
    assert one_stencil.xmult == je.MAX_JOKERS_HELD_SIZE
    other = _apply(je.JOKER_STENCIL_ID, context=ScoringContext(joker_ids=(0, 1)))
    assert other.xmult == je.MAX_JOKERS_HELD_SIZE - 2


def test_misprint_range_and_reproducible():
    results = [
        _apply(je.MISPRINT_JOKER_ID, context=ScoringContext(rng=random.Random(seed))).mult
        for seed in range(50)
    ]
    assert all(0 <= value <= je.MISPRINT_MAX_MULT for value in results)
    again = _apply(je.MISPRINT_JOKER_ID, context=ScoringContext(rng=random.Random(7)))
    first = _apply(je.MISPRINT_JOKER_ID, context=ScoringContext(rng=random.Random(7)))
    assert again == first


def test_walkie_talkie():
    ten = _apply(je.WALKIE_TALKIE_JOKER_ID, Card(Suit.HEARTS, Rank.TEN))
    four = _apply(je.WALKIE_TALKIE_JOKER_ID, Card(Suit.SPADES, Rank.FOUR))
    assert ten == four and ten
    assert _apply(je.WALKIE_TALKIE_JOKER_ID, Card(Suit.HEARTS, Rank.NINE)) == JokerEffect()


@pytest.mark.parametrize("rank", [Rank.ACE, Rank.TWO, Rank.THREE, Rank.FIVE, Rank.EIGHT])
def test_fibonacci_ranks(rank):
    assert _apply(je.FIBONACCI_JOKER_ID, Card(Suit.CLUBS, rank)).mult > 0


def test_fibonacci_other_rank():
    assert _apply(je.FIBONACCI_JOKER_ID, Card(Suit.CLUBS, Rank.FOUR)) == JokerEffect()


def test_banner_scales_with_discards():
    one = _apply(je.BANNER_JOKER_ID, context=ScoringContext(discards_remaining=1))
    three = _apply(je.BANNER_JOKER_ID, context=ScoringContext(discards_remaining=3))
    assert three.chips == 3 * one.chips
    assert _apply(je.BANNER_JOKER_ID, context=ScoringContext()) == JokerEffect()


def test_mystic_summit():
    assert _apply(je.MYSTIC_SUMMIT_JOKER_ID, context=ScoringContext(discards_remaining=0))
    assert _apply(
        je.MYSTIC_SUMMIT_JOKER_ID, context=ScoringContext(discards_remaining=1)
    ) == JokerEffect()


def test_blackboard():
    dark = _cards((Suit.SPADES, Rank.TWO), (Suit.CLUBS, Rank.KING))
    mixed = dark + _cards((Suit.HEARTS, Rank.ACE))
    assert _apply(je.BLACKBOARD_JOKER_ID, context=ScoringContext(hand=dark)).xmult > 0
    assert _apply(je.BLACKBOARD_JOKER_ID, context=ScoringContext(hand=mixed)) == JokerEffect()


def test_blue_scales_with_deck():
    small = _apply(je.BLUE_JOKER_ID, context=ScoringContext(deck_size=5))
    large = _apply(je.BLUE_JOKER_ID, context=ScoringContext(deck_size=10))
    assert large.chips == 2 * small.chips > 0


def test_even_steven_and_odd_todd():
    assert _apply(je.EVEN_STEVEN_JOKER_ID, Card(Suit.HEARTS, Rank.FOUR)).mult > 0
    assert _apply(je.EVEN_STEVEN_JOKER_ID, Card(Suit.HEARTS, Rank.KING)) == JokerEffect()
    assert _apply(je.EVEN_STEVEN_JOKER_ID, Card(Suit.HEARTS, Rank.FIVE)) == JokerEffect()
    assert _apply(je.ODD_TODD_JOKER_ID, Card(Suit.HEARTS, Rank.FIVE)).chips > 0
    assert _apply(je.ODD_TODD_JOKER_ID, Card(Suit.HEARTS, Rank.ACE)).chips > 0
    assert _apply(je.ODD_TODD_JOKER_ID, Card(Suit.HEARTS, Rank.FOUR)) == JokerEffect()


def test_scholar_only_aces():
    assert _apply(je.SCHOLAR_JOKER_ID, Card(Suit.HEARTS, Rank.ACE))
    assert _apply(je.SCHOLAR_JOKER_ID, Card(Suit.HEARTS, Rank.KING)) == JokerEffect()


@pytest.mark.parametrize("joker_id", [je.SCARY_FACE_JOKER_ID, je.SMILEY_FACE_JOKER_ID])
def test_face_jokers(joker_id):
    faces = [_apply(joker_id, Card(Suit.CLUBS, r)) for r in (Rank.JACK, Rank.QUEEN, Rank.KING)]
    assert faces[0] and faces[0] == faces[1] == faces[2]
    assert _apply(joker_id, Card(Suit.CLUBS, Rank.ACE)) == JokerEffect()


def test_business_card_pays_money_sometimes():
    results = {
        _apply(
            je.BUSINESS_CARD_JOKER_ID,
            Card(Suit.HEARTS, Rank.JACK),
            ScoringContext(rng=random.Random(seed)),
        ).money
        for seed in range(40)
    }
    assert 0 in results and len(results) == 2
    assert _apply(
        je.BUSINESS_CARD_JOKER_ID, Card(Suit.HEARTS, Rank.TWO), ScoringContext()
    ) == JokerEffect()