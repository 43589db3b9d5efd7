"""Scoring effects of every joker and the registry that maps joker ids to them."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from .cards import Card, Rank, Suit
from .hand_analysis import (
    MAX_SELECTION_SIZE,
    get_distribution,
    hand_contains_flush,
    hand_contains_n_of_a_kind,
    hand_contains_straight,
    hand_contains_two_pair,
)

MAX_HAND_SIZE = 16
MAX_DECK_SIZE = 52
MAX_JOKERS_HELD_SIZE = 5  # negatives are not accounted for
MAX_SHOP_JOKERS = 2
MAX_CARD_SCORE_DIGITS = 2
MAX_CARD_SCORE_STR_LEN = MAX_CARD_SCORE_DIGITS + 1  # room for '+' or 'X'

MISPRINT_MAX_MULT = 23

_FACE_RANKS = frozenset({Rank.JACK, Rank.QUEEN, Rank.KING})
_FIBONACCI_RANKS = frozenset({Rank.ACE, Rank.TWO, Rank.THREE, Rank.FIVE, Rank.EIGHT})
_FACE_CARD_VALUE = 10
_ACE_VALUE = 11
_RANK_OFFSET = 2


class HandType(IntEnum):
    NONE = 0
    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    FOUR_OF_A_KIND = 5
    STRAIGHT = 6
    FLUSH = 7
    FULL_HOUSE = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10
    FIVE_OF_A_KIND = 11
    FLUSH_HOUSE = 12
    FLUSH_FIVE = 13


class Rarity(IntEnum):
    COMMON = 0
    UNCOMMON = 1
    RARE = 2
    LEGENDARY = 3


@dataclass(frozen=True)
class JokerEffect:
    """What a joker adds when it triggers; an all-zero effect means no trigger."""

    chips: int = 0
    mult: int = 0
    xmult: int = 0
    money: int = 0
    retrigger: bool = False

    def __bool__(self) -> bool:
        return bool(self.chips or self.mult or self.xmult or self.money or self.retrigger)


@dataclass
class ScoringContext:
    """The parts of the game state that joker effects look at."""

    played: Sequence[Card] = ()
    hand: Sequence[Card] = ()
    joker_ids: Sequence[int] = ()
    discards_remaining: int = 0
    deck_size: int = 0
    money: int = 0
    rng: random.Random = field(default_factory=random.Random, repr=False)


JokerEffectFunc = Callable[[Any, "Card | None", ScoringContext], JokerEffect]


@dataclass(frozen=True)
class JokerInfo:
    rarity: Rarity
    base_value: int
    effect: JokerEffectFunc


_NO_EFFECT = JokerEffect()


def _card_value(card: Card) -> int:
    if card.rank in _FACE_RANKS:
        return _FACE_CARD_VALUE
    if card.rank == Rank.ACE:
        return _ACE_VALUE
    return int(card.rank) + _RANK_OFFSET


def _default(joker, scored_card, context):
    return JokerEffect(mult=4) if scored_card is None else _NO_EFFECT


def _sinful(suit: Suit) -> JokerEffectFunc:
    def effect(joker, scored_card, context):
        if scored_card is not None and scored_card.suit == suit:
            return JokerEffect(mult=3)
        return _NO_EFFECT

    return effect


def _whole_hand(condition: Callable[[Any], bool], reward: JokerEffect) -> JokerEffectFunc:
    """An effect that triggers at the end of scoring when the played hand matches."""

    def effect(joker, scored_card, context):
        if scored_card is not None:
            return _NO_EFFECT
        distribution = get_distribution(context.played)
        return reward if condition(distribution) else _NO_EFFECT

    return effect


def _has_pair(d) -> bool:
    return hand_contains_n_of_a_kind(d.ranks) >= 2


def _has_three(d) -> bool:
    return hand_contains_n_of_a_kind(d.ranks) >= 3


def _has_two_pair(d) -> bool:
    return hand_contains_two_pair(d.ranks)


def _has_straight(d) -> bool:
    return hand_contains_straight(d.ranks)


def _has_flush(d) -> bool:
    return hand_contains_flush(d.suits)


def _half(joker, scored_card, context):
    if scored_card is not None:
        return _NO_EFFECT
    return JokerEffect(mult=20) if len(context.played) <= 3 else _NO_EFFECT


def _stencil(joker, scored_card, context):
    if scored_card is not None:
        return _NO_EFFECT
    empty_slots = MAX_JOKERS_HELD_SIZE - len(context.joker_ids)
    stencils = sum(1 for joker_id in context.joker_ids if joker_id == JOKER_STENCIL_ID)
    return JokerEffect(xmult=empty_slots + stencils)


def _misprint(joker, scored_card, context):
    if scored_card is not None:
        return _NO_EFFECT
    return JokerEffect(mult=context.rng.randrange(MISPRINT_MAX_MULT + 1))


def _walkie_talkie(joker, scored_card, context):
    if scored_card is not None and scored_card.rank in (Rank.TEN, Rank.FOUR):
        return JokerEffect(chips=10, mult=4)
    return _NO_EFFECT


def _fibonacci(joker, scored_card, context):
    if scored_card is not None and scored_card.rank in _FIBONACCI_RANKS:
        return JokerEffect(mult=8)
    return _NO_EFFECT


def _banner(joker, scored_card, context):
    if scored_card is not None:
        return _NO_EFFECT
    return JokerEffect(chips=30 * context.discards_remaining)


def _mystic_summit(joker, scored_card, context):
    if scored_card is not None:
        return _NO_EFFECT
    return JokerEffect(mult=15) if context.discards_remaining == 0 else _NO_EFFECT


def _blackboard(joker, scored_card, context):
    if scored_card is not None:
        return _NO_EFFECT
    if all(card.suit not in (Suit.HEARTS, Suit.DIAMONDS) for card in context.hand):
        return JokerEffect(xmult=3)
    return _NO_EFFECT


def _blue(joker, scored_card, context):
    if scored_card is not None:
        return _NO_EFFECT
    return JokerEffect(chips=context.deck_size * 2)


def _business_card(joker, scored_card, context):
    if scored_card is not None and scored_card.rank in _FACE_RANKS:
        if context.rng.randrange(2) == 0:
            return JokerEffect(money=2)
    return _NO_EFFECT


def _scholar(joker, scored_card, context):
    if scored_card is not None and scored_card.rank == Rank.ACE:
        return JokerEffect(chips=20, mult=4)
    return _NO_EFFECT


def _scary_face(joker, scored_card, context):
    if scored_card is not None and scored_card.rank in _FACE_RANKS:
        return JokerEffect(chips=30)
    return _NO_EFFECT


def _smiley_face(joker, scored_card, context):
    if scored_card is not None and scored_card.rank in _FACE_RANKS:
        return JokerEffect(mult=5)
    return _NO_EFFECT


def _even_steven(joker, scored_card, context):
    if scored_card is None or scored_card.rank in _FACE_RANKS:
        return _NO_EFFECT
    return JokerEffect(mult=4) if _card_value(scored_card) % 2 == 0 else _NO_EFFECT


def _odd_todd(joker, scored_card, context):
    if scored_card is not None and _card_value(scored_card) % 2 == 1:
        return JokerEffect(chips=31)
    return _NO_EFFECT


DEFAULT_JOKER_ID = 0
GREEDY_JOKER_ID = 1
LUSTY_JOKER_ID = 2
WRATHFUL_JOKER_ID = 3
GLUTTONOUS_JOKER_ID = 4
JOLLY_JOKER_ID = 5
ZANY_JOKER_ID = 6
MAD_JOKER_ID = 7
CRAZY_JOKER_ID = 8
DROLL_JOKER_ID = 9
SLY_JOKER_ID = 10
WILY_JOKER_ID = 11
CLEVER_JOKER_ID = 12
DEVIOUS_JOKER_ID = 13
CRAFTY_JOKER_ID = 14
HALF_JOKER_ID = 15
JOKER_STENCIL_ID = 16
BANNER_JOKER_ID = 17
WALKIE_TALKIE_JOKER_ID = 18
FIBONACCI_JOKER_ID = 19
BLACKBOARD_JOKER_ID = 20
MYSTIC_SUMMIT_JOKER_ID = 21
MISPRINT_JOKER_ID = 22
EVEN_STEVEN_JOKER_ID = 23
BLUE_JOKER_ID = 24
ODD_TODD_JOKER_ID = 25
SCHOLAR_JOKER_ID = 26
BUSINESS_CARD_JOKER_ID = 27
SCARY_FACE_JOKER_ID = 28
SMILEY_FACE_JOKER_ID = 29

# A joker's position here is its id; consecutive pairs share a spritesheet.
_REGISTRY: tuple[JokerInfo, ...] = (
    JokerInfo(Rarity.COMMON, 2, _default),
    JokerInfo(Rarity.COMMON, 5, _sinful(Suit.DIAMONDS)),
    JokerInfo(Rarity.COMMON, 5, _sinful(Suit.HEARTS)),
    JokerInfo(Rarity.COMMON, 5, _sinful(Suit.SPADES)),
    JokerInfo(Rarity.COMMON, 5, _sinful(Suit.CLUBS)),
    JokerInfo(Rarity.COMMON, 3, _whole_hand(_has_pair, JokerEffect(mult=8))),
    JokerInfo(Rarity.COMMON, 4, _whole_hand(_has_three, JokerEffect(mult=12))),
    JokerInfo(Rarity.COMMON, 4, _whole_hand(_has_two_pair, JokerEffect(mult=10))),
    JokerInfo(Rarity.COMMON, 4, _whole_hand(_has_straight, JokerEffect(mult=12))),
    JokerInfo(Rarity.COMMON, 4, _whole_hand(_has_flush, JokerEffect(mult=10))),
    JokerInfo(Rarity.COMMON, 3, _whole_hand(_has_pair, JokerEffect(chips=50))),
    JokerInfo(Rarity.COMMON, 4, _whole_hand(_has_three, JokerEffect(chips=100))),
    JokerInfo(Rarity.COMMON, 4, _whole_hand(_has_two_pair, JokerEffect(chips=80))),
    JokerInfo(Rarity.COMMON, 4, _whole_hand(_has_straight, JokerEffect(chips=100))),
    JokerInfo(Rarity.COMMON, 4, _whole_hand(_has_flush, JokerEffect(chips=80))),
    JokerInfo(Rarity.COMMON, 5, _half),
    JokerInfo(Rarity.UNCOMMON, 8, _stencil),
    JokerInfo(Rarity.COMMON, 5, _banner),
    JokerInfo(Rarity.COMMON, 4, _walkie_talkie),
    JokerInfo(Rarity.UNCOMMON, 8, _fibonacci),
    JokerInfo(Rarity.UNCOMMON, 6, _blackboard),
    JokerInfo(Rarity.COMMON, 5, _mystic_summit),
    JokerInfo(Rarity.COMMON, 4, _misprint),
    JokerInfo(Rarity.COMMON, 4, _even_steven),
    JokerInfo(Rarity.COMMON, 5, _blue),
    JokerInfo(Rarity.COMMON, 4, _odd_todd),
    JokerInfo(Rarity.COMMON, 4, _scholar),
    JokerInfo(Rarity.COMMON, 4, _business_card),
    JokerInfo(Rarity.COMMON, 4, _scary_face),
    JokerInfo(Rarity.COMMON, 4, _smiley_face),
)

assert MAX_SELECTION_SIZE <= MAX_HAND_SIZE


def get_joker_registry_entry(joker_id: int) -> JokerInfo | None:
    """Return the registry entry for ``joker_id``, or None if there is none."""
    if not 0 <= joker_id < len(_REGISTRY):
        return None
    return _REGISTRY[joker_id]


def get_joker_registry_size() -> int:
    return len(_REGISTRY)