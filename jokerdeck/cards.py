"""Playing card suits, ranks and the card value type."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Suit(IntEnum):
    HEARTS = 0
    CLUBS = 1
    DIAMONDS = 2
    SPADES = 3


class Rank(IntEnum):
    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12


NUM_SUITS = len(Suit)
NUM_RANKS = len(Rank)
RANK_OFFSET = 2  # the lowest rank is two, stored as zero
IMPOSSIBLY_HIGH_CARD_VALUE = 100


@dataclass(frozen=True)
class Card:
    """A single playing card; plain integers are accepted and checked."""

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        object.__setattr__(self, "suit", Suit(self.suit))
        object.__setattr__(self, "rank", Rank(self.rank))