"""Counting ranks and suits of a set of cards and recognising poker hands."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .cards import NUM_RANKS, NUM_SUITS, Card, Rank, Suit

MAX_SELECTION_SIZE = 5
_STRAIGHT_LENGTH = 5
_ACE_LOW_STRAIGHT = (Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE)


@dataclass(frozen=True)
class Distribution:
    """How many cards there are of each rank and of each suit."""

    ranks: tuple[int, ...] = (0,) * NUM_RANKS
    suits: tuple[int, ...] = (0,) * NUM_SUITS


def get_distribution(cards: Iterable[Card | None]) -> Distribution:
    """Count ranks and suits of the given cards, skipping empty slots."""
    present = [card for card in cards if card is not None]
    rank_counts = Counter(card.rank for card in present)
    suit_counts = Counter(card.suit for card in present)
    return Distribution(
        ranks=tuple(rank_counts[rank] for rank in Rank),
        suits=tuple(suit_counts[suit] for suit in Suit),
    )


def hand_contains_n_of_a_kind(ranks: Sequence[int]) -> int:
    """Largest number of cards sharing one rank (a full house gives 3)."""
    return max(ranks, default=0)


def hand_contains_two_pair(ranks: Sequence[int]) -> bool:
    return sum(1 for count in ranks if count >= 2) >= 2


def hand_contains_full_house(ranks: Sequence[int]) -> bool:
    """A three of a kind plus another pair, or two threes of a kind."""
    threes = sum(1 for count in ranks if count >= 3)
    pairs = sum(1 for count in ranks if count == 2)
    return threes >= 2 or (threes >= 1 and pairs >= 1)


def hand_contains_straight(ranks: Sequence[int]) -> bool:
    """Five consecutive ranks, counting the ace-low straight too."""
    if any(
        all(ranks[start:start + _STRAIGHT_LENGTH])
        for start in range(NUM_RANKS - _STRAIGHT_LENGTH + 1)
    ):
        return True
    return all(ranks[rank] for rank in _ACE_LOW_STRAIGHT)


def hand_contains_flush(suits: Sequence[int]) -> bool:
    return any(count >= MAX_SELECTION_SIZE for count in suits)