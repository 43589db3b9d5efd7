# jokerdeck

`jokerdeck` holds the game logic of a poker-style card game in which jokers change how a hand scores. It is a library: you build the game loop, the drawing and the sound around it.

## What is in it

- **Cards**: `jokerdeck.cards` defines the `Suit` and `Rank` enums and a frozen `Card(suit, rank)`. Plain integers are accepted and checked against the enums.
- **Hand analysis**: `jokerdeck.hand_analysis` counts the ranks and suits of a set of cards with `get_distribution(cards)`. It skips `None` slots and returns a `Distribution` with `ranks` and `suits` tuples. The predicates `hand_contains_n_of_a_kind`, `hand_contains_two_pair`, `hand_contains_full_house`, `hand_contains_straight` and `hand_contains_flush` work on those counts. The straight check includes the ace-low straight, and a flush needs five cards of one suit.
- **Joker effects**: `jokerdeck.joker_effects` holds a registry of thirty jokers, looked up with `get_joker_registry_entry(joker_id)` and `get_joker_registry_size()`. Each entry is a `JokerInfo` with a `Rarity`, a base value and an effect. An effect takes the joker, a scored card (`None` means the end of the hand) and a `ScoringContext`, and returns a `JokerEffect` of chips, mult, xmult and money. A `ScoringContext` describes the game state: played cards, cards in hand, held joker ids, discards remaining, deck size, money and a random generator. An all-zero `JokerEffect` is falsy.
- **Jokers**: `jokerdeck.joker` provides `Joker`, `new_joker(joker_id)`, the `Edition` enum and `Joker.sell_value()` (half the value, rounded down).
  - `JokerObject` pairs a joker with an animated sprite. `JokerObject.score(scored_card, context, tally)` adds the joker's effect to a `ScoreTally`. It also records coloured `ScoreText` entries for display. A joker triggers at most once until its `processed` flag is cleared.
  - `JokerSpriteManager` hands out joker layers, and palette banks shared by spritesheets, through `acquire` and `release`.
- **Selection cursor**: `jokerdeck.selection_grid` provides a `SelectionGrid` of `SelectionRow`s. Drive it with `process_input(keys_hit)`, where `keys_hit` is a combination of `Key` flags, or with `move_selection_horz` and `move_selection_vert`. Rows report changes through optional callbacks.
- **Tile maps**: `jokerdeck.graphic_utils` provides an inclusive `Rect` and a 32×32 `Screenblock` of 16-bit screen entries.
  - The screenblock supports `clear_rect`, `fill_rect`, `copy_rect`, one-tile vertical `copy_rect_1_tile_vert` and `move_rect_1_tile_vert`, and 3×3 nine-slice expansion with `copy_expand_3x3_rect`. Rects are clipped to the screenblock.
  - `clear_rect` clears the rows from `top` up to, but not including, `bottom`.
  - `right_align_num_rect` places a number right-aligned in a text rect.
  - The `copy16_…`/`copy32_tile8_with_palette_offset` functions shift 8bpp pixel data by a palette offset.
- **Sprites**: `jokerdeck.sprite` provides the fixed-point helpers `int2fx`, `float2fx` and `fx2int`, with 8 fractional bits.
  - `SpriteAllocator` manages 128 sprite slots and 32 affine matrices. It raises `SpriteAllocationError` when a slot or matrix cannot be had.
  - `SpriteObject` eases a sprite toward a target position, scale and rotation on each `update()`. It also provides `shake()` and `set_focus()`. Sounds are played only through an optional `sound_player` callable.
- **Helpers**: `jokerdeck.util` provides `get_digits`, `get_digits_odd`, `get_digits_even` and `int_arr_max`. `int_arr_max` returns the smallest 32-bit integer for an empty input.

## What it does not do

There is no game loop, deck, shop, blinds or round flow, and no command to run. Nothing is drawn on a screen and no audio is played. The screenblock and sprites are in-memory models. Palette loading and sound playback are left to callables you supply. Game state reaches the jokers only through the `ScoringContext` you fill in.

## Installation

```
pip install .
```

## Example

```python
from jokerdeck.cards import Card, Rank, Suit
from jokerdeck.hand_analysis import get_distribution, hand_contains_flush
from jokerdeck.joker import new_joker

hand = [Card(Suit.HEARTS, rank) for rank in (Rank.TWO, Rank.FIVE, Rank.NINE, Rank.JACK, Rank.ACE)]
dist = get_distribution(hand)
print(hand_contains_flush(dist.suits))  # True

joker = new_joker(1)                    # Greedy Joker, base value 5
print(joker.sell_value())               # 2
```

## Running the tests

```
pip install .[test]
pytest
```