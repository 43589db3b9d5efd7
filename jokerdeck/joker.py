"""Jokers, the objects that show them on screen, and their palette and layer bookkeeping."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum

from .cards import Card
from .graphic_utils import (
    NUM_PALETTES,
    TTE_BLUE_PB,
    TTE_CHAR_SIZE,
    TTE_RED_PB,
    TTE_YELLOW_PB,
)
from .hand_analysis import MAX_SELECTION_SIZE
from .joker_effects import (
    MAX_CARD_SCORE_STR_LEN,
    MAX_HAND_SIZE,
    JokerEffect,
    Rarity,
    ScoringContext,
    get_joker_registry_entry,
    get_joker_registry_size,
)
from .sprite import (
    Sprite,
    SpriteAllocationError,
    SpriteAllocator,
    SpriteObject,
    SoundPlayer,
    fx2int,
)
from .util import UNDEFINED

JOKER_SPRITE_OFFSET = 16
JOKER_TID = (MAX_HAND_SIZE + MAX_SELECTION_SIZE) * JOKER_SPRITE_OFFSET
JOKER_BASE_PB = 4
JOKER_LAST_PB = NUM_PALETTES - 1
JOKER_STARTING_LAYER = 27
MAX_JOKER_OBJECTS = 32
NUM_JOKERS_PER_SPRITESHEET = 2
JOKER_SCORE_TEXT_Y = 48

# One character for a space after the widest score string.
_SCORE_TEXT_STEP = (MAX_CARD_SCORE_STR_LEN + 1) * TTE_CHAR_SIZE
_SCORE_TEXT_X_OFFSET = 8

PaletteLoader = Callable[[int, int], None]


class Edition(IntEnum):
    BASE = 0
    FOIL = 1
    HOLO = 2
    POLY = 3
    NEGATIVE = 4


EDITION_PRICE = {
    Edition.BASE: 0,
    Edition.FOIL: 2,
    Edition.HOLO: 3,
    Edition.POLY: 5,
    Edition.NEGATIVE: 5,
}


def num_spritesheets() -> int:
    """Number of spritesheets needed to hold every registered joker."""
    return -(-get_joker_registry_size() // NUM_JOKERS_PER_SPRITESHEET)


def spritesheet_index(joker_id: int) -> int:
    return joker_id // NUM_JOKERS_PER_SPRITESHEET


def joker_tile_index(layer: int) -> int:
    """First tile of the sprite tiles reserved for a joker layer."""
    return JOKER_TID + layer * JOKER_SPRITE_OFFSET


@dataclass
class Joker:
    """A joker held or offered in the shop."""

    id: int
    modifier: Edition
    value: int
    rarity: Rarity
    processed: bool = False

    def score_effect(self, scored_card: Card | None, context: ScoringContext) -> JokerEffect:
        """What this joker contributes for ``scored_card`` (None: end of scoring)."""
        info = get_joker_registry_entry(self.id)
        if info is None:
            return JokerEffect()
        return info.effect(self, scored_card, context)

    def sell_value(self) -> int:
        return self.value // 2


def new_joker(joker_id: int) -> Joker:
    """Create a base-edition joker of the given registry id."""
    info = get_joker_registry_entry(joker_id)
    if info is None:
        raise ValueError(f"no joker with id {joker_id}")
    modifier = Edition.BASE
    return Joker(
        id=joker_id,
        modifier=modifier,
        value=info.base_value + EDITION_PRICE[modifier],
        rarity=info.rarity,
    )


class JokerSpriteManager:
    """Tracks joker sprite layers and the palette banks shared by spritesheets."""

    def __init__(
        self,
        allocator: SpriteAllocator | None = None,
        palette_loader: PaletteLoader | None = None,
    ) -> None:
        self.allocator = allocator if allocator is not None else SpriteAllocator()
        self._palette_loader = palette_loader
        self._used_layers = [False] * MAX_JOKER_OBJECTS
        self._sheet_pb = [UNDEFINED] * num_spritesheets()
        self._pb_users = {pb: 0 for pb in range(JOKER_BASE_PB, JOKER_LAST_PB + 1)}

    def pb_for_spritesheet(self, sheet_index: int) -> int:
        """Palette bank given to a spritesheet, or UNDEFINED."""
        return self._sheet_pb[sheet_index]

    def pb_users(self, pb: int) -> int:
        return self._pb_users[pb]

    def is_layer_used(self, layer: int) -> bool:
        return self._used_layers[layer]

    def _unused_pb(self) -> int:
        return next((pb for pb, users in self._pb_users.items() if users == 0), UNDEFINED)

    def _allocate_pb(self, joker_id: int) -> int:
        sheet = spritesheet_index(joker_id)
        pb = self._sheet_pb[sheet]
        if pb != UNDEFINED:
            return pb
        pb = self._unused_pb()
        if pb == UNDEFINED:
            # Out of palette banks: share the first one and hope the colours fit.
            return JOKER_BASE_PB
        self._sheet_pb[sheet] = pb
        if self._palette_loader is not None:
            self._palette_loader(sheet, pb)
        return pb

    def acquire(self, joker_id: int) -> tuple[int, int]:
        """Reserve a layer and a palette bank for a joker; return (layer, pb)."""
        if not 0 <= joker_id < get_joker_registry_size():
            raise ValueError(f"no joker with id {joker_id}")
        layer = next((i for i, used in enumerate(self._used_layers) if not used), None)
        if layer is None:
            raise SpriteAllocationError("no free joker layer")
        self._used_layers[layer] = True
        pb = self._allocate_pb(joker_id)
        self._pb_users[pb] += 1
        return layer, pb

    def release(self, joker_id: int, layer: int, pb: int) -> None:
        """Give back what ``acquire`` reserved for a joker."""
        if not 0 <= layer < MAX_JOKER_OBJECTS:
            raise ValueError(f"joker layer {layer} is out of range")
        if pb not in self._pb_users:
            raise ValueError(f"palette bank {pb} is not a joker palette bank")
        self._used_layers[layer] = False
        self._pb_users[pb] = max(0, self._pb_users[pb] - 1)
        if self._pb_users[pb] == 0:
            self._sheet_pb[spritesheet_index(joker_id)] = UNDEFINED


@dataclass(frozen=True)
class ScoreText:
    """A piece of score text to draw, with its palette bank for colour."""

    text: str
    x: int
    y: int
    pb: int


@dataclass
class ScoreTally:
    """Running totals of a hand being scored, and the texts to show for it."""

    chips: int = 0
    mult: int = 0
    money: int = 0
    texts: list[ScoreText] = field(default_factory=list)


class JokerObject:
    """A joker together with the animated sprite that shows it."""

    def __init__(
        self,
        joker: Joker,
        manager: JokerSpriteManager,
        *,
        sound_player: SoundPlayer | None = None,
        score_sound_id: int = UNDEFINED,
    ) -> None:
        self.joker = joker
        self._manager = manager
        self.score_sound_id = score_sound_id
        layer, pb = manager.acquire(joker.id)
        try:
            sprite = manager.allocator.new_sprite(
                joker_tile_index(layer), pb, JOKER_STARTING_LAYER + layer, affine=True
            )
        except (SpriteAllocationError, ValueError, IndexError):
            manager.release(joker.id, layer, pb)
            raise
        self.sprite_object = SpriteObject(sprite=sprite, sound_player=sound_player)
        self._destroyed = False

    @property
    def sprite(self) -> Sprite | None:
        return self.sprite_object.sprite

    @property
    def layer(self) -> int:
        if self.sprite is None:
            return UNDEFINED
        return self.sprite.layer - JOKER_STARTING_LAYER

    @property
    def selected(self) -> bool:
        return self.sprite_object.selected

    @selected.setter
    def selected(self, value: bool) -> None:
        self.sprite_object.selected = value

    def shake(self, sound_id: int = UNDEFINED) -> None:
        """Play the scoring wiggle; nothing is scored."""
        self.sprite_object.shake(sound_id)

    def score(
        self, scored_card: Card | None, context: ScoringContext, tally: ScoreTally
    ) -> bool:
        """Apply this joker to ``tally``; True if it triggered.

        A joker triggers at most once until its ``processed`` flag is cleared.
        """
        if self.joker.processed:
            return False
        effect = self.joker.score_effect(scored_card, context)
        if not effect:
            return False

        tally.chips += effect.chips
        tally.mult += effect.mult
        tally.mult *= effect.xmult if effect.xmult > 0 else 1
        tally.money += effect.money

        x = fx2int(self.sprite_object.x) + _SCORE_TEXT_X_OFFSET
        for amount, prefix, pb in (
            (effect.chips, "+", TTE_BLUE_PB),
            (effect.mult, "+", TTE_RED_PB),
            (effect.xmult, "X", TTE_RED_PB),
            (effect.money, "+", TTE_YELLOW_PB),
        ):
            if amount > 0:
                tally.texts.append(ScoreText(f"{prefix}{amount}", x, JOKER_SCORE_TEXT_Y, pb))
                x += _SCORE_TEXT_STEP

        self.joker.processed = True
        self.shake(self.score_sound_id)
        return True

    def destroy(self) -> None:
        """Free the sprite, layer and palette bank. Calling it again does nothing."""
        if self._destroyed:
            return
        sprite = self.sprite
        if sprite is not None:
            self._manager.release(
                self.joker.id, sprite.layer - JOKER_STARTING_LAYER, sprite.pb
            )
        self.sprite_object.destroy()
        self._destroyed = True