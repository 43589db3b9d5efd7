"""Hardware-style sprite slots and the animated objects that drive them."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from .util import UNDEFINED

# Fixed-point numbers carry 8 fractional bits.
FIX_SHIFT = 8
FIX_SCALE = 1 << FIX_SHIFT
FIX_ONE = FIX_SCALE

MAX_SPRITES = 128
MAX_AFFINES = 32
MAX_TILE_ID = 1023
SPRITE_FOCUS_RAISE_PX = 10
CARD_SPRITE_SIZE = 32

# Sound playback parameters.
MM_FULL_VOLUME = 255
MM_PAN_CENTER = 128
MM_BASE_PITCH_RATE = 1024

SFX_DEFAULT_VOLUME = MM_FULL_VOLUME
SFX_DEFAULT_PAN = MM_PAN_CENTER
SFX_DEFAULT_HANDLE = 0

_FOCUS_PITCH_SPREAD = 512
_ANGLE_MASK = 0xFFFF

SoundPlayer = Callable[[int, int], None]


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def int2fx(value: int) -> int:
    """Convert an integer to fixed point."""
    return value * FIX_SCALE


def float2fx(value: float) -> int:
    """Convert a float to fixed point, truncating toward zero."""
    return int(value * FIX_SCALE)


def fx2int(value: int) -> int:
    """Convert fixed point to an integer, truncating toward zero."""
    return _trunc_div(value, FIX_SCALE)


class SpriteAllocationError(RuntimeError):
    """Raised when a sprite slot or affine matrix cannot be allocated."""


@dataclass(eq=False)
class Sprite:
    """One object slot: tile, palette bank, position and optional affine transform."""

    index: int
    tid: int
    pb: int
    affine_index: int | None = None
    x: int = 0
    y: int = 0
    hidden: bool = False
    scale_x: int = FIX_ONE
    scale_y: int = FIX_ONE
    angle: int = 0
    _owner: SpriteAllocator | None = field(default=None, repr=False)

    @property
    def layer(self) -> int:
        return self.index

    @property
    def is_affine(self) -> bool:
        return self.affine_index is not None

    def position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def rotscale(self, scale_x: int, scale_y: int, angle: int) -> None:
        """Set the affine scale (fixed point) and rotation angle (16-bit turn)."""
        self.scale_x = scale_x
        self.scale_y = scale_y
        self.angle = angle & _ANGLE_MASK

    def release(self) -> None:
        """Give the slot back to the allocator that handed it out."""
        if self._owner is not None:
            self._owner.destroy(self)


class SpriteAllocator:
    """Hands out the fixed set of sprite slots and affine matrices."""

    def __init__(self) -> None:
        self._slots: list[Sprite | None] = [None] * MAX_SPRITES
        self._affines_used: list[bool] = [False] * MAX_AFFINES

    def new_sprite(self, tid: int, pb: int, sprite_index: int, affine: bool = False) -> Sprite:
        """Claim slot ``sprite_index``; affine sprites also get a free matrix."""
        if not 0 <= sprite_index < MAX_SPRITES:
            raise IndexError(f"sprite index {sprite_index} is out of range")
        if not 0 <= tid <= MAX_TILE_ID:
            raise ValueError(f"tile id {tid} is out of range")
        if not 0 <= pb < 16:
            raise ValueError(f"palette bank {pb} is out of range")
        if self._slots[sprite_index] is not None:
            raise SpriteAllocationError(f"sprite slot {sprite_index} is already in use")

        affine_index = None
        if affine:
            affine_index = next(
                (i for i, used in enumerate(self._affines_used) if not used), None
            )
            if affine_index is None:
                raise SpriteAllocationError("no free affine matrix")
            self._affines_used[affine_index] = True

        sprite = Sprite(index=sprite_index, tid=tid, pb=pb, affine_index=affine_index, _owner=self)
        self._slots[sprite_index] = sprite
        return sprite

    def destroy(self, sprite: Sprite | None) -> None:
        """Hide the sprite and free its slot and matrix. ``None`` is ignored."""
        if sprite is None:
            return
        sprite.hidden = True
        if self._slots[sprite.index] is sprite:
            self._slots[sprite.index] = None
        if sprite.affine_index is not None:
            self._affines_used[sprite.affine_index] = False
        sprite._owner = None

    def is_used(self, sprite_index: int) -> bool:
        return self._slots[sprite_index] is not None

    @property
    def free_affines(self) -> int:
        return self._affines_used.count(False)

    def __iter__(self) -> Iterator[Sprite]:
        """Active sprites in slot order."""
        return (sprite for sprite in self._slots if sprite is not None)


@dataclass(eq=False)
class SpriteObject:
    """A sprite that eases toward a target position, scale and rotation."""

    sprite: Sprite | None = None
    tx: int = 0
    ty: int = 0
    x: int = 0
    y: int = 0
    vx: int = 0
    vy: int = 0
    tscale: int = FIX_ONE
    scale: int = FIX_ONE
    vscale: int = 0
    trotation: int = 0
    rotation: int = 0
    vrotation: int = 0
    selected: bool = False
    focused: bool = False
    sound_player: SoundPlayer | None = field(default=None, repr=False)
    focus_sound_id: int | None = None
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def _play(self, sound_id: int, rate: int) -> None:
        if self.sound_player is not None:
            self.sound_player(sound_id, rate)

    def set_sprite(self, sprite: Sprite | None) -> None:
        """Attach a sprite, releasing the one held before."""
        if self.sprite is not None and self.sprite is not sprite:
            self.sprite.release()
        self.sprite = sprite

    def destroy(self) -> None:
        """Release the sprite held by this object."""
        self.set_sprite(None)

    def reset_transform(self) -> None:
        self.tx = self.ty = 0
        self.x = self.y = 0
        self.vx = self.vy = 0
        self.tscale = FIX_ONE
        self.scale = FIX_ONE
        self.vscale = 0
        self.trotation = 0
        self.rotation = 0
        self.vrotation = 0

    def update(self) -> None:
        """Advance the easing by one frame and apply it to the sprite."""
        self.vx += _trunc_div(self.tx - self.x, 8)
        self.vy += _trunc_div(self.ty - self.y, 8)
        self.vscale += _trunc_div(self.tscale - self.scale, 8)
        self.vrotation += _trunc_div(self.trotation - self.rotation, 8)

        epsilon = float2fx(0.01)

        if -epsilon < self.vx < epsilon and -epsilon < self.vy < epsilon:
            self.vx = self.vy = 0
            self.x = self.tx
            self.y = self.ty
        else:
            self.vx = _trunc_div(self.vx * 7, 10)
            self.vy = _trunc_div(self.vy * 7, 10)
            self.x += self.vx
            self.y += self.vy

        if -epsilon < self.vscale < epsilon:
            self.vscale = 0
            self.scale = self.tscale
        else:
            self.vscale = _trunc_div(self.vscale * 7, 10)
            self.scale += self.vscale

        if -epsilon < self.vrotation < epsilon:
            self.vrotation = 0
            self.rotation = self.trotation
        else:
            self.vrotation = _trunc_div(self.vrotation * 7, 10)
            self.rotation += self.vrotation

        if self.sprite is not None:
            self.sprite.rotscale(self.scale, self.scale, -self.vx + self.rotation)
            self.sprite.position(fx2int(self.x), fx2int(self.y))

    def shake(self, sound_id: int = UNDEFINED) -> None:
        """Kick scale and rotation; play ``sound_id`` unless it is UNDEFINED."""
        self.vscale = float2fx(0.3)
        self.vrotation = float2fx(8.0)
        if sound_id == UNDEFINED:
            return
        self._play(sound_id, MM_BASE_PITCH_RATE)

    def set_focus(self, focus: bool) -> None:
        """Raise the object when focused and lower it again when not."""
        if self.focused == focus:
            return
        self.focused = focus
        if self.focus_sound_id is not None:
            rate = MM_BASE_PITCH_RATE + self.rng.randrange(_FOCUS_PITCH_SPREAD)
            self._play(self.focus_sound_id, rate)
        self.ty += int2fx((-1 if focus else 1) * SPRITE_FOCUS_RAISE_PX)