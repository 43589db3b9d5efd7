"""Tile-map (screenblock) editing and small helpers for placing text and tiles."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from .util import get_digits

# Screenblock and charblock bases of the background layers.
MAIN_BG_SBB = 31
MAIN_BG_CBB = 1
TTE_SBB = 30
TTE_CBB = 0
AFFINE_BG_SBB = 2
AFFINE_BG_CBB = 2
PAL_ROW_LEN = 16
NUM_PALETTES = 16

TTE_BIT_UNPACK_OFFSET = 14
TTE_BIT_ON_CLR_IDX = TTE_BIT_UNPACK_OFFSET + 1

TTE_YELLOW_PB = 12
TTE_BLUE_PB = 13
TTE_RED_PB = 14
TTE_WHITE_PB = 15


def rgb15(red: int, green: int, blue: int) -> int:
    """Pack 5-bit colour channels into a 15-bit colour."""
    return (red & 0x1F) | ((green & 0x1F) << 5) | ((blue & 0x1F) << 10)


TEXT_CLR_YELLOW = rgb15(31, 20, 0)
TEXT_CLR_BLUE = rgb15(0, 18, 31)
TEXT_CLR_RED = rgb15(31, 9, 8)
TEXT_CLR_WHITE = rgb15(31, 31, 31)

# A screenblock is a grid of 32x32 screen entries.
SE_ROW_LEN = 32
SE_COL_LEN = 32

# The y axis runs from the top of the screen to the bottom.
SCREEN_UP = -1
SCREEN_DOWN = 1
SCREEN_LEFT = -1
SCREEN_RIGHT = 1

SE_UP = SCREEN_UP
SE_DOWN = SCREEN_DOWN

OVERFLOW_LEFT = SCREEN_LEFT
OVERFLOW_RIGHT = SCREEN_RIGHT

TILE_SIZE = 8
EFFECT_TEXT_SEPARATION_AMOUNT = 32
TTE_CHAR_SIZE = TILE_SIZE

_SE_MASK = 0xFFFF


@dataclass(frozen=True)
class Rect:
    """An inclusive rectangle: both right and bottom belong to it."""

    left: int
    top: int
    right: int
    bottom: int

    def width(self) -> int:
        return self.right - self.left + 1

    def height(self) -> int:
        return self.bottom - self.top + 1


FULL_SCREENBLOCK_RECT = Rect(0, 0, SE_ROW_LEN - 1, SE_COL_LEN - 1)


def _clip(rect: Rect, bounding: Rect) -> Rect:
    return Rect(
        left=max(rect.left, bounding.left),
        top=max(rect.top, bounding.top),
        right=min(rect.right, bounding.right),
        bottom=min(rect.bottom, bounding.bottom),
    )


def _clip_within_step_vert(rect: Rect, direction: int) -> Rect:
    bounding = FULL_SCREENBLOCK_RECT
    if direction == SE_UP:
        bounding = replace(bounding, top=bounding.top + 1)
    elif direction == SE_DOWN:
        bounding = replace(bounding, bottom=bounding.bottom - 1)
    return _clip(rect, bounding)


@dataclass
class Screenblock:
    """A 32x32 grid of 16-bit screen entries, indexed by tile coordinates."""

    cells: list[list[int]] = field(
        default_factory=lambda: [[0] * SE_ROW_LEN for _ in range(SE_COL_LEN)]
    )

    @staticmethod
    def _in_bounds(x: int, y: int) -> bool:
        return 0 <= x < SE_ROW_LEN and 0 <= y < SE_COL_LEN

    def get(self, x: int, y: int) -> int:
        """Return the screen entry at tile (x, y)."""
        if not self._in_bounds(x, y):
            raise IndexError(f"tile ({x}, {y}) is outside the screenblock")
        return self.cells[y][x]

    def set(self, x: int, y: int, se: int) -> None:
        """Store a screen entry at tile (x, y)."""
        if not self._in_bounds(x, y):
            raise IndexError(f"tile ({x}, {y}) is outside the screenblock")
        self.cells[y][x] = se & _SE_MASK

    def _fill_row(self, y: int, left: int, width: int, se: int) -> None:
        self.cells[y][left:left + width] = [se & _SE_MASK] * width

    def clear_rect(self, rect: Rect) -> None:
        """Zero the rows from rect.top up to, but not including, rect.bottom."""
        if rect.left > rect.right:
            return
        rect = _clip(rect, FULL_SCREENBLOCK_RECT)
        for y in range(rect.top, rect.bottom):
            self._fill_row(y, rect.left, rect.width(), 0)

    def _copy_or_move_1_tile_vert(self, rect: Rect, direction: int, move: bool) -> None:
        if rect.left > rect.right or direction not in (SE_UP, SE_DOWN):
            return
        rect = _clip_within_step_vert(rect, direction)
        if rect.top > rect.bottom or rect.left > rect.right:
            return

        start, end = (rect.top, rect.bottom) if direction == SE_UP else (rect.bottom, rect.top)
        columns = slice(rect.left, rect.right + 1)
        # Walk from the leading edge so no row is overwritten before it is read.
        for y in range(start, end - direction, -direction):
            self.cells[y + direction][columns] = self.cells[y][columns]

        if move:
            self._fill_row(end, rect.left, rect.width(), 0)

    def copy_rect_1_tile_vert(self, rect: Rect, direction: int) -> None:
        """Copy a rect one tile up or down; the vacated row keeps its entries."""
        self._copy_or_move_1_tile_vert(rect, direction, move=False)

    def move_rect_1_tile_vert(self, rect: Rect, direction: int) -> None:
        """Move a rect one tile up or down; the vacated row becomes empty."""
        self._copy_or_move_1_tile_vert(rect, direction, move=True)

    def copy_rect(self, rect: Rect, x: int, y: int) -> None:
        """Copy a rect so its top-left corner lands on tile (x, y).

        Entries that would land outside the screenblock are dropped.
        """
        if rect.left > rect.right or rect.top > rect.bottom:
            return
        rect = _clip(rect, FULL_SCREENBLOCK_RECT)
        snapshot = [
            self.cells[row][rect.left:rect.right + 1]
            for row in range(rect.top, rect.bottom + 1)
        ]
        for dy, row in enumerate(snapshot):
            for dx, se in enumerate(row):
                if self._in_bounds(x + dx, y + dy):
                    self.cells[y + dy][x + dx] = se

    def fill_rect(self, se: int, rect: Rect) -> None:
        """Set every entry of the rect to ``se``."""
        if rect.left > rect.right or rect.top > rect.bottom:
            return
        rect = _clip(rect, FULL_SCREENBLOCK_RECT)
        for y in range(rect.top, rect.bottom + 1):
            self._fill_row(y, rect.left, rect.width(), se)

    def copy_expand_3x3_rect(self, rect: Rect, src_x: int, src_y: int) -> None:
        """Stretch the 3x3 block at (src_x, src_y) over the rect.

        Corners are copied, sides stretched and the centre filled. A rect
        narrower or shorter than two tiles is left alone.
        """
        rect = _clip(rect, FULL_SCREENBLOCK_RECT)
        width = rect.width()
        height = rect.height()
        if width < 2 or height < 2:
            return

        right = rect.left + width - 1
        bottom = rect.top + height - 1

        # Corners
        for (sx, sy), (dx, dy) in (
            ((src_x, src_y), (rect.left, rect.top)),
            ((src_x + 2, src_y), (right, rect.top)),
            ((src_x, src_y + 2), (rect.left, bottom)),
            ((src_x + 2, src_y + 2), (right, bottom)),
        ):
            self.cells[dy][dx] = self.get(sx, sy)

        # Top and bottom sides
        if width > 2:
            top_middle = self.get(src_x + 1, src_y)
            bottom_middle = self.get(src_x + 1, src_y + 2)
            self._fill_row(rect.top, rect.left + 1, width - 2, top_middle)
            self._fill_row(rect.bottom, rect.left + 1, width - 2, bottom_middle)

        # Left and right sides
        middle_left = self.get(src_x, src_y + 1)
        middle_right = self.get(src_x + 2, src_y + 1)
        for y in range(rect.top + 1, rect.top + height - 1):
            self.cells[y][rect.left] = middle_left
            self.cells[y][right] = middle_right

        if width > 2 and height > 2:
            centre = self.get(src_x + 1, src_y + 1)
            inner = Rect(rect.left + 1, rect.top + 1, rect.right - 1, rect.bottom - 1)
            self.fill_rect(centre, inner)


def right_align_num_rect(rect: Rect, num: int, overflow_direction: int) -> Rect:
    """Return ``rect`` with its left edge moved so ``num`` sits right-aligned.

    With OVERFLOW_LEFT a number too wide for the rect extends leftwards (never
    past x=0); with OVERFLOW_RIGHT it keeps the left edge and spills right.
    """
    num_digits = get_digits(num)
    if overflow_direction == OVERFLOW_LEFT:
        return replace(rect, left=max(0, rect.right - num_digits * TILE_SIZE))
    if overflow_direction == OVERFLOW_RIGHT:
        num_fitting_digits = int(rect.width() / TILE_SIZE)
        if num_digits < num_fitting_digits:
            return replace(
                rect, left=rect.left + (num_fitting_digits - num_digits) * TILE_SIZE
            )
    return rect


def copy16_tile8_with_palette_offset(src: Iterable[int], palette_offset: int) -> list[int]:
    """Shift both 8bpp pixels of every halfword by ``palette_offset``."""
    byte = palette_offset & 0xFF
    offset = (byte << 8) | byte
    return [(value + offset) & 0xFFFF for value in src]


def copy32_tile8_with_palette_offset(src: Iterable[int], palette_offset: int) -> list[int]:
    """Shift all four 8bpp pixels of every word by ``palette_offset``."""
    byte = palette_offset & 0xFF
    offset = (byte << 24) | (byte << 16) | (byte << 8) | byte
    return [(value + offset) & 0xFFFFFFFF for value in src]