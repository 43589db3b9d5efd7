"""A grid of selectable rows driven by directional and button input."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from enum import IntFlag
from typing import Optional


class Key(IntFlag):
    A = 1 << 0
    B = 1 << 1
    SELECT = 1 << 2
    START = 1 << 3
    RIGHT = 1 << 4
    LEFT = 1 << 5
    UP = 1 << 6
    DOWN = 1 << 7
    R = 1 << 8
    L = 1 << 9


KEY_DIR = Key.RIGHT | Key.LEFT | Key.UP | Key.DOWN
KEY_ANY = int(KEY_DIR | Key.A | Key.B | Key.SELECT | Key.START | Key.R | Key.L)
_NON_DIRECTIONAL = KEY_ANY & ~int(KEY_DIR)


@dataclass(frozen=True)
class Selection:
    x: int = 0
    y: int = 0


SelectionChangedFunc = Callable[["SelectionGrid", int, Selection, Selection], None]
KeyHitFunc = Callable[["SelectionGrid", Selection], None]


@dataclass
class SelectionRow:
    """One row of the grid and the callbacks that react to it.

    A callback left as None means the row does not react to that event.
    """

    row_idx: int
    get_size: Callable[[], int]
    on_selection_changed: Optional[SelectionChangedFunc] = None
    on_key_hit: Optional[KeyHitFunc] = None

    def notify_selection_changed(
        self, grid: "SelectionGrid", row_idx: int, prev: Selection, new: Selection
    ) -> None:
        if self.on_selection_changed is not None:
            self.on_selection_changed(grid, row_idx, prev, new)

    def notify_key_hit(self, grid: "SelectionGrid", selection: Selection) -> None:
        if self.on_key_hit is not None:
            self.on_key_hit(grid, selection)


def _tribool(keys: int, plus: Key, minus: Key) -> int:
    return int(bool(keys & plus)) - int(bool(keys & minus))


@dataclass
class SelectionGrid:
    rows: Sequence[SelectionRow]
    selection: Selection = field(default_factory=Selection)

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    def _row_in_range(self, y: int) -> bool:
        return 0 <= y < self.num_rows

    def move_selection_horz(self, direction: int) -> None:
        """Move the cursor along its row if the new column exists."""
        current = self.selection
        new_selection = replace(current, x=current.x + direction)
        if not self._row_in_range(current.y):
            return
        row = self.rows[new_selection.y]
        if 0 <= new_selection.x < row.get_size():
            row.notify_selection_changed(self, new_selection.y, current, new_selection)
            self.selection = new_selection

    def move_selection_vert(self, direction: int) -> None:
        """Move the cursor to another row, clamping the column to its size."""
        current = self.selection
        new_y = current.y + direction
        if not self._row_in_range(new_y):
            return
        new_row = self.rows[new_y]
        new_row_size = new_row.get_size()
        if new_row_size <= 0:
            return
        new_x = min(current.x, new_row_size - 1)
        new_selection = Selection(x=new_x, y=new_y)
        if self._row_in_range(current.y):
            self.rows[current.y].notify_selection_changed(self, current.y, current, new_selection)
        new_row.notify_selection_changed(self, new_y, current, new_selection)
        self.selection = new_selection

    def process_input(self, keys_hit: int) -> None:
        """Handle one frame's newly pressed keys."""
        if not self.rows:
            return
        keys = int(keys_hit)

        horizontal = _tribool(keys, Key.RIGHT, Key.LEFT)
        if horizontal:
            self.move_selection_horz(horizontal)
        else:
            vertical = _tribool(keys, Key.DOWN, Key.UP)
            if vertical:
                self.move_selection_vert(vertical)

        if keys & _NON_DIRECTIONAL:
            self.rows[self.selection.y].notify_key_hit(self, self.selection)