from __future__ import annotations

from enum import Enum
from typing import Callable

from gridmenu.ui.renderer import effective_columns


class Direction(Enum):
    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"


class GridNavigator:
    """Cursor over a row-major grid of options.

    The grid has ``min(max_columns, count)`` columns; the last row may be
    short. Every move returns whether the cursor changed, and all moves are
    no-ops on an empty grid.
    """

    def __init__(
        self,
        count: Callable[[], int],
        max_columns: Callable[[], int],
    ) -> None:
        self._count = count
        self._max_columns = max_columns
        self._selected = 0

    @property
    def selected(self) -> int:
        return self.clamp()

    def clamp(self) -> int:
        """Pull the cursor back inside the grid after options were removed.

        The clamped index is stored, so options added later never move the
        cursor back to where it was before the removal.
        """
        count = self._count()
        if self._selected >= count:
            self._selected = max(0, count - 1)
        return self._selected

    def columns(self) -> int:
        return effective_columns(self._max_columns(), self._count())

    def set_highlighted(self, index: int) -> None:
        count = self._count()
        if count == 0:
            return
        if index >= count:
            index = count - 1
        self._selected = max(0, index)

    select = set_highlighted

    def move_left(self) -> bool:
        current = self.selected
        if self._count() == 0 or current == 0:
            return False
        self._selected = current - 1
        return True

    def move_right(self) -> bool:
        count = self._count()
        current = self.selected
        if count == 0 or current >= count - 1:
            return False
        self._selected = current + 1
        return True

    def move_up(self) -> bool:
        if self._count() == 0:
            return False
        columns = self.columns()
        current = self.selected
        if current // columns == 0:
            return False
        self._selected = current - columns
        return True

    def move_down(self) -> bool:
        count = self._count()
        if count == 0:
            return False
        columns = self.columns()
        current = self.selected
        last_row = (count - 1) // columns
        if current // columns >= last_row:
            return False
        # Clamp into a short final row instead of overshooting.
        target = min(current + columns, count - 1)
        if target == current:
            return False
        self._selected = target
        return True

    def move(self, direction: Direction) -> bool:
        handlers = {
            Direction.LEFT: self.move_left,
            Direction.UP: self.move_up,
            Direction.RIGHT: self.move_right,
            Direction.DOWN: self.move_down,
        }
        return handlers[direction]()
