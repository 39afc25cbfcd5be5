"""
Board - cell selection state for the 3x3 grid.

The board handles:
- Cell index validation
- Selection toggling for the current perspective (placement or attack)
- Blind snapshots that do not reveal ship positions

Cell numbering:
- Cells are numbered row by row from the TOP-LEFT
- Cell 0 is (row 0, col 0), cell 8 is (row 2, col 2)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

from ..core.errors import InvalidPlacement
from ..core.state import GameState
from ..core.types import CELLS_PER_ROW, DEFAULT_RULES, GameRules
from infra.logger import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class BoardSnapshot:
    """Immutable view of a board's selection at one moment."""
    cell_count: int
    selected_cells: Tuple[int, ...]

    @property
    def is_blank(self) -> bool:
        return not self.selected_cells


class BoardState:
    """
    Selection status of every cell on the board.

    Out-of-range cell indices are ignored: toggling them is a no-op.

    Attributes:
        cell_count: Number of cells on the board
    """

    def __init__(self, cell_count: int = DEFAULT_RULES.cell_count):
        """
        Initialize an empty board.

        Args:
            cell_count: Number of cells (must be positive)

        Raises:
            ValueError: If cell_count is invalid
        """
        if cell_count <= 0:
            raise ValueError(f"Board must have cells: {cell_count}")

        self.cell_count = cell_count
        self._selected: List[bool] = [False] * cell_count

    def in_bounds(self, cell_index: int) -> bool:
        """Check if a cell index lies on the board."""
        return (
            isinstance(cell_index, int)
            and not isinstance(cell_index, bool)
            and 0 <= cell_index < self.cell_count
        )

    def is_selected(self, cell_index: int) -> bool:
        return self.in_bounds(cell_index) and self._selected[cell_index]

    def toggle(self, cell_index: int) -> bool:
        """
        Flip a cell between selected and unselected.

        Args:
            cell_index: Cell to flip

        Returns:
            True if the cell changed, False for an out-of-range index
        """
        if not self.in_bounds(cell_index):
            log.debug("Ignoring toggle of out-of-range cell %r", cell_index)
            return False
        self._selected[cell_index] = not self._selected[cell_index]
        return True

    def reset(self) -> None:
        """Clear every selection."""
        self._selected = [False] * self.cell_count

    @property
    def selected_cells(self) -> List[int]:
        """Selected cell indices in ascending order."""
        return [index for index, selected in enumerate(self._selected) if selected]

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(self.cell_count, tuple(self.selected_cells))

    @staticmethod
    def to_row_col(cell_index: int, cells_per_row: int = CELLS_PER_ROW) -> Tuple[int, int]:
        """Convert a cell index to (row, col)."""
        return divmod(cell_index, cells_per_row)

    @staticmethod
    def to_cell_index(row: int, col: int, cells_per_row: int = CELLS_PER_ROW) -> int:
        """Convert (row, col) to a cell index."""
        return row * cells_per_row + col

    def __str__(self) -> str:
        return f"Board({len(self.selected_cells)}/{self.cell_count} selected)"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(cell_count={self.cell_count}, selected={self.selected_cells})"


class PlacementBoard(BoardState):
    """
    Board used by the placing player to hide their ships.

    A cell can only be selected while ships remain to be placed; a selected
    cell can always be deselected.
    """

    def __init__(self, rules: GameRules = DEFAULT_RULES):
        super().__init__(rules.cell_count)
        self.rules = rules

    @property
    def ships_left_to_place(self) -> int:
        return self.rules.total_ship_count - len(self.selected_cells)

    @property
    def is_ready(self) -> bool:
        """True when exactly the required number of ships is placed."""
        return self.ships_left_to_place == 0

    def toggle(self, cell_index: int) -> bool:
        if self.ships_left_to_place <= 0 and not self.is_selected(cell_index):
            return False
        return super().toggle(cell_index)

    def finish(self) -> GameState:
        """
        Build the game from the current selection and blank the board.

        The board is reset so that a snapshot taken afterwards does not give
        away where the ships are.

        Raises:
            InvalidPlacement: If not all ships have been placed
        """
        if not self.is_ready:
            raise InvalidPlacement(
                f"{self.ships_left_to_place} ship(s) left to place"
            )
        state = GameState.create(self.selected_cells, self.rules)
        self.reset()
        return state
