"""
Cell module for Minesweeper game.

Represents one position on the minefield: whether it holds a mine,
whether the player marked or revealed it, and its hint count.
"""
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

MINE = "X"
UNEXPLORED = "."
FREE = "/"
MARK = "*"


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        is_marked: Whether the player marked this cell as a suspected mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        is_revealed: Whether the cell has been uncovered.
    """

    is_mine: bool = False
    is_marked: bool = False
    adjacent_mines: int = 0
    is_revealed: bool = False

    def reveal(self) -> bool:
        """
        Reveal this cell, clearing any mark on it.

        Returns:
            True if the cell was newly revealed, False if it already was.
        """
        if self.is_revealed:
            return False
        self.is_revealed = True
        self.is_marked = False
        return True

    def toggle_mark(self) -> bool:
        """
        Toggle the mark on this cell.

        Returns:
            True if the mark was toggled, False if the cell is revealed.
        """
        if self.is_revealed:
            return False
        self.is_marked = not self.is_marked
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is still covered."""
        return not self.is_revealed

    def glyph(self, show_mines: bool = False) -> str:
        """
        Single-character text for this cell.

        Args:
            show_mines: Reveal mine positions (after an explosion).
        """
        if self.is_marked:
            return MARK
        if self.is_mine and show_mines:
            return MINE
        if self.is_revealed:
            if self.adjacent_mines > 0:
                return str(self.adjacent_mines)
            return FREE
        return UNEXPLORED

    def to_observation(self, show_mines: bool = False) -> int:
        """
        Convert cell to observation value for an agent.

        Returns:
            -1: Hidden cell
            -2: Marked cell
            0-8: Revealed cell with adjacent mine count
            9: Mine, once shown after an explosion
        """
        if self.is_marked:
            return -2
        if self.is_mine and show_mines:
            return 9
        if self.is_hidden:
            return -1
        return self.adjacent_mines
