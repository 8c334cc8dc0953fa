"""
Minefield module for Minesweeper game.

Implements the square minefield with deferred mine placement, hint
calculation, flood-fill revealing, action dispatch and win/loss detection.
"""
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell
from .commands import Action
from .errors import InvalidConfiguration, OutOfBounds


# ============================================================================
# Constants
# ============================================================================

FIELD_SIZE = 9

# Random draws allowed per cell before placement falls back to sampling
# from the remaining eligible cells.
PLACEMENT_ATTEMPTS_PER_CELL = 4


class Phase(Enum):
    """Mine placement lifecycle."""

    UNINITIALIZED = auto()
    PLACED = auto()


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    EXPLODED = auto()
    SOLVED = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a minefield.

    Attributes:
        size: Number of rows and columns.
        num_mines: Total mines to place.
        seed: Seed for the placement RNG (None for a random game).
    """

    size: int = FIELD_SIZE
    num_mines: int = 10
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size < 1:
            raise InvalidConfiguration("Field size must be positive")
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        max_mines = self.size * self.size - 1
        if self.num_mines > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.size * self.size


# ============================================================================
# Minefield Class
# ============================================================================

@dataclass
class Minefield:
    """
    Minesweeper minefield.

    Owns the grid of cells. Mines are placed on the first reveal so that
    the first revealed cell is never a mine.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _phase: Phase = Phase.UNINITIALIZED
    _state: GameState = GameState.PLAYING
    _rng: Optional[random.Random] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        if self._rng is None:
            self._rng = random.Random(self.config.seed)
        self._init_grid()

    @classmethod
    def from_layout(
        cls, size: int, mines: Iterable[Tuple[int, int]]
    ) -> "Minefield":
        """
        Build a field whose mines are already placed.

        Args:
            size: Number of rows and columns.
            mines: (row, col) positions of the mines.

        Returns:
            Field in the placed phase with hints calculated.
        """
        positions = set(mines)
        minefield = cls(BoardConfig(size=size, num_mines=len(positions)))
        for row, col in positions:
            if not minefield.in_bounds(row, col):
                raise OutOfBounds(row, col, size)
            minefield._grid[row][col].is_mine = True
        minefield._phase = Phase.PLACED
        minefield.calculate_hints()
        return minefield

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.size)]
            for _ in range(self.config.size)
        ]

    def place_mines(self, exclude: Tuple[int, int]) -> None:
        """
        Place mines randomly, keeping one cell mine-free.

        Draws random coordinates and retries on collision. Once the attempt
        budget is spent (dense fields), the remaining mines are sampled
        from the cells still eligible.

        Args:
            exclude: (row, col) of the first revealed cell.
        """
        if self._phase is Phase.PLACED:
            raise RuntimeError("Mines have already been placed")

        size = self.config.size
        remaining = self.config.num_mines
        attempts = PLACEMENT_ATTEMPTS_PER_CELL * self.config.total_cells
        while remaining > 0 and attempts > 0:
            attempts -= 1
            row = self._rng.randrange(size)
            col = self._rng.randrange(size)
            cell = self._grid[row][col]
            if (row, col) == exclude or cell.is_mine:
                continue
            cell.is_mine = True
            remaining -= 1

        if remaining > 0:
            eligible = [
                (row, col)
                for row in range(size)
                for col in range(size)
                if (row, col) != exclude and not self._grid[row][col].is_mine
            ]
            for row, col in self._rng.sample(eligible, remaining):
                self._grid[row][col].is_mine = True

        self._phase = Phase.PLACED

    def calculate_hints(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        for row in range(self.config.size):
            for col in range(self.config.size):
                if not self._grid[row][col].is_mine:
                    count = self._count_adjacent_mines(row, col)
                    self._grid[row][col].adjacent_mines = count

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get in-bounds neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_bounds(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within the field."""
        return 0 <= row < self.config.size and 0 <= col < self.config.size

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> int:
        """
        Reveal a cell and flood-fill its zero-hint region.

        Out-of-bounds positions, mines and already revealed cells are left
        alone. A revealed cell with no adjacent mines reveals all of its
        neighbors in turn; hinted cells on the border are revealed but do
        not spread further.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Number of cells newly revealed.
        """
        if not self.in_bounds(row, col):
            return 0
        start = self._grid[row][col]
        if start.is_mine or start.is_revealed:
            return 0

        revealed = 0
        pending = [(row, col)]
        queued = {(row, col)}
        while pending:
            current_row, current_col = pending.pop()
            cell = self._grid[current_row][current_col]
            cell.reveal()
            revealed += 1
            if cell.adjacent_mines > 0:
                continue
            for position in self.neighbors(current_row, current_col):
                neighbor = self._grid[position[0]][position[1]]
                if position in queued or neighbor.is_mine or neighbor.is_revealed:
                    continue
                queued.add(position)
                pending.append(position)

        return revealed

    def handle_action(self, row: int, col: int, action: Action) -> bool:
        """
        Apply one player action.

        Args:
            row: Row index of the target cell.
            col: Column index of the target cell.
            action: Action.REVEAL or Action.MARK.

        Returns:
            True if the action changed the field, False otherwise.

        Raises:
            OutOfBounds: Target lies outside the field.
        """
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self.config.size)
        if not self.is_playing:
            return False

        if action is Action.REVEAL:
            changed = self._handle_reveal(row, col)
        else:
            changed = self._grid[row][col].toggle_mark()

        if changed:
            self._check_win_condition()
        return changed

    def _handle_reveal(self, row: int, col: int) -> bool:
        """Reveal a cell, placing mines first on the opening move."""
        if self._phase is Phase.UNINITIALIZED:
            self._handle_first_reveal(row, col)
            return True

        if self._grid[row][col].is_mine:
            self._state = GameState.EXPLODED
            return True

        return self.reveal(row, col) > 0

    def _handle_first_reveal(self, row: int, col: int) -> None:
        """Handle first reveal: place mines around it and calculate counts."""
        self.place_mines((row, col))
        self.calculate_hints()
        self.reveal(row, col)

    def _check_win_condition(self) -> None:
        """Mark the field solved when the mines are flagged or isolated."""
        if self._phase is not Phase.PLACED or not self.is_playing:
            return

        num_mines = self.config.num_mines
        marked = self._count_cells(lambda cell: cell.is_marked)
        marked_mines = self._count_cells(
            lambda cell: cell.is_marked and cell.is_mine
        )
        if marked == num_mines and marked_mines == num_mines:
            self._state = GameState.SOLVED
            return

        hidden = self.hidden_count()
        hidden_mines = self._count_cells(
            lambda cell: cell.is_hidden and cell.is_mine
        )
        if hidden == num_mines and hidden_mines == num_mines:
            self._state = GameState.SOLVED

    def _count_cells(self, predicate) -> int:
        return sum(1 for row in self._grid for cell in row if predicate(cell))

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    @property
    def phase(self) -> Phase:
        """Get current placement phase."""
        return self._phase

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._state

    @property
    def mines_placed(self) -> bool:
        return self._phase is Phase.PLACED

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._state is GameState.PLAYING

    @property
    def exploded(self) -> bool:
        """Check if a mine was revealed."""
        return self._state is GameState.EXPLODED

    @property
    def solved(self) -> bool:
        """Check if all mines were identified."""
        return self._state is GameState.SOLVED

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.in_bounds(row, col):
            return None
        return self._grid[row][col]

    def mine_count(self) -> int:
        """Number of cells currently holding a mine."""
        return self._count_cells(lambda cell: cell.is_mine)

    def marked_count(self) -> int:
        return self._count_cells(lambda cell: cell.is_marked)

    def hidden_count(self) -> int:
        return self._count_cells(lambda cell: cell.is_hidden)

    def get_observation(self) -> np.ndarray:
        """
        Get field state as numpy array for an agent.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = marked
                0-8 = revealed with adjacent count
                9 = mine (only after an explosion)
        """
        size = self.config.size
        obs = np.zeros((size, size), dtype=np.int8)
        for row in range(size):
            for col in range(size):
                obs[row, col] = self._grid[row][col].to_observation(
                    self.exploded
                )
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (row, col) positions of hidden cells.
        """
        actions = []
        for row in range(self.config.size):
            for col in range(self.config.size):
                if self._grid[row][col].is_hidden:
                    actions.append((row, col))
        return actions

    def render(self) -> str:
        """
        Render the field as text with a legend border.

        Column indices run along the top and row indices down the left,
        both zero-based and printed modulo 10.
        """
        size = self.config.size
        show_mines = self.exploded
        header = " |" + "".join(str(col % 10) for col in range(size)) + "|"
        border = "-|" + "-" * size + "|"

        lines = [header, border]
        for row in range(size):
            cells = "".join(cell.glyph(show_mines) for cell in self._grid[row])
            lines.append(f"{row % 10}|{cells}|")
        lines.append(border)
        return "\n".join(lines)

    def reset(self) -> None:
        """Reset field to initial state for a new game."""
        self._init_grid()
        self._phase = Phase.UNINITIALIZED
        self._state = GameState.PLAYING
