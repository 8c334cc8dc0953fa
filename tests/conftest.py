"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import BoardConfig, Cell, Minefield


# ============================================================================
# Minefield Fixtures
# ============================================================================

@pytest.fixture
def default_field() -> Minefield:
    """Create a default 9x9 field with 10 mines."""
    return Minefield(BoardConfig(seed=1234))


@pytest.fixture
def empty_field() -> Minefield:
    """Create a field with no mines for flood-fill testing."""
    return Minefield(BoardConfig(5, 0))


@pytest.fixture
def center_mine_field() -> Minefield:
    """3x3 field with a single mine in the middle."""
    return Minefield.from_layout(3, [(1, 1)])


@pytest.fixture
def corner_mine_field() -> Minefield:
    """3x3 field with a single mine in the bottom-right corner."""
    return Minefield.from_layout(3, [(2, 2)])


@pytest.fixture
def walled_field() -> Minefield:
    """
    5x5 field with a wall of mines down column 2.

    The left two columns form a zero/hint region cut off from the right.
    """
    return Minefield.from_layout(5, [(row, 2) for row in range(5)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)
