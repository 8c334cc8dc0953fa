"""
Error types for the Minesweeper game.

Every error here is a rejection of bad external input: the shell reports
it and prompts again.
"""


class MinesweeperError(ValueError):
    """Base class for all user-input errors raised by the game."""


class InvalidConfiguration(MinesweeperError):
    """Board size or mine count is outside the playable range."""


class InvalidAction(MinesweeperError):
    """Action token is neither 'mine' nor 'free'."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Must be mine or free, gave: {token}")
        self.token = token


class MalformedCommand(MinesweeperError):
    """Command line does not have the '<column> <row> <action>' shape."""


class OutOfBounds(MinesweeperError):
    """Coordinate lies outside the grid."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(
            f"Cell ({col}, {row}) is outside the {size}x{size} field"
        )
        self.row = row
        self.col = col
        self.size = size
