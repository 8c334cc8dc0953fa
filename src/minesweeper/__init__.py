"""
Minesweeper game module.

Provides the minefield engine, cell model, player commands and the
turn transition used by the terminal shell.
"""
from .cell import Cell
from .commands import Action, Command, parse_command
from .errors import (
    InvalidAction,
    InvalidConfiguration,
    MalformedCommand,
    MinesweeperError,
    OutOfBounds,
)
from .minefield import FIELD_SIZE, BoardConfig, GameState, Minefield, Phase
from .session import LOSS_MESSAGE, WIN_MESSAGE, TurnResult, advance
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "Action",
    "Command",
    "parse_command",
    "MinesweeperError",
    "InvalidAction",
    "InvalidConfiguration",
    "MalformedCommand",
    "OutOfBounds",
    "FIELD_SIZE",
    "BoardConfig",
    "GameState",
    "Minefield",
    "Phase",
    "LOSS_MESSAGE",
    "WIN_MESSAGE",
    "TurnResult",
    "advance",
    "MinesweeperEnv",
]
