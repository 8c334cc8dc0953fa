"""
Turn handling for the command loop.

`advance` is a pure transition: it takes a field and a command and
returns a new field plus what the shell should show, leaving the input
field untouched.
"""
import copy
from dataclasses import dataclass
from typing import Optional, Tuple

from .commands import Command
from .minefield import Minefield


LOSS_MESSAGE = "You stepped on a mine and failed!"
WIN_MESSAGE = "Congratulations! You found all the mines!"


@dataclass(frozen=True)
class TurnResult:
    """
    Outcome of one turn.

    Attributes:
        changed: Whether the command altered the field.
        board: Rendered field after the turn.
        message: Loss or win message, if the game just ended.
        finished: Whether the game has reached a terminal state.
    """

    changed: bool
    board: str
    message: Optional[str]
    finished: bool


def terminal_message(minefield: Minefield) -> Optional[str]:
    """Get the message for a finished game, or None while playing."""
    if minefield.exploded:
        return LOSS_MESSAGE
    if minefield.solved:
        return WIN_MESSAGE
    return None


def advance(
    minefield: Minefield, command: Command
) -> Tuple[Minefield, TurnResult]:
    """
    Apply a command to a copy of the field.

    Args:
        minefield: Current field (not modified).
        command: Parsed player command.

    Returns:
        Tuple of (new field, turn result).

    Raises:
        OutOfBounds: Command targets a cell outside the field.
    """
    next_field = copy.deepcopy(minefield)
    changed = next_field.handle_action(command.row, command.col, command.action)

    result = TurnResult(
        changed=changed,
        board=next_field.render(),
        message=terminal_message(next_field),
        finished=not next_field.is_playing,
    )
    return next_field, result
