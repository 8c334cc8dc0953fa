"""
Player commands.

A turn is one line of text, '<column> <row> <action>', where the
coordinates are zero-based and the action is 'mine' (mark) or 'free'
(reveal).
"""
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidAction, MalformedCommand


class Action(Enum):
    """What the player wants to do with a cell."""

    MARK = "mine"
    REVEAL = "free"

    @classmethod
    def from_token(cls, token: str) -> "Action":
        """Map an input token to an action, raising InvalidAction."""
        for action in cls:
            if action.value == token:
                return action
        raise InvalidAction(token)


@dataclass(frozen=True)
class Command:
    """A parsed turn: target cell and action."""

    row: int
    col: int
    action: Action


def parse_command(line: str) -> Command:
    """
    Parse one line of player input.

    Args:
        line: Text such as '3 4 free' (column, row, action).

    Returns:
        The parsed Command.

    Raises:
        MalformedCommand: Wrong number of tokens or non-integer coordinates.
        InvalidAction: Action token is not 'mine' or 'free'.
    """
    tokens = line.split()
    if len(tokens) != 3:
        raise MalformedCommand(
            f"Expected '<column> <row> <action>', got: {line.strip()!r}"
        )

    col_token, row_token, action_token = tokens
    try:
        col = int(col_token)
        row = int(row_token)
    except ValueError:
        raise MalformedCommand(
            f"Coordinates must be integers, got: {col_token} {row_token}"
        ) from None

    return Command(row=row, col=col, action=Action.from_token(action_token))
