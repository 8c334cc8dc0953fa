"""
Unit tests for command parsing.
"""
import pytest
from minesweeper import (
    Action,
    Command,
    InvalidAction,
    MalformedCommand,
    MinesweeperError,
    parse_command,
)


# ============================================================================
# Action Tests
# ============================================================================

class TestAction:
    """Test action token mapping."""

    def test_mine_token_is_mark(self) -> None:
        assert Action.from_token("mine") is Action.MARK

    def test_free_token_is_reveal(self) -> None:
        assert Action.from_token("free") is Action.REVEAL

    @pytest.mark.parametrize("token", ["flag", "MINE", "", "open"])
    def test_unknown_token_raises(self, token: str) -> None:
        with pytest.raises(InvalidAction, match="Must be mine or free"):
            Action.from_token(token)


# ============================================================================
# Parse Tests
# ============================================================================

class TestParseCommand:
    """Test '<column> <row> <action>' parsing."""

    def test_column_comes_first(self) -> None:
        assert parse_command("3 5 free") == Command(
            row=5, col=3, action=Action.REVEAL
        )

    def test_extra_whitespace_is_ignored(self) -> None:
        assert parse_command("  0   8 mine\n") == Command(
            row=8, col=0, action=Action.MARK
        )

    def test_out_of_range_coordinates_are_parsed(self) -> None:
        """Bounds are the engine's concern."""
        command = parse_command("-1 42 free")
        assert (command.row, command.col) == (42, -1)

    @pytest.mark.parametrize("line", ["", "1 2", "1 2 free now"])
    def test_wrong_token_count_raises(self, line: str) -> None:
        with pytest.raises(MalformedCommand):
            parse_command(line)

    def test_non_integer_coordinate_raises(self) -> None:
        with pytest.raises(MalformedCommand, match="integers"):
            parse_command("a 2 free")

    def test_invalid_action_raises(self) -> None:
        with pytest.raises(InvalidAction):
            parse_command("1 2 boom")

    def test_errors_share_base_class(self) -> None:
        for line in ("1 2 boom", "x y free"):
            with pytest.raises(MinesweeperError):
                parse_command(line)
