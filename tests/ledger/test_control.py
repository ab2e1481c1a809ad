"""Tests for terminal control sequences."""

import pytest

from termledger import control


@pytest.mark.unit
class TestSequences:
    """Escape sequences emitted by the ledger."""

    def test_cursor_visibility(self):
        assert control.HIDE_CURSOR == "\x1b[?25l"
        assert control.SHOW_CURSOR == "\x1b[?25h"

    def test_erase_line_returns_to_column_zero(self):
        assert control.ERASE_LINE == "\r\x1b[2K"

    def test_cursor_up(self):
        assert control.cursor_up(3) == "\x1b[3A"

    def test_cursor_down(self):
        assert control.cursor_down(1) == "\x1b[1B"

    def test_carriage_return(self):
        assert control.CARRIAGE_RETURN == "\r"

    def test_move_to_column_is_one_based_on_the_wire(self):
        assert control.move_to_column(0) == "\x1b[1G"
        assert control.move_to_column(7) == "\x1b[8G"

    @pytest.mark.parametrize("count", [0, -2])
    def test_non_positive_moves_are_empty(self, count):
        assert control.cursor_up(count) == ""
        assert control.cursor_down(count) == ""


@pytest.mark.unit
class TestLineHelpers:
    """Tests for strip_ansi() and is_complete_line()."""

    def test_strip_ansi(self):
        assert control.strip_ansi("\x1b[31mred\x1b[0m") == "red"

    def test_strip_ansi_plain_text(self):
        assert control.strip_ansi("plain") == "plain"

    def test_strip_private_mode_sequences(self):
        assert control.strip_ansi(control.HIDE_CURSOR + "x") == "x"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("line\n", True),
            ("line", False),
            ("", False),
            ("line\n\x1b[0m", True),
            ("\x1b[31mline\x1b[0m", False),
            ("a\nb", False),
        ],
    )
    def test_is_complete_line(self, text, expected):
        assert control.is_complete_line(text) is expected
