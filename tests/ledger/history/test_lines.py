"""Tests for termledger.history.lines."""

import pytest

from termledger.history import (
    LogLine,
    StreamHandle,
    mint_session_id,
    split_lines,
    update_history,
)


@pytest.fixture
def handle():
    """Stream handle with a no-op write function."""
    return StreamHandle(stream=None, original_write=lambda s: len(s))


class TestSplitLines:
    """Tests for split_lines()."""

    def test_keeps_terminators(self):
        assert split_lines("a\nb\nc") == ["a\n", "b\n", "c"]

    def test_no_trailing_empty_segment(self):
        assert split_lines("a\n") == ["a\n"]

    def test_empty_text(self):
        assert split_lines("") == []

    def test_blank_lines(self):
        assert split_lines("\n\n") == ["\n", "\n"]

    def test_carriage_return_is_not_a_terminator(self):
        assert split_lines("50%\r60%\n") == ["50%\r60%\n"]


class TestLogLine:
    """Tests for LogLine.complete."""

    def test_complete(self):
        assert LogLine(None, "x\n").complete is True

    def test_incomplete(self):
        assert LogLine(None, "x").complete is False

    def test_trailing_escape_after_terminator(self):
        assert LogLine(None, "x\n\x1b[0m").complete is True


class TestUpdateHistory:
    """Tests for update_history()."""

    def test_noop_without_active_sessions(self, handle):
        update_history(handle, None, "a\nb\n")
        assert handle.history == []

    def test_appends_tagged_lines(self, handle):
        sid = mint_session_id()
        handle.active_sessions.append(sid)

        update_history(handle, sid, "a\nb\n")

        assert handle.history == [LogLine(sid, "a\n"), LogLine(sid, "b\n")]

    def test_merges_into_open_line(self, handle):
        sid = mint_session_id()
        handle.active_sessions.append(sid)

        update_history(handle, None, "abc")
        update_history(handle, sid, "def\nghi\n")

        assert [line.content for line in handle.history] == ["abcdef\n", "ghi\n"]
        # The merged line keeps the tag of whoever opened it
        assert handle.history[0].session_id is None
        assert handle.history[1].session_id is sid

    def test_complete_line_starts_new_entry(self, handle):
        handle.active_sessions.append(mint_session_id())

        update_history(handle, None, "a\n")
        update_history(handle, None, "b")

        assert [line.content for line in handle.history] == ["a\n", "b"]

    def test_empty_chunk_is_ignored(self, handle):
        handle.active_sessions.append(mint_session_id())

        update_history(handle, None, "")

        assert handle.history == []
