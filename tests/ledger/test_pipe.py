"""Tests for LogPipe."""

import logging

import pytest

from termledger import LogHistory, LogPipe, install_handler


@pytest.fixture
def received():
    return []


@pytest.fixture
def pipe(received):
    return LogPipe(received.append)


@pytest.mark.unit
class TestLogPipe:
    """Tests for LogPipe.write()."""

    def test_strips_single_trailing_newline(self, pipe, received):
        assert pipe.write("hello\n") == 6
        assert received == ["hello"]

    def test_keeps_inner_newlines(self, pipe, received):
        pipe.write("a\nb\n")
        assert received == ["a\nb"]

    def test_only_last_newline_removed(self, pipe, received):
        pipe.write("a\n\n")
        assert received == ["a\n"]

    def test_partial_line_passed_through(self, pipe, received):
        pipe.write("50%")
        assert received == ["50%"]

    def test_escape_after_newline_is_kept(self, pipe, received):
        pipe.write("done\n\x1b[0m")
        assert received == ["done\x1b[0m"]

    def test_empty_write_is_ignored(self, pipe, received):
        assert pipe.write("") == 0
        assert received == []

    def test_bytes_are_decoded(self, pipe, received):
        assert pipe.write(b"raw\n") == 4
        assert received == ["raw"]

    def test_writable(self, pipe):
        assert pipe.writable() is True

    def test_closed_pipe_raises(self, pipe):
        pipe.close()
        with pytest.raises(ValueError, match="closed"):
            pipe.write("x")

    def test_requires_callable(self):
        with pytest.raises(TypeError, match="must be callable"):
            LogPipe("not callable")

    def test_print_to_pipe(self, pipe, received):
        print("from print", file=pipe)
        assert "".join(received) == "from print"

    def test_pipe_into_ledger(self, stream, registry):
        ledger = LogHistory(stream, registry)
        logger = logging.getLogger("test.pipe")
        logger.propagate = False
        install_handler(ledger, colors=False, logger=logger)

        LogPipe(logger.info).write("child output\n")

        assert stream.chunks[-1].endswith("[I] child output\n")
        ledger.close()
