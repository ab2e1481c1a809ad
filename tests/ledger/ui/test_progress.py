"""Tests for ProgressBar."""

import pytest

from termledger import LedgerConfig
from termledger.ui import BarSymbols, InteractiveSession, ProgressBar


class FakeClock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def bar_at(progress, **kwargs):
    return ProgressBar(lambda: progress, **kwargs)


@pytest.mark.unit
class TestProgressBar:
    """Tests for ProgressBar rendering."""

    @pytest.mark.parametrize(
        "progress,expected",
        [
            (0, "[------------] 0%"),
            (0.5, "[=====>------] 50%"),
            (0.25, "[==>---------] 25%"),
            (1, "[============] 100%"),
        ],
    )
    def test_default_format(self, progress, expected):
        assert bar_at(progress).render() == expected

    @pytest.mark.parametrize("progress,expected", [(-0.5, 0.0), (1.7, 1.0)])
    def test_progress_is_clamped(self, progress, expected):
        assert bar_at(progress).progress() == expected

    def test_nan_counts_as_no_progress(self):
        assert bar_at(float("nan")).render() == "[------------] 0%"

    def test_percentage_rounds_half_up(self):
        assert bar_at(0.125, fmt=":percentage").render() == "13%"

    def test_custom_width_and_symbols(self):
        symbols = BarSymbols(head="|", tail="|", complete="#", complete_head="#")
        bar = bar_at(0.5, width=4, symbols=symbols, fmt=":bar")
        assert bar.render() == "|##--|"

    def test_invalid_width(self):
        with pytest.raises(ValueError, match="width must be positive"):
            bar_at(0.5, width=0)

    def test_elapsed_and_remaining(self):
        clock = FakeClock()
        bar = bar_at(0.25, fmt=":elapsed/:remaining", clock=clock)
        clock.now = 10
        assert bar.render() == "10s/30.0s"

    def test_remaining_empty_without_progress(self):
        clock = FakeClock()
        bar = bar_at(0, fmt="[:remaining]", clock=clock)
        clock.now = 5
        assert bar.render() == "[]"

    def test_plain_text_kept(self):
        assert bar_at(1, fmt="copy: :percentage done").render() == "copy: 100% done"

    def test_str(self):
        bar = bar_at(0.5)
        assert str(bar) == bar.render()

    def test_progress_read_on_every_render(self):
        state = {"done": 0}
        bar = ProgressBar(lambda: state["done"] / 4, fmt=":percentage")
        assert bar.render() == "0%"
        state["done"] = 3
        assert bar.render() == "75%"


@pytest.mark.integration
class TestProgressBarSession:
    """A progress bar driven by an InteractiveSession."""

    def test_final_frame_written_on_stop(self, ledger, stream):
        state = {"done": 0}
        bar = ProgressBar(lambda: state["done"] / 2)
        session = InteractiveSession(
            ledger, bar.render, config=LedgerConfig(interactive=False)
        )

        with session:
            state["done"] = 2

        assert stream.getvalue() == "[============] 100%\n"
