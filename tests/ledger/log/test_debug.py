"""Tests for DEBUG namespace matching."""

import pytest

from termledger.log import is_debug_namespace


@pytest.mark.unit
class TestIsDebugNamespace:
    """Tests for is_debug_namespace()."""

    def test_unset_matches_nothing(self):
        assert is_debug_namespace("app") is False

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "app")
        assert is_debug_namespace("app") is True

    def test_global_wildcard(self):
        assert is_debug_namespace("anything.at.all", debug="*")

    @pytest.mark.parametrize(
        "namespace,expected",
        [
            ("app", True),
            ("app.db", True),
            ("app:db", True),
            ("application", False),
            ("other.app", False),
        ],
    )
    def test_prefix_wildcard(self, namespace, expected):
        assert is_debug_namespace(namespace, debug="app.*") is expected

    def test_colon_wildcard(self):
        assert is_debug_namespace("app.db", debug="app:*")

    def test_exact_match_only(self):
        assert is_debug_namespace("app.db", debug="app.db")
        assert not is_debug_namespace("app.db.pool", debug="app.db")
        assert not is_debug_namespace("app", debug="app.db")

    @pytest.mark.parametrize("debug", ["worker,app", "worker app", "worker, app"])
    def test_separators(self, debug):
        assert is_debug_namespace("app", debug=debug)
        assert is_debug_namespace("worker", debug=debug)
        assert not is_debug_namespace("cron", debug=debug)
