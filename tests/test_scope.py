"""Tests for scope.py."""

from __future__ import annotations

import pytest

from texscope.scope import ScopeHandle, open_scope


class TestScopeHandle:
    def test_close_runs_action(self):
        calls = []
        handle = open_scope(lambda: calls.append("closed"))
        assert not handle.closed
        handle.close()
        assert calls == ["closed"]
        assert handle.closed

    def test_close_twice_runs_once(self):
        calls = []
        handle = open_scope(lambda: calls.append(1))
        handle.close()
        handle.close()
        assert calls == [1]

    def test_context_manager(self):
        calls = []
        with open_scope(lambda: calls.append(1)) as handle:
            assert isinstance(handle, ScopeHandle)
            assert calls == []
        assert calls == [1]

    def test_context_manager_closes_on_exception(self):
        calls = []
        with pytest.raises(RuntimeError):
            with open_scope(lambda: calls.append(1)):
                raise RuntimeError("boom")
        assert calls == [1]

    def test_manual_close_inside_with_is_not_repeated(self):
        calls = []
        with open_scope(lambda: calls.append(1)) as handle:
            handle.close()
        assert calls == [1]

    def test_on_close_notified(self):
        seen = []
        handle = ScopeHandle(lambda: None, on_close=seen.append)
        handle.close()
        handle.close()
        assert seen == [handle]

    def test_on_close_notified_when_action_fails(self):
        seen = []

        def fail():
            raise ValueError("bad")

        handle = ScopeHandle(fail, on_close=seen.append)
        with pytest.raises(ValueError):
            handle.close()
        assert seen == [handle]
        assert handle.closed

    def test_repr(self):
        handle = open_scope(lambda: None)
        assert "open" in repr(handle)
        handle.close()
        assert "closed" in repr(handle)
