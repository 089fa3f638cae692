"""Tests for the scope chain."""

import pytest

from icss.scope import ScopeChain, ScopeError


# ---------------------------------------------------------------------------
# Lexical (checker) mode
# ---------------------------------------------------------------------------


class TestLexicalChain:
    def test_starts_empty(self):
        chain: ScopeChain[int] = ScopeChain()
        assert chain.depth == 0
        assert chain.resolve("X") is None

    def test_bind_and_resolve(self):
        chain: ScopeChain[int] = ScopeChain()
        chain.enter_scope()
        chain.bind("X", 1)
        assert chain.resolve("X") == 1
        assert "X" in chain

    def test_outer_binding_visible_in_nested_scope(self):
        chain: ScopeChain[int] = ScopeChain()
        chain.enter_scope()
        chain.bind("X", 1)
        chain.enter_scope()
        assert chain.resolve("X") == 1

    def test_nested_scope_starts_empty(self):
        chain: ScopeChain[int] = ScopeChain()
        chain.enter_scope()
        chain.bind("X", 1)
        chain.enter_scope()
        chain.bind("Y", 2)
        chain.leave_scope()
        assert chain.resolve("Y") is None
        assert not chain.is_bound("Y")

    def test_shadowing_does_not_touch_outer(self):
        chain: ScopeChain[str] = ScopeChain()
        chain.enter_scope()
        chain.bind("X", "outer")
        with chain.scope():
            chain.bind("X", "inner")
            assert chain.resolve("X") == "inner"
        assert chain.resolve("X") == "outer"

    def test_names_are_case_sensitive(self):
        chain: ScopeChain[int] = ScopeChain()
        chain.enter_scope()
        chain.bind("Width", 1)
        assert chain.resolve("width") is None

    def test_bound_to_none_is_still_bound(self):
        chain: ScopeChain[int | None] = ScopeChain()
        chain.enter_scope()
        chain.bind("X", None)
        assert chain.is_bound("X")
        assert chain.resolve("X") is None


# ---------------------------------------------------------------------------
# Snapshot (evaluator) mode
# ---------------------------------------------------------------------------


class TestSnapshotChain:
    def test_nested_scope_copies_top(self):
        chain: ScopeChain[int] = ScopeChain(snapshot=True)
        chain.enter_scope()
        chain.bind("X", 1)
        chain.enter_scope()
        assert chain.resolve("X") == 1

    def test_rebinding_in_nested_scope_leaves_parent(self):
        chain: ScopeChain[int] = ScopeChain(snapshot=True)
        chain.enter_scope()
        chain.bind("X", 1)
        with chain.scope():
            chain.bind("X", 2)
            assert chain.resolve("X") == 2
        assert chain.resolve("X") == 1

    def test_later_parent_bindings_not_seen_by_snapshot(self):
        chain: ScopeChain[int] = ScopeChain(snapshot=True)
        chain.enter_scope()
        chain.enter_scope()
        chain._scopes[0]["late"] = 1  # bound after the snapshot was taken
        assert chain.resolve("late") is None


# ---------------------------------------------------------------------------
# Balance
# ---------------------------------------------------------------------------


class TestBalance:
    def test_leave_without_enter_raises(self):
        chain: ScopeChain[int] = ScopeChain()
        with pytest.raises(ScopeError):
            chain.leave_scope()

    def test_bind_without_scope_raises(self):
        chain: ScopeChain[int] = ScopeChain()
        with pytest.raises(ScopeError):
            chain.bind("X", 1)

    def test_context_manager_restores_depth(self):
        chain: ScopeChain[int] = ScopeChain()
        with chain.scope():
            with chain.scope():
                assert chain.depth == 2
            assert chain.depth == 1
        assert chain.depth == 0

    def test_context_manager_leaves_on_exception(self):
        chain: ScopeChain[int] = ScopeChain()
        with pytest.raises(ValueError):
            with chain.scope():
                raise ValueError("early exit")
        assert chain.depth == 0

    def test_repr(self):
        assert repr(ScopeChain(snapshot=True)) == "ScopeChain(depth=0, snapshot=True)"
