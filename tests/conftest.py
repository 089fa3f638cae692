"""Shared fixtures for the ICSS test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from icss.scope import ScopeChain

FIXTURES = Path(__file__).parent / "fixtures"


class RecordingScopeChain(ScopeChain):
    """ScopeChain that counts every enter/leave call."""

    def __init__(self, snapshot: bool = False) -> None:
        super().__init__(snapshot=snapshot)
        self.entered = 0
        self.left = 0
        self.max_depth = 0

    def enter_scope(self) -> None:
        super().enter_scope()
        self.entered += 1
        self.max_depth = max(self.max_depth, self.depth)

    def leave_scope(self) -> None:
        super().leave_scope()
        self.left += 1


class ScopeRecorder:
    """Scope factory that remembers every chain it hands out."""

    def __init__(self, snapshot: bool = False) -> None:
        self.snapshot = snapshot
        self.chains: list[RecordingScopeChain] = []

    def __call__(self) -> RecordingScopeChain:
        chain = RecordingScopeChain(snapshot=self.snapshot)
        self.chains.append(chain)
        return chain

    @property
    def last(self) -> RecordingScopeChain:
        return self.chains[-1]


@pytest.fixture()
def lexical_scopes() -> ScopeRecorder:
    return ScopeRecorder(snapshot=False)


@pytest.fixture()
def snapshot_scopes() -> ScopeRecorder:
    return ScopeRecorder(snapshot=True)


@pytest.fixture()
def fixtures_dir() -> Path:
    return FIXTURES
