from __future__ import annotations

from collections.abc import Iterable

import pytest

from unicorndash.domain.game_state import WorldState, new_world


class ScriptedRandom:
    """Hands out queued values, then a default that never triggers a spawn."""

    def __init__(self, values: Iterable[float] = (), *, default: float = 0.99, randrange_value: int = 0) -> None:
        self._values = list(values)
        self._default = default
        self._randrange_value = randrange_value

    def random(self) -> float:
        if self._values:
            return self._values.pop(0)
        return self._default

    def randrange(self, stop: int) -> int:
        return min(self._randrange_value, stop - 1)


@pytest.fixture
def quiet_rng() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture
def state(quiet_rng: ScriptedRandom) -> WorldState:
    return new_world(quiet_rng)


@pytest.fixture
def make_rng():
    return ScriptedRandom


class FakeRoot:
    """Stands in for tk.Tk: records scheduled callbacks instead of running a Tcl loop."""

    def __init__(self) -> None:
        self.pending: dict[str, object] = {}
        self._n = 0

    def after(self, _ms: int, fn) -> str:
        self._n += 1
        after_id = f"after#{self._n}"
        self.pending[after_id] = fn
        return after_id

    def after_cancel(self, after_id: str) -> None:
        self.pending.pop(after_id, None)

    def fire(self) -> None:
        for after_id in list(self.pending):
            # An earlier callback may have cancelled this one.
            fn = self.pending.pop(after_id, None)
            if fn is not None:
                fn()


@pytest.fixture
def root() -> FakeRoot:
    return FakeRoot()
