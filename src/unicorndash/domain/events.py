from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from unicorndash.domain.game_state import WorldState


class GameEvent(Enum):
    """Side effects the domain reports to its collaborators (sound cues)."""

    JUMPED = "jump"
    COLLECTED = "collect"
    DIED = "death"


@dataclass(frozen=True)
class TickResult:
    state: WorldState
    events: tuple[GameEvent, ...] = ()
