from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from unicorndash import config
from unicorndash.domain.rng import RandomSource


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    w: int
    h: int

    @property
    def right(self) -> int:
        return self.x + self.w

    def intersects(self, other: Rect) -> bool:
        # Strict overlap: rectangles sharing only an edge do not intersect.
        return (
            self.x < other.x + other.w
            and other.x < self.x + self.w
            and self.y < other.y + other.h
            and other.y < self.y + self.h
        )


class PowerUpKind(Enum):
    GOLD = "gold"
    PURPLE = "purple"

    @property
    def health_bonus(self) -> int:
        return 25 if self is PowerUpKind.GOLD else 15

    @property
    def score_bonus(self) -> int:
        return 15 if self is PowerUpKind.GOLD else 10


@dataclass(frozen=True)
class Obstacle:
    x: int
    y: int
    w: int = config.OBSTACLE_WIDTH
    h: int = config.OBSTACLE_HEIGHT

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.w, self.h)


@dataclass(frozen=True)
class PowerUp:
    x: int
    y: int
    kind: PowerUpKind
    size: int = config.POWERUP_SIZE

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.size, self.size)


@dataclass(frozen=True)
class Star:
    x: int
    y: int


@dataclass(frozen=True)
class Player:
    x: int = config.PLAYER_X
    y: int = config.GROUND_Y
    is_jumping: bool = False
    shield_active: bool = False
    shield_cooldown: int = 0  # ticks the current shield has been up

    @property
    def on_ground(self) -> bool:
        return self.y >= config.GROUND_Y

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, config.PLAYER_WIDTH, config.PLAYER_HEIGHT)


@dataclass(frozen=True)
class WorldState:
    player: Player
    score: int
    health: int
    level: int
    time_left: int  # seconds until the next level-up
    obstacle_speed: int  # pixels per tick

    # Live entities, scrolled left every tick
    obstacles: tuple[Obstacle, ...]
    powerups: tuple[PowerUp, ...]

    # Background, generated once per session
    stars: tuple[Star, ...]

    is_game_over: bool = False


def generate_stars(rng: RandomSource, count: int = config.STAR_COUNT) -> tuple[Star, ...]:
    return tuple(
        Star(x=rng.randrange(config.WIDTH), y=rng.randrange(config.HEIGHT - 100))
        for _ in range(count)
    )


def new_world(rng: RandomSource) -> WorldState:
    return WorldState(
        player=Player(),
        score=0,
        health=config.INITIAL_HEALTH,
        level=1,
        time_left=config.LEVEL_DURATION,
        obstacle_speed=config.INITIAL_OBSTACLE_SPEED,
        obstacles=(),
        powerups=(),
        stars=generate_stars(rng),
    )


def reset_world(state: WorldState) -> WorldState:
    """Back to the starting values, keeping the session's star field."""
    return replace(
        state,
        player=Player(),
        score=0,
        health=config.INITIAL_HEALTH,
        level=1,
        time_left=config.LEVEL_DURATION,
        obstacle_speed=config.INITIAL_OBSTACLE_SPEED,
        obstacles=(),
        powerups=(),
        is_game_over=False,
    )
