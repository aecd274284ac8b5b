from __future__ import annotations

from dataclasses import replace

import pytest

from unicorndash import config
from unicorndash.domain.events import GameEvent
from unicorndash.domain.game_state import Obstacle, PowerUp, PowerUpKind, Rect
from unicorndash.domain.world import World

# Player stands at x=100..180, y=170..250; ground obstacles sit at y=200..250.
ON_PLAYER_X = 120


@pytest.mark.parametrize(
    "kind, health_gain, score_gain",
    [(PowerUpKind.GOLD, 25, 15), (PowerUpKind.PURPLE, 15, 10)],
)
def test_collecting_powerup(state, kind, health_gain, score_gain):
    state = replace(state, health=50, score=7, powerups=(PowerUp(x=ON_PLAYER_X, y=180, kind=kind),))
    result = World().resolve_collisions(state)

    assert result.state.powerups == ()
    assert result.state.health == 50 + health_gain
    assert result.state.score == 7 + score_gain
    assert result.events == (GameEvent.COLLECTED,)


def test_powerup_health_is_clamped(state):
    state = replace(state, health=95, powerups=(PowerUp(x=ON_PLAYER_X, y=180, kind=PowerUpKind.GOLD),))
    result = World().resolve_collisions(state)
    assert result.state.health == config.MAX_HEALTH
    assert result.state.score == 15


def test_every_overlapping_powerup_is_collected(state):
    far = PowerUp(x=300, y=180, kind=PowerUpKind.GOLD)
    state = replace(
        state,
        health=10,
        powerups=(
            PowerUp(x=ON_PLAYER_X, y=180, kind=PowerUpKind.GOLD),
            far,
            PowerUp(x=ON_PLAYER_X, y=200, kind=PowerUpKind.PURPLE),
        ),
    )
    result = World().resolve_collisions(state)
    assert result.state.powerups == (far,)
    assert result.state.health == 50
    assert result.state.score == 25
    assert result.events == (GameEvent.COLLECTED, GameEvent.COLLECTED)


def test_obstacle_hit_costs_health_and_is_removed(state):
    state = replace(state, obstacles=(Obstacle(x=ON_PLAYER_X, y=200),))
    result = World().resolve_collisions(state)
    assert result.state.health == 90
    assert result.state.obstacles == ()
    assert not result.state.is_game_over
    assert result.events == ()


def test_only_one_obstacle_is_resolved_per_tick(state):
    second = Obstacle(x=ON_PLAYER_X + 10, y=200)
    state = replace(state, obstacles=(Obstacle(x=ON_PLAYER_X, y=200), second))

    result = World().resolve_collisions(state)
    assert result.state.health == 90
    assert result.state.obstacles == (second,)


def test_shield_blocks_damage_but_still_consumes_obstacle(state):
    state = replace(
        state,
        player=replace(state.player, shield_active=True, shield_cooldown=3),
        obstacles=(Obstacle(x=ON_PLAYER_X, y=200),),
    )
    result = World().resolve_collisions(state)
    assert result.state.health == 100
    assert result.state.obstacles == ()


def test_lethal_hit_ends_the_game(state, make_rng):
    state = replace(state, health=10, score=33, level=2, obstacles=(Obstacle(x=ON_PLAYER_X, y=200),))
    result = World().tick(state, make_rng())

    assert result.state.health == 0
    assert result.state.is_game_over
    assert result.events == (GameEvent.DIED,)

    frozen = result.state
    for _ in range(5):
        assert World().tick(frozen, make_rng([0.0] * 10)).state is frozen


def test_health_never_goes_negative(state):
    state = replace(state, health=4, obstacles=(Obstacle(x=ON_PLAYER_X, y=200),))
    result = World().resolve_collisions(state)
    assert result.state.health == 0
    assert result.state.is_game_over


def test_touching_edges_do_not_collide(state):
    # Player right edge is 180.
    state = replace(state, obstacles=(Obstacle(x=180, y=200),))
    result = World().resolve_collisions(state)
    assert result.state.health == 100
    assert len(result.state.obstacles) == 1


def test_jumping_over_an_obstacle_avoids_it(state):
    player = replace(state.player, y=config.APEX_Y, is_jumping=False)
    state = replace(state, player=player, obstacles=(Obstacle(x=ON_PLAYER_X, y=200),))
    result = World().resolve_collisions(state)
    assert result.state.health == 100


def test_rect_intersects():
    a = Rect(0, 0, 10, 10)
    assert a.intersects(Rect(5, 5, 10, 10))
    assert not a.intersects(Rect(10, 0, 5, 5))
    assert not a.intersects(Rect(0, 10, 5, 5))
    assert a.right == 10
