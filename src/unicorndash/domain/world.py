from __future__ import annotations

from dataclasses import replace

from unicorndash import config
from unicorndash.domain.events import GameEvent, TickResult
from unicorndash.domain.game_state import Obstacle, Player, PowerUp, PowerUpKind, WorldState
from unicorndash.domain.level import obstacle_spawn_chance
from unicorndash.domain.rng import RandomSource


class World:
    def tick(self, state: WorldState, rng: RandomSource) -> TickResult:
        if state.is_game_over:
            return TickResult(state)

        # ----- Vertical motion (triangular jump) -----
        player = self._move_player(state.player)

        # ----- Scroll world (move entities left) -----
        dx = state.obstacle_speed
        obstacles = tuple(
            o for o in (replace(o, x=o.x - dx) for o in state.obstacles) if o.x + o.w >= 0
        )
        powerups = tuple(
            p for p in (replace(p, x=p.x - dx) for p in state.powerups) if p.x + p.size >= 0
        )

        # ----- Spawn -----
        if rng.random() < obstacle_spawn_chance(state.level):
            obstacles += (Obstacle(x=config.WIDTH, y=config.HEIGHT - config.OBSTACLE_HEIGHT - config.GROUND_HEIGHT),)

        if rng.random() < config.POWERUP_SPAWN_CHANCE:
            kind = PowerUpKind.GOLD if rng.random() < 0.5 else PowerUpKind.PURPLE
            y = config.POWERUP_BAND_BOTTOM - rng.randrange(config.POWERUP_BAND_RANGE)
            powerups += (PowerUp(x=config.WIDTH, y=y, kind=kind),)

        # ----- Shield -----
        player = self._decay_shield(player)

        state = replace(state, player=player, obstacles=obstacles, powerups=powerups)
        return self.resolve_collisions(state)

    def resolve_collisions(self, state: WorldState) -> TickResult:
        hitbox = state.player.rect
        events: list[GameEvent] = []
        health = state.health
        score = state.score

        kept_powerups: list[PowerUp] = []
        for p in state.powerups:
            if p.rect.intersects(hitbox):
                health = min(config.MAX_HEALTH, health + p.kind.health_bonus)
                score += p.kind.score_bonus
                events.append(GameEvent.COLLECTED)
            else:
                kept_powerups.append(p)

        # At most one obstacle is resolved per tick, even if several overlap.
        obstacles = state.obstacles
        game_over = False
        for i, o in enumerate(obstacles):
            if o.rect.intersects(hitbox):
                obstacles = obstacles[:i] + obstacles[i + 1:]
                if not state.player.shield_active:
                    health = max(0, health - config.OBSTACLE_DAMAGE)
                    if health <= 0:
                        game_over = True
                        events.append(GameEvent.DIED)
                break

        state = replace(
            state,
            health=health,
            score=score,
            powerups=tuple(kept_powerups),
            obstacles=obstacles,
            is_game_over=game_over,
        )
        return TickResult(state, tuple(events))

    def _move_player(self, p: Player) -> Player:
        if p.is_jumping:
            y = max(config.APEX_Y, p.y - config.GRAVITY)
            return replace(p, y=y, is_jumping=y > config.APEX_Y)
        if p.y < config.GROUND_Y:
            return replace(p, y=min(config.GROUND_Y, p.y + config.GRAVITY))
        return p

    def _decay_shield(self, p: Player) -> Player:
        if not p.shield_active:
            return p
        cooldown = p.shield_cooldown + 1
        if cooldown >= config.SHIELD_DURATION_TICKS:
            return replace(p, shield_active=False, shield_cooldown=0)
        return replace(p, shield_cooldown=cooldown)
